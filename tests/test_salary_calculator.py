"""Unit tests for SalaryCalculator."""

from dataclasses import replace
from decimal import Decimal

from salary_engine.calculators.salary_calculator import SalaryCalculator, compute
from salary_engine.calculators.types import InsuranceType, Region


class TestConcreteScenarios:
    """Worked examples under the statutory rate table."""

    def test_income_below_personal_deduction(self, calculator, make_employee):
        """10M gross, no dependents: insurance only, no tax."""
        result = calculator.compute(make_employee(gross=10_000_000))

        assert result.social_insurance_base == Decimal("10000000")
        assert result.unemployment_insurance_base == Decimal("10000000")
        assert result.retirement_insurance == Decimal("800000")
        assert result.health_insurance == Decimal("150000")
        assert result.unemployment_insurance == Decimal("100000")
        assert result.total_insurance == Decimal("1050000")
        assert result.income_before_tax == Decimal("8950000")
        assert result.total_deductions == Decimal("11000000")
        assert result.taxable_income == Decimal("0")
        assert result.tax == Decimal("0")
        assert result.net == Decimal("8950000")

    def test_one_dependent_spanning_three_brackets(self, calculator, make_employee):
        """30M gross, one dependent."""
        result = calculator.compute(make_employee(gross=30_000_000, dependents=1))

        assert result.total_insurance == Decimal("3150000")
        assert result.income_before_tax == Decimal("26850000")
        assert result.personal_deduction == Decimal("11000000")
        assert result.dependent_deduction == Decimal("4400000")
        assert result.total_deductions == Decimal("15400000")
        assert result.taxable_income == Decimal("11450000")
        assert result.tax == Decimal("967500")
        assert result.net == Decimal("25882500")

    def test_employer_cost(self, calculator, make_employee):
        """Employer pays 17.5% + 3% + 1% + 2% on top of gross."""
        result = calculator.compute(make_employee(gross=10_000_000))

        assert result.employer_retirement_insurance == Decimal("1750000")
        assert result.employer_health_insurance == Decimal("300000")
        assert result.employer_unemployment_insurance == Decimal("100000")
        assert result.employer_union_levy == Decimal("200000")
        assert result.employer_cost == Decimal("12350000")
        assert result.total_employer_contributions == Decimal("2350000")

    def test_module_level_compute(self, rates, make_employee):
        employee = make_employee(gross=30_000_000, dependents=1)
        assert compute(employee, rates) == SalaryCalculator(rates).compute(employee)


class TestZeroAndEdgeValues:
    """Calculator is total over zero inputs."""

    def test_zero_gross_yields_zero_amounts(self, calculator, make_employee):
        result = calculator.compute(make_employee(gross=0))

        for field in (
            "gross",
            "insurance_salary",
            "social_insurance_base",
            "unemployment_insurance_base",
            "retirement_insurance",
            "health_insurance",
            "unemployment_insurance",
            "total_insurance",
            "employer_retirement_insurance",
            "employer_health_insurance",
            "employer_unemployment_insurance",
            "employer_union_levy",
            "employer_cost",
            "income_before_tax",
            "taxable_income",
            "tax",
            "net",
        ):
            assert getattr(result, field) == 0, field

    def test_zero_dependents_means_zero_dependent_deduction(self, calculator, make_employee):
        result = calculator.compute(make_employee(gross=20_000_000, dependents=0))
        assert result.dependent_deduction == 0
        assert result.total_deductions == result.personal_deduction

    def test_deductions_exceeding_income_clamp_taxable_to_zero(
        self, calculator, make_employee
    ):
        result = calculator.compute(make_employee(gross=40_000_000, dependents=10))
        assert result.income_before_tax - result.total_deductions < 0
        assert result.taxable_income == 0
        assert result.tax == 0
        assert result.net == result.income_before_tax

    def test_dependent_deduction_scales_with_count(self, calculator, make_employee):
        result = calculator.compute(make_employee(gross=50_000_000, dependents=3))
        assert result.dependent_deduction == Decimal("13200000")


class TestInsuranceCaps:
    """Retirement/health and unemployment bases are capped independently."""

    def test_caps_diverge_above_both_ceilings(self, calculator, make_employee):
        """Region IV: 20 x 3.45M = 69M vs. 20 x 2.34M = 46.8M."""
        result = calculator.compute(
            make_employee(
                gross=80_000_000,
                custom_insurance_salary=100_000_000,
                region=Region.REGION_IV,
            )
        )

        assert result.insurance_salary == Decimal("100000000")
        assert result.social_insurance_base == Decimal("46800000")
        assert result.unemployment_insurance_base == Decimal("69000000")
        assert result.social_insurance_base != result.unemployment_insurance_base

        assert result.retirement_insurance == Decimal("46800000") * Decimal("0.08")
        assert result.health_insurance == Decimal("46800000") * Decimal("0.015")
        assert result.unemployment_insurance == Decimal("69000000") * Decimal("0.01")

    def test_only_social_cap_reached(self, calculator, make_employee):
        """60M sits above 46.8M but below region I's 99.2M."""
        result = calculator.compute(make_employee(gross=60_000_000))

        assert result.social_insurance_base == Decimal("46800000")
        assert result.unemployment_insurance_base == Decimal("60000000")

    def test_unemployment_cap_depends_on_region(self, calculator, make_employee):
        caps = {
            region: calculator.compute(
                make_employee(gross=200_000_000, region=region)
            ).unemployment_insurance_base
            for region in Region
        }
        assert caps == {
            Region.REGION_I: Decimal("99200000"),
            Region.REGION_II: Decimal("88200000"),
            Region.REGION_III: Decimal("77200000"),
            Region.REGION_IV: Decimal("69000000"),
        }

    def test_employer_shares_use_capped_bases(self, calculator, make_employee):
        result = calculator.compute(
            make_employee(gross=200_000_000, region=Region.REGION_II)
        )
        assert result.employer_retirement_insurance == Decimal("46800000") * Decimal("0.175")
        assert result.employer_health_insurance == Decimal("46800000") * Decimal("0.03")
        assert result.employer_unemployment_insurance == Decimal("88200000") * Decimal("0.01")

    def test_union_levy_uses_uncapped_insurance_salary(self, calculator, make_employee):
        result = calculator.compute(make_employee(gross=200_000_000))
        assert result.employer_union_levy == Decimal("4000000")
        assert result.employer_cost == (
            result.gross
            + result.employer_retirement_insurance
            + result.employer_health_insurance
            + result.employer_unemployment_insurance
            + Decimal("200000000") * Decimal("0.02")
        )


class TestCustomInsuranceSalary:
    """Custom insurance salary replaces gross only for insurance."""

    def test_custom_below_gross(self, calculator, make_employee):
        result = calculator.compute(
            make_employee(gross=30_000_000, custom_insurance_salary=5_000_000)
        )

        assert result.gross == Decimal("30000000")
        assert result.insurance_salary == Decimal("5000000")
        assert result.total_insurance == Decimal("525000")
        assert result.income_before_tax == Decimal("29475000")
        assert result.employer_union_levy == Decimal("100000")
        assert result.employer_cost == Decimal("30000000") + Decimal("5000000") * Decimal("0.235")

    def test_custom_above_gross(self, calculator, make_employee):
        result = calculator.compute(
            make_employee(gross=10_000_000, custom_insurance_salary=20_000_000)
        )
        assert result.total_insurance == Decimal("2100000")
        assert result.income_before_tax == Decimal("7900000")

    def test_custom_amount_ignored_for_gross_basis(self, calculator, make_employee):
        employee = make_employee(gross=10_000_000)
        with_stale_custom = replace(
            employee,
            insurance_type=InsuranceType.GROSS,
            custom_insurance_salary=Decimal("99000000"),
        )
        assert calculator.compute(with_stale_custom) == calculator.compute(employee)


class TestDeterminism:
    """No hidden state between calls."""

    def test_repeated_calls_identical(self, calculator, make_employee):
        employee = make_employee(gross=45_500_000, dependents=2, region=Region.REGION_III)
        first = calculator.compute(employee)
        second = calculator.compute(employee)

        assert first == second
        assert first.to_dict() == second.to_dict()
        assert str(first.net) == str(second.net)

    def test_net_identity(self, calculator, make_employee):
        result = calculator.compute(make_employee(gross=123_456_789, dependents=2))
        assert result.net == result.gross - result.total_insurance - result.tax

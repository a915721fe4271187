"""Gross-to-net salary calculation."""

from __future__ import annotations

import logging
from decimal import Decimal

from salary_engine.calculators.rate_table import RateTable
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.types import Employee, SalaryBreakdown

logger = logging.getLogger(__name__)


class SalaryCalculator:
    """Derives a SalaryBreakdown from an Employee under a RateTable.

    Calculation order (per employee):
    1) Insurance salary: gross, or the custom amount
    2) Capped bases: retirement/health capped at 20x base salary,
       unemployment capped at 20x the region's minimum wage
    3) Employee insurance withholding on the capped bases
    4) Employer cost: gross + employer shares on the capped bases
       + union levy on the uncapped insurance salary
    5) Income before tax = gross - employee insurance
    6) Deductions: personal + dependents x dependent deduction
    7) Taxable income, floored at zero
    8) Progressive tax
    9) Net = gross - employee insurance - tax

    No rounding is applied and inputs are not validated; amounts are
    expected to be non-negative Decimals.
    """

    def __init__(self, rates: RateTable):
        self.rates = rates
        self.tax_calculator = TaxCalculator(rates.tax_brackets)

    def compute(self, employee: Employee) -> SalaryBreakdown:
        rates = self.rates
        gross = employee.gross_salary

        insurance_salary = employee.insurance_salary
        social_base = min(insurance_salary, rates.social_insurance_cap())
        unemployment_base = min(
            insurance_salary, rates.unemployment_insurance_cap(employee.region)
        )

        ee = rates.employee_rates
        retirement = social_base * ee.retirement
        health = social_base * ee.health
        unemployment = unemployment_base * ee.unemployment
        total_insurance = retirement + health + unemployment

        er = rates.employer_rates
        employer_retirement = social_base * er.retirement
        employer_health = social_base * er.health
        employer_unemployment = unemployment_base * er.unemployment
        employer_levy = insurance_salary * er.union_levy
        employer_cost = (
            gross
            + employer_retirement
            + employer_health
            + employer_unemployment
            + employer_levy
        )

        income_before_tax = gross - total_insurance

        personal_deduction = rates.personal_deduction
        dependent_deduction = employee.dependents * rates.dependent_deduction
        total_deductions = personal_deduction + dependent_deduction

        taxable_income = max(Decimal("0"), income_before_tax - total_deductions)
        tax = self.tax_calculator.calculate(taxable_income)

        net = gross - total_insurance - tax

        logger.debug(
            "Computed salary for %s: gross=%s taxable=%s tax=%s net=%s",
            employee.id,
            gross,
            taxable_income,
            tax,
            net,
        )

        return SalaryBreakdown(
            gross=gross,
            insurance_salary=insurance_salary,
            social_insurance_base=social_base,
            unemployment_insurance_base=unemployment_base,
            retirement_insurance=retirement,
            health_insurance=health,
            unemployment_insurance=unemployment,
            total_insurance=total_insurance,
            employer_retirement_insurance=employer_retirement,
            employer_health_insurance=employer_health,
            employer_unemployment_insurance=employer_unemployment,
            employer_union_levy=employer_levy,
            employer_cost=employer_cost,
            income_before_tax=income_before_tax,
            personal_deduction=personal_deduction,
            dependent_deduction=dependent_deduction,
            total_deductions=total_deductions,
            taxable_income=taxable_income,
            tax=tax,
            net=net,
        )


def compute(employee: Employee, rates: RateTable) -> SalaryBreakdown:
    """Compute the salary breakdown for one employee."""
    return SalaryCalculator(rates).compute(employee)

"""Statutory rate table: insurance rates, caps, deductions and tax brackets.

A RateTable is built once per process and never mutated afterwards
(frozen dataclasses). Shape rules are checked at construction time so the
calculator itself can stay a total function.

JSON layout (as produced by ``RateTable.to_dict``):

    {
        "base_salary": "2340000",
        "insurance_cap_multiplier": 20,
        "regional_min_wage": {"1": "4960000", "2": "4410000", ...},
        "employee_rates": {"retirement": "0.08", "health": "0.015",
                           "unemployment": "0.01"},
        "employer_rates": {"retirement": "0.175", "health": "0.03",
                           "unemployment": "0.01", "union_levy": "0.02"},
        "personal_deduction": "11000000",
        "dependent_deduction": "4400000",
        "tax_brackets": [{"upper_bound": "5000000", "rate": "0.05"}, ...,
                         {"upper_bound": null, "rate": "0.35"}]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from salary_engine.calculators.types import Region, TaxBracket


class RateTableError(ValueError):
    """Raised when a rate table is malformed."""


def _to_decimal(value: Any, name: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise RateTableError(f"{name} is not a number: {value!r}") from e
    if not amount.is_finite():
        raise RateTableError(f"{name} must be finite: {value!r}")
    return amount


def _to_multiplier(value: Any) -> int:
    multiplier = _to_decimal(value, "insurance_cap_multiplier")
    if multiplier != multiplier.to_integral_value():
        raise RateTableError(
            f"insurance_cap_multiplier must be a whole number: {value!r}"
        )
    return int(multiplier)


def _check_non_negative(name: str, value: Any) -> None:
    if not isinstance(value, Decimal) or not value.is_finite():
        raise RateTableError(f"{name} must be a finite Decimal: {value!r}")
    if value < 0:
        raise RateTableError(f"{name} must not be negative: {value}")


@dataclass(frozen=True)
class EmployeeInsuranceRates:
    """Employee-side contribution rates, as decimals (0.08 = 8%)."""

    retirement: Decimal
    health: Decimal
    unemployment: Decimal

    @property
    def total(self) -> Decimal:
        return self.retirement + self.health + self.unemployment


@dataclass(frozen=True)
class EmployerInsuranceRates:
    """Employer-side contribution rates.

    union_levy is charged on the uncapped insurance salary; the other three
    use the same capped bases as the employee side.
    """

    retirement: Decimal
    health: Decimal
    unemployment: Decimal
    union_levy: Decimal

    @property
    def total(self) -> Decimal:
        return self.retirement + self.health + self.unemployment + self.union_levy


@dataclass(frozen=True)
class RateTable:
    """Process-wide payroll configuration."""

    base_salary: Decimal
    regional_min_wage: Mapping[Region, Decimal]
    employee_rates: EmployeeInsuranceRates
    employer_rates: EmployerInsuranceRates
    personal_deduction: Decimal
    dependent_deduction: Decimal
    tax_brackets: tuple[TaxBracket, ...]
    insurance_cap_multiplier: int = 20
    name: str = field(default="custom", compare=False)

    def __post_init__(self) -> None:
        """Validate table shape and freeze the containers."""
        missing = [r for r in Region if r not in self.regional_min_wage]
        if missing:
            raise RateTableError(
                f"regional_min_wage missing regions: {[int(r) for r in missing]}"
            )
        object.__setattr__(
            self, "regional_min_wage", MappingProxyType(dict(self.regional_min_wage))
        )
        object.__setattr__(self, "tax_brackets", tuple(self.tax_brackets))

        amounts = {
            "base_salary": self.base_salary,
            "personal_deduction": self.personal_deduction,
            "dependent_deduction": self.dependent_deduction,
            "employee_rates.retirement": self.employee_rates.retirement,
            "employee_rates.health": self.employee_rates.health,
            "employee_rates.unemployment": self.employee_rates.unemployment,
            "employer_rates.retirement": self.employer_rates.retirement,
            "employer_rates.health": self.employer_rates.health,
            "employer_rates.unemployment": self.employer_rates.unemployment,
            "employer_rates.union_levy": self.employer_rates.union_levy,
        }
        for region, wage in self.regional_min_wage.items():
            amounts[f"regional_min_wage[{int(region)}]"] = wage
        for index, bracket in enumerate(self.tax_brackets):
            amounts[f"tax_brackets[{index}].rate"] = bracket.rate
            if bracket.upper_bound is not None:
                amounts[f"tax_brackets[{index}].upper_bound"] = bracket.upper_bound
        for name, value in amounts.items():
            _check_non_negative(name, value)

        if (
            isinstance(self.insurance_cap_multiplier, bool)
            or not isinstance(self.insurance_cap_multiplier, int)
            or self.insurance_cap_multiplier < 1
        ):
            raise RateTableError("insurance_cap_multiplier must be at least 1")
        if not self.tax_brackets:
            raise RateTableError("tax_brackets must not be empty")
        if self.tax_brackets[-1].upper_bound is not None:
            raise RateTableError("last tax bracket must be unbounded")

        previous_bound = Decimal("0")
        previous_rate: Decimal | None = None
        for index, bracket in enumerate(self.tax_brackets):
            if bracket.upper_bound is None and index != len(self.tax_brackets) - 1:
                raise RateTableError("only the last tax bracket may be unbounded")
            if bracket.upper_bound is not None and bracket.upper_bound <= previous_bound:
                raise RateTableError(
                    f"tax bracket bounds must be strictly increasing "
                    f"(bracket {index}: {bracket.upper_bound} <= {previous_bound})"
                )
            if previous_rate is not None and bracket.rate <= previous_rate:
                raise RateTableError(
                    f"tax bracket rates must be strictly increasing "
                    f"(bracket {index}: {bracket.rate} <= {previous_rate})"
                )
            if bracket.upper_bound is not None:
                previous_bound = bracket.upper_bound
            previous_rate = bracket.rate

    def social_insurance_cap(self) -> Decimal:
        """Ceiling for the retirement and health insurance base."""
        return self.insurance_cap_multiplier * self.base_salary

    def unemployment_insurance_cap(self, region: Region) -> Decimal:
        """Ceiling for the unemployment insurance base in a region."""
        return self.insurance_cap_multiplier * self.regional_min_wage[region]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation (amounts as strings)."""
        return {
            "name": self.name,
            "base_salary": str(self.base_salary),
            "insurance_cap_multiplier": self.insurance_cap_multiplier,
            "regional_min_wage": {
                str(int(region)): str(amount)
                for region, amount in sorted(self.regional_min_wage.items())
            },
            "employee_rates": {
                "retirement": str(self.employee_rates.retirement),
                "health": str(self.employee_rates.health),
                "unemployment": str(self.employee_rates.unemployment),
            },
            "employer_rates": {
                "retirement": str(self.employer_rates.retirement),
                "health": str(self.employer_rates.health),
                "unemployment": str(self.employer_rates.unemployment),
                "union_levy": str(self.employer_rates.union_levy),
            },
            "personal_deduction": str(self.personal_deduction),
            "dependent_deduction": str(self.dependent_deduction),
            "tax_brackets": [
                {
                    "upper_bound": (
                        str(b.upper_bound) if b.upper_bound is not None else None
                    ),
                    "rate": str(b.rate),
                }
                for b in self.tax_brackets
            ],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> RateTable:
        """Build a rate table from its JSON representation."""
        try:
            employee = payload["employee_rates"]
            employer = payload["employer_rates"]

            regional: dict[Region, Decimal] = {}
            for key, amount in payload["regional_min_wage"].items():
                try:
                    region = Region(int(key))
                except ValueError as e:
                    raise RateTableError(f"unknown region: {key!r}") from e
                regional[region] = _to_decimal(amount, f"regional_min_wage[{key}]")

            brackets = []
            for i, b in enumerate(payload["tax_brackets"]):
                bound = b.get("upper_bound")
                brackets.append(
                    TaxBracket(
                        upper_bound=(
                            _to_decimal(bound, f"tax_brackets[{i}].upper_bound")
                            if bound is not None
                            else None
                        ),
                        rate=_to_decimal(b["rate"], f"tax_brackets[{i}].rate"),
                    )
                )

            return cls(
                base_salary=_to_decimal(payload["base_salary"], "base_salary"),
                regional_min_wage=regional,
                employee_rates=EmployeeInsuranceRates(
                    retirement=_to_decimal(employee["retirement"], "employee_rates.retirement"),
                    health=_to_decimal(employee["health"], "employee_rates.health"),
                    unemployment=_to_decimal(
                        employee["unemployment"], "employee_rates.unemployment"
                    ),
                ),
                employer_rates=EmployerInsuranceRates(
                    retirement=_to_decimal(employer["retirement"], "employer_rates.retirement"),
                    health=_to_decimal(employer["health"], "employer_rates.health"),
                    unemployment=_to_decimal(
                        employer["unemployment"], "employer_rates.unemployment"
                    ),
                    union_levy=_to_decimal(employer["union_levy"], "employer_rates.union_levy"),
                ),
                personal_deduction=_to_decimal(
                    payload["personal_deduction"], "personal_deduction"
                ),
                dependent_deduction=_to_decimal(
                    payload["dependent_deduction"], "dependent_deduction"
                ),
                tax_brackets=tuple(brackets),
                insurance_cap_multiplier=_to_multiplier(
                    payload.get("insurance_cap_multiplier", 20)
                ),
                name=str(payload.get("name", "custom")),
            )
        except KeyError as e:
            raise RateTableError(f"rate table is missing field {e.args[0]!r}") from e
        except (TypeError, AttributeError) as e:
            raise RateTableError(f"rate table has an invalid shape: {e}") from e


def default_rate_table() -> RateTable:
    """Vietnamese statutory rates effective July 2024."""
    return RateTable(
        name="VN-2024-07",
        base_salary=Decimal("2340000"),
        regional_min_wage={
            Region.REGION_I: Decimal("4960000"),
            Region.REGION_II: Decimal("4410000"),
            Region.REGION_III: Decimal("3860000"),
            Region.REGION_IV: Decimal("3450000"),
        },
        employee_rates=EmployeeInsuranceRates(
            retirement=Decimal("0.08"),
            health=Decimal("0.015"),
            unemployment=Decimal("0.01"),
        ),
        employer_rates=EmployerInsuranceRates(
            retirement=Decimal("0.175"),
            health=Decimal("0.03"),
            unemployment=Decimal("0.01"),
            union_levy=Decimal("0.02"),
        ),
        personal_deduction=Decimal("11000000"),
        dependent_deduction=Decimal("4400000"),
        tax_brackets=(
            TaxBracket(upper_bound=Decimal("5000000"), rate=Decimal("0.05")),
            TaxBracket(upper_bound=Decimal("10000000"), rate=Decimal("0.10")),
            TaxBracket(upper_bound=Decimal("18000000"), rate=Decimal("0.15")),
            TaxBracket(upper_bound=Decimal("32000000"), rate=Decimal("0.20")),
            TaxBracket(upper_bound=Decimal("52000000"), rate=Decimal("0.25")),
            TaxBracket(upper_bound=Decimal("80000000"), rate=Decimal("0.30")),
            TaxBracket(upper_bound=None, rate=Decimal("0.35")),
        ),
    )


def load_rate_table(path: str | Path) -> RateTable:
    """Load a rate table from a JSON file."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise RateTableError(f"cannot read rate table {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RateTableError(f"rate table {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise RateTableError(f"rate table {path} must be a JSON object")
    return RateTable.from_dict(payload)

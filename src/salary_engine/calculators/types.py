"""Type definitions for the salary calculation pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any


class Region(IntEnum):
    """Regional minimum-wage tiers (1 = highest wage)."""

    REGION_I = 1
    REGION_II = 2
    REGION_III = 3
    REGION_IV = 4


class InsuranceType(str, Enum):
    """Which amount the mandatory insurance basis is taken from."""

    GROSS = "gross"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Employee:
    """An employee's compensation record."""

    id: str
    gross_salary: Decimal
    insurance_type: InsuranceType = InsuranceType.GROSS
    custom_insurance_salary: Decimal = Decimal("0")
    dependents: int = 0
    region: Region = Region.REGION_I

    # Roster details, not used by the calculation
    name: str = ""
    role: str = ""
    department: str = ""

    @property
    def insurance_salary(self) -> Decimal:
        """Uncapped amount insurance contributions are derived from."""
        if self.insurance_type == InsuranceType.CUSTOM:
            return self.custom_insurance_salary
        return self.gross_salary


@dataclass(frozen=True)
class TaxBracket:
    """Marginal tax bracket.

    upper_bound is the cumulative ceiling of the bracket; None means the
    bracket is unbounded and absorbs all remaining income.
    """

    upper_bound: Decimal | None
    rate: Decimal


@dataclass(frozen=True)
class TaxSlice:
    """Portion of taxable income that fell into one bracket."""

    lower_bound: Decimal
    upper_bound: Decimal | None
    rate: Decimal
    amount: Decimal
    tax: Decimal


@dataclass(frozen=True)
class SalaryBreakdown:
    """All monetary figures derived for one employee."""

    gross: Decimal

    # Insurance bases
    insurance_salary: Decimal
    social_insurance_base: Decimal
    unemployment_insurance_base: Decimal

    # Employee withholding
    retirement_insurance: Decimal
    health_insurance: Decimal
    unemployment_insurance: Decimal
    total_insurance: Decimal

    # Employer contributions
    employer_retirement_insurance: Decimal
    employer_health_insurance: Decimal
    employer_unemployment_insurance: Decimal
    employer_union_levy: Decimal
    employer_cost: Decimal

    # Income tax
    income_before_tax: Decimal
    personal_deduction: Decimal
    dependent_deduction: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    tax: Decimal

    net: Decimal

    @property
    def total_employer_contributions(self) -> Decimal:
        return self.employer_cost - self.gross

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

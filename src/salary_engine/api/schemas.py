"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from salary_engine.calculators.types import Employee, InsuranceType, Region


# ============================================================================
# Request schemas
# ============================================================================


class EmployeeInput(BaseModel):
    """Employee compensation record submitted for calculation."""

    id: str = ""
    name: str = ""
    role: str = ""
    department: str = ""
    gross_salary: Decimal = Field(ge=0)
    insurance_type: InsuranceType = InsuranceType.GROSS
    custom_insurance_salary: Decimal = Field(default=Decimal("0"), ge=0)
    dependents: int = Field(default=0, ge=0)
    region: int = Field(default=1, ge=1, le=4)

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            role=self.role,
            department=self.department,
            gross_salary=self.gross_salary,
            insurance_type=self.insurance_type,
            custom_insurance_salary=self.custom_insurance_salary,
            dependents=self.dependents,
            region=Region(self.region),
        )


class SummaryRequest(BaseModel):
    """A set of employees to total."""

    employees: list[EmployeeInput]


# ============================================================================
# Response schemas
# ============================================================================


class SalaryBreakdownResponse(BaseModel):
    """Every figure derived for one employee."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str = ""
    gross: Decimal
    insurance_salary: Decimal
    social_insurance_base: Decimal
    unemployment_insurance_base: Decimal
    retirement_insurance: Decimal
    health_insurance: Decimal
    unemployment_insurance: Decimal
    total_insurance: Decimal
    employer_retirement_insurance: Decimal
    employer_health_insurance: Decimal
    employer_unemployment_insurance: Decimal
    employer_union_levy: Decimal
    employer_cost: Decimal
    income_before_tax: Decimal
    personal_deduction: Decimal
    dependent_deduction: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    tax: Decimal
    net: Decimal


class PayrollSummaryResponse(BaseModel):
    """Dashboard totals."""

    model_config = ConfigDict(from_attributes=True)

    employee_count: int
    total_gross: Decimal
    total_net: Decimal
    total_tax: Decimal
    total_employer_cost: Decimal


class SummaryResponse(BaseModel):
    """Per-employee breakdowns plus totals."""

    items: list[SalaryBreakdownResponse]
    summary: PayrollSummaryResponse


class RateTableResponse(BaseModel):
    """Active rate table, amounts as strings."""

    rate_table: dict[str, Any]


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: str | None = None

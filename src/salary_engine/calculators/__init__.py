"""Salary calculation engine."""

from salary_engine.calculators.rate_table import (
    EmployeeInsuranceRates,
    EmployerInsuranceRates,
    RateTable,
    RateTableError,
    default_rate_table,
    load_rate_table,
)
from salary_engine.calculators.salary_calculator import SalaryCalculator, compute
from salary_engine.calculators.summary import (
    PayrollSummary,
    compute_all,
    summarize,
    summarize_employees,
)
from salary_engine.calculators.tax_calculator import TaxCalculator
from salary_engine.calculators.types import (
    Employee,
    InsuranceType,
    Region,
    SalaryBreakdown,
    TaxBracket,
    TaxSlice,
)

__all__ = [
    "Employee",
    "EmployeeInsuranceRates",
    "EmployerInsuranceRates",
    "InsuranceType",
    "PayrollSummary",
    "RateTable",
    "RateTableError",
    "Region",
    "SalaryBreakdown",
    "SalaryCalculator",
    "TaxBracket",
    "TaxCalculator",
    "TaxSlice",
    "compute",
    "compute_all",
    "default_rate_table",
    "load_rate_table",
    "summarize",
    "summarize_employees",
]

"""Salary engine: gross-to-net pay, income tax and employer cost."""

from salary_engine.calculators import (
    Employee,
    InsuranceType,
    PayrollSummary,
    RateTable,
    Region,
    SalaryBreakdown,
    SalaryCalculator,
    compute,
    default_rate_table,
    summarize,
)

__version__ = "1.0.0"

__all__ = [
    "Employee",
    "InsuranceType",
    "PayrollSummary",
    "RateTable",
    "Region",
    "SalaryBreakdown",
    "SalaryCalculator",
    "compute",
    "default_rate_table",
    "summarize",
]

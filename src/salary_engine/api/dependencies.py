"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from salary_engine.calculators.rate_table import RateTable
from salary_engine.calculators.salary_calculator import SalaryCalculator
from salary_engine.config import get_rate_table


def get_rates() -> RateTable:
    """Process-wide rate table."""
    return get_rate_table()


def get_calculator(rates: Annotated[RateTable, Depends(get_rates)]) -> SalaryCalculator:
    """Calculator bound to the active rate table."""
    return SalaryCalculator(rates)


# Type aliases for cleaner dependency injection
Rates = Annotated[RateTable, Depends(get_rates)]
Calculator = Annotated[SalaryCalculator, Depends(get_calculator)]

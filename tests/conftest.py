"""Pytest fixtures for salary engine tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from salary_engine.calculators.rate_table import RateTable, default_rate_table
from salary_engine.calculators.salary_calculator import SalaryCalculator
from salary_engine.calculators.types import Employee, InsuranceType, Region


@pytest.fixture
def rates() -> RateTable:
    """Statutory rate table."""
    return default_rate_table()


@pytest.fixture
def calculator(rates: RateTable) -> SalaryCalculator:
    """Calculator bound to the statutory rate table."""
    return SalaryCalculator(rates)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Factory for employees with sensible defaults."""

    def _make(
        gross: int | str | Decimal = 0,
        dependents: int = 0,
        region: Region = Region.REGION_I,
        custom_insurance_salary: int | str | Decimal | None = None,
        employee_id: str = "NV1001",
    ) -> Employee:
        return Employee(
            id=employee_id,
            name="Nguyen Van A",
            department="Engineering",
            gross_salary=Decimal(gross),
            insurance_type=(
                InsuranceType.CUSTOM
                if custom_insurance_salary is not None
                else InsuranceType.GROSS
            ),
            custom_insurance_salary=Decimal(custom_insurance_salary or 0),
            dependents=dependents,
            region=region,
        )

    return _make


@pytest.fixture
def roster_rows() -> list[dict]:
    """Roster rows as they come back from the spreadsheet endpoint."""
    return [
        {
            "id": "NV1001",
            "name": "Nguyen Van A",
            "role": "Engineer",
            "grossSalary": 10000000,
            "insuranceType": "gross",
            "customInsuranceSalary": 0,
            "dependents": 0,
            "region": 1,
            "department": "Engineering",
        },
        {
            "id": "NV1002",
            "name": "Tran Thi B",
            "role": "Manager",
            "grossSalary": "30000000",
            "insuranceType": "gross",
            "customInsuranceSalary": "",
            "dependents": "1",
            "region": "1",
            "department": "Operations",
        },
    ]

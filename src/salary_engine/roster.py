"""Roster record coercion.

Roster rows arrive from the spreadsheet endpoint or a local JSON file with
loosely typed cells: numbers may be strings, blanks or missing entirely.
This module turns such rows into Employee values and back.
"""

from __future__ import annotations

import json
import logging
import random
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Iterable, Mapping

from salary_engine.calculators.types import Employee, InsuranceType, Region

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when a roster file cannot be read."""


def _coerce_amount(value: Any) -> Decimal:
    """Parse a cell as a Decimal; blanks and garbage become 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


def _coerce_count(value: Any) -> int:
    """Whole non-negative count; fractions truncate, negatives become 0."""
    return max(0, int(_coerce_amount(value)))


def _coerce_region(value: Any) -> Region:
    number = int(_coerce_amount(value))
    try:
        return Region(number)
    except ValueError:
        return Region.REGION_I


def employee_from_record(record: Mapping[str, Any]) -> Employee:
    """Build an Employee from a roster row."""
    insurance_type = (
        InsuranceType.CUSTOM
        if str(record.get("insuranceType", "")).strip().lower() == InsuranceType.CUSTOM.value
        else InsuranceType.GROSS
    )
    return Employee(
        id=str(record.get("id") or ""),
        name=str(record.get("name") or ""),
        role=str(record.get("role") or ""),
        department=str(record.get("department") or ""),
        gross_salary=_coerce_amount(record.get("grossSalary")),
        insurance_type=insurance_type,
        custom_insurance_salary=_coerce_amount(record.get("customInsuranceSalary")),
        dependents=_coerce_count(record.get("dependents")),
        region=_coerce_region(record.get("region")),
    )


def employee_to_record(employee: Employee) -> dict[str, Any]:
    """Roster row for an Employee (inverse of employee_from_record)."""
    return {
        "id": employee.id,
        "name": employee.name,
        "role": employee.role,
        "grossSalary": str(employee.gross_salary),
        "insuranceType": employee.insurance_type.value,
        "customInsuranceSalary": str(employee.custom_insurance_salary),
        "dependents": employee.dependents,
        "region": int(employee.region),
        "department": employee.department,
    }


def load_roster(path: str | Path) -> list[Employee]:
    """Read employees from a JSON file holding a list of roster rows."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise RosterError(f"cannot read roster {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RosterError(f"roster {path} is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise RosterError(f"roster {path} must be a JSON list")

    employees = []
    for index, row in enumerate(payload):
        if not isinstance(row, dict):
            raise RosterError(f"roster {path} row {index} is not an object")
        employees.append(employee_from_record(row))

    logger.info("Loaded %d employees from %s", len(employees), path)
    return employees


def generate_employee_id() -> str:
    """New employee id in the roster's "NV" + 4 digits form."""
    return f"NV{random.randint(1000, 9999)}"


def filter_employees(employees: Iterable[Employee], term: str) -> list[Employee]:
    """Case-insensitive search over name, department and id."""
    needle = term.lower()
    return [
        e
        for e in employees
        if needle in e.name.lower()
        or needle in e.department.lower()
        or needle in e.id.lower()
    ]

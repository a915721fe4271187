"""Organization-wide totals across salary breakdowns."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Iterable, Sequence

from salary_engine.calculators.rate_table import RateTable
from salary_engine.calculators.salary_calculator import SalaryCalculator
from salary_engine.calculators.types import Employee, SalaryBreakdown


@dataclass(frozen=True)
class PayrollSummary:
    """Dashboard totals for a set of employees."""

    employee_count: int = 0
    total_gross: Decimal = Decimal("0")
    total_net: Decimal = Decimal("0")
    total_tax: Decimal = Decimal("0")
    total_employer_cost: Decimal = Decimal("0")

    def add(self, breakdown: SalaryBreakdown) -> PayrollSummary:
        return PayrollSummary(
            employee_count=self.employee_count + 1,
            total_gross=self.total_gross + breakdown.gross,
            total_net=self.total_net + breakdown.net,
            total_tax=self.total_tax + breakdown.tax,
            total_employer_cost=self.total_employer_cost + breakdown.employer_cost,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(breakdowns: Iterable[SalaryBreakdown]) -> PayrollSummary:
    """Fold breakdowns into a PayrollSummary."""
    summary = PayrollSummary()
    for breakdown in breakdowns:
        summary = summary.add(breakdown)
    return summary


def compute_all(
    employees: Sequence[Employee],
    rates: RateTable,
    max_workers: int | None = None,
) -> list[SalaryBreakdown]:
    """Compute breakdowns for every employee, in input order.

    With max_workers > 1 the per-employee calculations run on a thread pool.
    """
    calculator = SalaryCalculator(rates)
    if max_workers is None or max_workers <= 1 or len(employees) <= 1:
        return [calculator.compute(e) for e in employees]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(calculator.compute, employees))


def summarize_employees(
    employees: Sequence[Employee],
    rates: RateTable,
    max_workers: int | None = None,
) -> PayrollSummary:
    """Compute and total the breakdowns for a set of employees."""
    return summarize(compute_all(employees, rates, max_workers=max_workers))

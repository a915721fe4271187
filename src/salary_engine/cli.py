"""Salary engine command line interface.

Usage:
    python -m salary_engine.cli compute --gross 30000000 --dependents 1
    python -m salary_engine.cli summarize roster.json --workers 4
    python -m salary_engine.cli rate-table
    python -m salary_engine.cli serve
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable

from salary_engine.calculators.rate_table import RateTableError
from salary_engine.calculators.salary_calculator import SalaryCalculator
from salary_engine.calculators.summary import compute_all, summarize
from salary_engine.calculators.types import (
    Employee,
    InsuranceType,
    Region,
    SalaryBreakdown,
)
from salary_engine.config import get_rate_table, get_settings
from salary_engine.formatting import format_percent, format_vnd
from salary_engine.roster import RosterError, load_roster

logger = logging.getLogger(__name__)


def parse_amount(s: str) -> Decimal:
    """Parse a non-negative amount; accepts 1_000_000 and 1,000,000."""
    try:
        amount = Decimal(s.replace(",", "").replace("_", ""))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not an amount: {s!r}") from None
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"amount must be non-negative: {s!r}")
    return amount


def parse_region(s: str) -> Region:
    """Parse a region number 1-4."""
    try:
        return Region(int(s))
    except ValueError:
        raise argparse.ArgumentTypeError(f"region must be 1, 2, 3 or 4: {s!r}") from None


def parse_count(s: str) -> int:
    """Parse a non-negative integer."""
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {s!r}")
    return value


class SalaryCli:
    """Salary engine command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m salary_engine.cli",
            description="Gross-to-net salary calculator",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # compute command
        compute = subparsers.add_parser(
            "compute",
            help="Compute the salary breakdown for one employee",
        )
        compute.add_argument(
            "--gross",
            type=parse_amount,
            required=True,
            help="Gross monthly salary (VND)",
        )
        compute.add_argument(
            "--dependents",
            type=parse_count,
            default=0,
            help="Number of registered dependents (default: 0)",
        )
        compute.add_argument(
            "--region",
            type=parse_region,
            default=Region.REGION_I,
            help="Regional minimum-wage tier 1-4 (default: 1)",
        )
        compute.add_argument(
            "--insurance-salary",
            type=parse_amount,
            help="Custom insurance salary (default: use gross)",
        )
        compute.add_argument(
            "--json",
            action="store_true",
            help="Print JSON instead of a table",
        )

        # summarize command
        summarize_cmd = subparsers.add_parser(
            "summarize",
            help="Compute breakdowns and totals for a roster file",
        )
        summarize_cmd.add_argument(
            "roster",
            type=str,
            help="JSON file with a list of roster rows",
        )
        summarize_cmd.add_argument(
            "--workers",
            type=parse_count,
            default=None,
            help="Compute employees on a thread pool of this size",
        )
        summarize_cmd.add_argument(
            "--json",
            action="store_true",
            help="Print JSON instead of a table",
        )

        # rate-table command
        subparsers.add_parser(
            "rate-table",
            help="Print the active rate table as JSON",
        )

        # serve command
        subparsers.add_parser(
            "serve",
            help="Run the HTTP API",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 2

        handlers: dict[str, Callable[..., int]] = {
            "compute": self._cmd_compute,
            "summarize": self._cmd_summarize,
            "rate-table": self._cmd_rate_table,
            "serve": self._cmd_serve,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 2

        try:
            return handler(parsed)
        except (RateTableError, RosterError) as e:
            logger.error("%s", e)
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    def _cmd_compute(self, args: argparse.Namespace) -> int:
        """Compute one breakdown."""
        rates = get_rate_table()
        employee = Employee(
            id="cli",
            gross_salary=args.gross,
            insurance_type=(
                InsuranceType.CUSTOM
                if args.insurance_salary is not None
                else InsuranceType.GROSS
            ),
            custom_insurance_salary=args.insurance_salary or Decimal("0"),
            dependents=args.dependents,
            region=args.region,
        )
        breakdown = SalaryCalculator(rates).compute(employee)

        if args.json:
            print(json.dumps(breakdown.to_dict(), indent=2, default=str))
            return 0

        ee = rates.employee_rates
        rows = [
            ("Gross salary", breakdown.gross),
            (f"Retirement insurance ({format_percent(ee.retirement)})", breakdown.retirement_insurance),
            (f"Health insurance ({format_percent(ee.health)})", breakdown.health_insurance),
            (f"Unemployment insurance ({format_percent(ee.unemployment)})", breakdown.unemployment_insurance),
            ("Total insurance", breakdown.total_insurance),
            ("Income before tax", breakdown.income_before_tax),
            ("Personal deduction", breakdown.personal_deduction),
            ("Dependent deduction", breakdown.dependent_deduction),
            ("Taxable income", breakdown.taxable_income),
            ("Personal income tax", breakdown.tax),
            ("Net salary", breakdown.net),
            ("Employer cost", breakdown.employer_cost),
        ]
        self._print_rows(rows)
        return 0

    def _cmd_summarize(self, args: argparse.Namespace) -> int:
        """Compute breakdowns and totals for a roster."""
        rates = get_rate_table()
        employees = load_roster(args.roster)
        breakdowns = compute_all(employees, rates, max_workers=args.workers)
        summary = summarize(breakdowns)

        if args.json:
            output = {
                "items": [
                    {"employee_id": e.id, **b.to_dict()}
                    for e, b in zip(employees, breakdowns)
                ],
                "summary": summary.to_dict(),
            }
            print(json.dumps(output, indent=2, default=str))
            return 0

        print(f"Payroll summary: {args.roster}")
        print("=" * 72)
        for employee, breakdown in zip(employees, breakdowns):
            self._print_employee(employee, breakdown)
        print("-" * 72)
        self._print_rows(
            [
                ("Employees", summary.employee_count),
                ("Total gross", summary.total_gross),
                ("Total net", summary.total_net),
                ("Total tax", summary.total_tax),
                ("Total employer cost", summary.total_employer_cost),
            ]
        )
        return 0

    def _cmd_rate_table(self, args: argparse.Namespace) -> int:
        """Print the active rate table."""
        print(json.dumps(get_rate_table().to_dict(), indent=2))
        return 0

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Run the HTTP API."""
        from salary_engine.__main__ import main as serve

        serve()
        return 0

    @staticmethod
    def _print_employee(employee: Employee, breakdown: SalaryBreakdown) -> None:
        label = f"{employee.id} {employee.name}".strip()
        print(
            f"{label:<24} gross {format_vnd(breakdown.gross):>16}"
            f"  net {format_vnd(breakdown.net):>16}"
        )

    @staticmethod
    def _print_rows(rows: list[tuple[str, Decimal | int]]) -> None:
        for label, value in rows:
            text = format_vnd(value) if isinstance(value, Decimal) else str(value)
            print(f"  {label:<36} {text:>20}")


def main() -> int:
    """CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())

"""Progressive personal income tax."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from salary_engine.calculators.types import TaxBracket, TaxSlice

ZERO = Decimal("0")


class TaxCalculator:
    """Marginal-bracket income tax.

    Each bracket's rate applies only to the slice of income between the
    previous bracket's bound and its own, so tax is continuous at every
    bound. Brackets must be ordered by ascending bound with the unbounded
    bracket last (RateTable enforces this).
    """

    def __init__(self, brackets: Sequence[TaxBracket]):
        self.brackets = tuple(brackets)

    def calculate(self, taxable_income: Decimal) -> Decimal:
        """Total tax owed on taxable_income."""
        return sum((s.tax for s in self.slices(taxable_income)), ZERO)

    def slices(self, taxable_income: Decimal) -> list[TaxSlice]:
        """Per-bracket breakdown of the tax on taxable_income.

        Only brackets that receive a positive amount are returned.
        """
        result: list[TaxSlice] = []
        remaining = taxable_income
        previous_bound = ZERO

        for bracket in self.brackets:
            if remaining <= 0:
                break

            if bracket.upper_bound is None:
                in_bracket = remaining
            else:
                span = bracket.upper_bound - previous_bound
                in_bracket = min(max(ZERO, remaining), span)

            if in_bracket > 0:
                result.append(
                    TaxSlice(
                        lower_bound=previous_bound,
                        upper_bound=bracket.upper_bound,
                        rate=bracket.rate,
                        amount=in_bracket,
                        tax=in_bracket * bracket.rate,
                    )
                )
                remaining -= in_bracket

            if bracket.upper_bound is not None:
                previous_bound = bracket.upper_bound

        return result

    def marginal_rate(self, taxable_income: Decimal) -> Decimal:
        """Rate applied to the last unit of taxable_income (0 if none)."""
        slices = self.slices(taxable_income)
        return slices[-1].rate if slices else ZERO


def calculate_progressive_tax(
    taxable_income: Decimal, brackets: Sequence[TaxBracket]
) -> Decimal:
    """Shortcut for TaxCalculator(brackets).calculate(taxable_income)."""
    return TaxCalculator(brackets).calculate(taxable_income)

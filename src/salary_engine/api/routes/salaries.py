"""Salary calculation endpoints."""

from fastapi import APIRouter, status

from salary_engine.api.dependencies import Calculator, Rates
from salary_engine.api.schemas import (
    EmployeeInput,
    ErrorResponse,
    PayrollSummaryResponse,
    RateTableResponse,
    SalaryBreakdownResponse,
    SummaryRequest,
    SummaryResponse,
)
from salary_engine.calculators.summary import summarize
from salary_engine.calculators.types import SalaryBreakdown

router = APIRouter(tags=["salaries"])


def _to_response(employee_id: str, breakdown: SalaryBreakdown) -> SalaryBreakdownResponse:
    return SalaryBreakdownResponse(employee_id=employee_id, **breakdown.to_dict())


@router.get("/rate-table", response_model=RateTableResponse)
async def get_rate_table(rates: Rates) -> RateTableResponse:
    """Return the rate table used for every calculation."""
    return RateTableResponse(rate_table=rates.to_dict())


@router.post(
    "/salaries/breakdown",
    response_model=SalaryBreakdownResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def compute_breakdown(
    calculator: Calculator,
    payload: EmployeeInput,
) -> SalaryBreakdownResponse:
    """Compute insurance, tax, net pay and employer cost for one employee."""
    breakdown = calculator.compute(payload.to_employee())
    return _to_response(payload.id, breakdown)


@router.post(
    "/salaries/summary",
    response_model=SummaryResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def compute_summary(
    calculator: Calculator,
    payload: SummaryRequest,
) -> SummaryResponse:
    """Compute every employee's breakdown and the organization totals."""
    breakdowns = [calculator.compute(e.to_employee()) for e in payload.employees]
    summary = summarize(breakdowns)

    return SummaryResponse(
        items=[
            _to_response(e.id, b) for e, b in zip(payload.employees, breakdowns)
        ],
        summary=PayrollSummaryResponse(**summary.to_dict()),
    )

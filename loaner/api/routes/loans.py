"""Loan schedule routes."""

import logging

from fastapi import APIRouter

from loaner.api.schemas import ErrorResponse, ScheduleRequest, ScheduleResponse
from loaner.config import settings
from loaner.engine.builder import LoanBuilder
from loaner.models.loan import Loan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def _build_loan(req: ScheduleRequest) -> Loan:
    """Feed the request fields that were sent through the builder."""
    builder = LoanBuilder()
    if req.principal is not None:
        builder = builder.with_principal(req.principal)
    if req.annual_rate is not None:
        builder = builder.with_annual_rate(req.annual_rate)
    if req.duration_months is not None:
        builder = builder.with_duration_months(req.duration_months)
    return builder.build()


@router.post(
    "/schedule",
    response_model=ScheduleResponse,
    responses={422: {"model": ErrorResponse}},
)
def compute_schedule(req: ScheduleRequest):
    """Compute the full amortization schedule for a fixed-rate loan.

    Builder errors propagate to the app-level handler, which answers 422.
    """
    loan = _build_loan(req)

    logger.debug(
        "Computed %d-month schedule, monthly payment %.2f",
        loan.duration_months,
        loan.monthly_payment,
    )
    currency = req.currency if req.currency is not None else settings.default_currency
    return ScheduleResponse.from_loan(loan, currency=currency)

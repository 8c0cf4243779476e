"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt

from loaner.engine.debt import yearly_debt_summary
from loaner.models.loan import Loan


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    # Optional and strict so that unset fields and wrongly typed durations
    # reach the builder unchanged and come back as its errors
    principal: StrictFloat | StrictInt | None = Field(None, description="Amount borrowed")
    annual_rate: StrictFloat | StrictInt | None = Field(
        None, description="Annual rate as a fraction (0.06 for 6%)"
    )
    duration_months: StrictInt | StrictFloat | StrictBool | None = Field(
        None, description="Loan term in months"
    )
    currency: str | None = Field(None, description="Display-only currency label")


# ---- Response schemas ----

class PaymentResponse(BaseModel):
    month_index: int
    start_principal: float
    interest_part: float
    principal_part: float
    amount: float


class YearlySummaryResponse(BaseModel):
    year: int
    principal: float
    interest: float
    debt_service: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    currency: str = ""

    # Parameters
    principal: float
    annual_rate: float
    duration_months: int

    # Totals
    monthly_payment: float
    total_paid_interest: float
    total_paid: float

    payments: list[PaymentResponse]
    yearly_summary: list[YearlySummaryResponse] = []

    @classmethod
    def from_loan(cls, loan: Loan, currency: str = "") -> "ScheduleResponse":
        return cls(
            currency=currency,
            principal=loan.principal,
            annual_rate=loan.annual_rate,
            duration_months=loan.duration_months,
            monthly_payment=loan.monthly_payment,
            total_paid_interest=loan.total_paid_interest,
            total_paid=loan.total_paid,
            payments=[
                PaymentResponse(
                    month_index=p.month_index,
                    start_principal=p.start_principal,
                    interest_part=p.interest_part,
                    principal_part=p.principal_part,
                    amount=p.amount,
                )
                for p in loan.payments
            ],
            yearly_summary=[
                YearlySummaryResponse(
                    year=y.year,
                    principal=y.principal,
                    interest=y.interest,
                    debt_service=y.debt_service,
                    ending_balance=y.ending_balance,
                )
                for y in yearly_debt_summary(loan)
            ],
        )


class ErrorResponse(BaseModel):
    detail: str
    error: str

"""Amortization schedule computation.

Pure functions: floats in, frozen dataclasses out. No I/O.
"""

import math

from loaner.models.loan import Loan, LoanParameters, Payment, YearlyDebtSummary


def monthly_payment(principal: float, annual_rate: float, duration_months: int) -> float:
    """Calculate the fixed monthly payment of a fully amortizing loan."""
    r = annual_rate / 12
    n = duration_months
    if r == 0:
        # Straight-line repayment, the annuity formula is 0/0 here
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1] = P * r / [1 - (1+r)^-n]
    # Written with log1p/expm1 so tiny rates never divide by zero and long
    # terms never overflow.
    growth = n * math.log1p(r)
    return principal * r / -math.expm1(-growth)


def amortize(parameters: LoanParameters) -> Loan:
    """Build the month-by-month schedule for validated parameters.

    The balance left after the last payment is not clamped: floating-point
    drift may leave it a few ulps away from zero. Principals close to the
    largest double overflow to ``inf`` in the payment and the schedule;
    nothing is raised for them.
    """
    pmt = monthly_payment(
        parameters.principal, parameters.annual_rate, parameters.duration_months
    )
    r = parameters.monthly_rate

    payments: list[Payment] = []
    balance = parameters.principal

    for month_index in range(parameters.duration_months):
        interest = r * balance
        principal_paid = pmt - interest

        payments.append(Payment(
            month_index=month_index,
            start_principal=balance,
            interest_part=interest,
            principal_part=principal_paid,
            amount=principal_paid + interest,
        ))

        balance -= principal_paid

    total_interest = sum(p.interest_part for p in payments)

    return Loan(
        parameters=parameters,
        monthly_payment=pmt,
        payments=tuple(payments),
        total_paid_interest=total_interest,
    )


def yearly_debt_summary(loan: Loan) -> list[YearlyDebtSummary]:
    """Aggregate a loan's schedule by loan year.

    A trailing partial year (term not a multiple of 12) gets its own entry.
    """
    yearly: list[YearlyDebtSummary] = []
    year_principal = 0.0
    year_interest = 0.0
    year_debt_service = 0.0

    for p in loan.payments:
        year_principal += p.principal_part
        year_interest += p.interest_part
        year_debt_service += p.amount

        period = p.month_index + 1
        if period % 12 == 0 or period == len(loan.payments):
            yearly.append(YearlyDebtSummary(
                year=(period - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                debt_service=year_debt_service,
                ending_balance=p.end_principal,
            ))
            year_principal = 0.0
            year_interest = 0.0
            year_debt_service = 0.0

    return yearly

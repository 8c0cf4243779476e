from dataclasses import dataclass


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate: float  # Fraction, e.g. 0.06 for 6%
    duration_months: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 12


@dataclass(frozen=True)
class Payment:
    month_index: int  # 0-based
    start_principal: float
    interest_part: float
    principal_part: float
    amount: float

    @property
    def end_principal(self) -> float:
        return self.start_principal - self.principal_part


@dataclass(frozen=True)
class Loan:
    """Fully computed fixed-rate loan.

    ``payments`` is ordered by ``month_index`` and holds exactly
    ``duration_months`` entries.
    """

    parameters: LoanParameters
    monthly_payment: float
    payments: tuple[Payment, ...]
    total_paid_interest: float

    @property
    def principal(self) -> float:
        return self.parameters.principal

    @property
    def annual_rate(self) -> float:
        return self.parameters.annual_rate

    @property
    def duration_months(self) -> int:
        return self.parameters.duration_months

    @property
    def total_paid(self) -> float:
        return sum(p.amount for p in self.payments)

    @property
    def final_balance(self) -> float:
        """Remaining principal after the last payment (may drift from 0)."""
        return self.payments[-1].end_principal


@dataclass(frozen=True)
class YearlyDebtSummary:
    year: int  # 1-based loan year
    principal: float
    interest: float
    debt_service: float
    ending_balance: float

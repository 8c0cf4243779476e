"""Step-by-step construction of a validated loan.

Each ``with_*`` call validates its value immediately and returns a new
builder; the receiver is never modified, so partially filled builders can be
shared and reused freely::

    loan = (
        LoanBuilder()
        .with_principal(10_000)
        .with_annual_rate(0.06)
        .with_duration_months(12)
        .build()
    )
"""

import math
from dataclasses import dataclass, replace

from loaner.engine.debt import amortize
from loaner.errors import (
    InvalidAnnualRate,
    InvalidDuration,
    InvalidPrincipal,
    MissingAnnualRate,
    MissingDuration,
    MissingPrincipal,
)
from loaner.models.loan import Loan, LoanParameters


@dataclass(frozen=True)
class LoanBuilder:
    principal: float | None = None
    annual_rate: float | None = None
    duration_months: int | None = None

    def with_principal(self, principal: float) -> "LoanBuilder":
        if not math.isfinite(principal) or principal < 0:
            raise InvalidPrincipal(principal)
        return replace(self, principal=float(principal))

    def with_annual_rate(self, annual_rate: float) -> "LoanBuilder":
        """Set the annual rate as a fraction (0.06 for 6%), bounds inclusive."""
        if not 0 <= annual_rate <= 1:
            raise InvalidAnnualRate(annual_rate)
        return replace(self, annual_rate=float(annual_rate))

    def with_duration_months(self, duration_months: int) -> "LoanBuilder":
        """Set the term in whole months; 12.0 is accepted, 12.5 and bools are not."""
        if isinstance(duration_months, bool):
            raise InvalidDuration(duration_months)
        if isinstance(duration_months, float) and duration_months.is_integer():
            months = int(duration_months)
        elif isinstance(duration_months, int):
            months = duration_months
        else:
            raise InvalidDuration(duration_months)
        if months < 1:
            raise InvalidDuration(duration_months)
        return replace(self, duration_months=months)

    def parameters(self) -> LoanParameters:
        """Return the validated parameter set, raising if a field is unset."""
        if self.principal is None:
            raise MissingPrincipal()
        if self.annual_rate is None:
            raise MissingAnnualRate()
        if self.duration_months is None:
            raise MissingDuration()
        return LoanParameters(
            principal=self.principal,
            annual_rate=self.annual_rate,
            duration_months=self.duration_months,
        )

    def build(self) -> Loan:
        return amortize(self.parameters())

"""Canonical test fixtures used across all tests.

Fixture: 10,000 loan at 6% for 12 months (monthly rate 0.5%).
"""

import pytest

from loaner.engine.builder import LoanBuilder
from loaner.models.loan import Loan, LoanParameters


@pytest.fixture
def standard_parameters() -> LoanParameters:
    return LoanParameters(principal=10000.0, annual_rate=0.06, duration_months=12)


@pytest.fixture
def standard_builder() -> LoanBuilder:
    """Builder with every field set, ready to build."""
    return (
        LoanBuilder()
        .with_principal(10000)
        .with_annual_rate(0.06)
        .with_duration_months(12)
    )


@pytest.fixture
def standard_loan(standard_builder) -> Loan:
    return standard_builder.build()


@pytest.fixture
def zero_rate_loan() -> Loan:
    """1,200 borrowed interest-free over a year."""
    return (
        LoanBuilder()
        .with_principal(1200)
        .with_annual_rate(0)
        .with_duration_months(12)
        .build()
    )

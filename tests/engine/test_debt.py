import math

import pytest

from loaner.engine.debt import amortize, monthly_payment, yearly_debt_summary
from loaner.models.loan import LoanParameters


class TestMonthlyPayment:
    def test_standard_loan(self):
        """10,000 at 6% for 12 months."""
        pmt = monthly_payment(10000.0, 0.06, 12)
        # Expected: ~860.66
        assert pmt == pytest.approx(860.664, abs=1e-3)

    def test_matches_annuity_formula(self):
        i = 0.07 / 12
        n = 360
        expected = 400000 * i * (1 + i) ** n / ((1 + i) ** n - 1)
        assert monthly_payment(400000.0, 0.07, 360) == pytest.approx(expected, rel=1e-12)

    def test_zero_rate(self):
        pmt = monthly_payment(1200.0, 0.0, 12)
        assert pmt == 100.0

    def test_zero_principal(self):
        assert monthly_payment(0.0, 0.07, 360) == 0.0

    def test_single_month_repays_principal_plus_interest(self):
        assert monthly_payment(1000.0, 0.12, 1) == pytest.approx(1010.0)

    def test_tiny_rate_is_finite(self):
        pmt = monthly_payment(1200.0, 1e-18, 12)
        assert math.isfinite(pmt)
        assert pmt == pytest.approx(100.0)

    def test_long_term_at_max_rate_is_finite(self):
        pmt = monthly_payment(1000.0, 1.0, 100_000)
        assert math.isfinite(pmt)
        # Interest-only in the limit
        assert pmt == pytest.approx(1000.0 / 12)


class TestAmortize:
    def test_payment_count_and_order(self, standard_parameters):
        loan = amortize(standard_parameters)
        assert len(loan.payments) == 12
        assert [p.month_index for p in loan.payments] == list(range(12))

    def test_first_payment(self, standard_parameters):
        first = amortize(standard_parameters).payments[0]
        assert first.start_principal == 10000.0
        assert first.interest_part == pytest.approx(50.0)
        assert first.principal_part == pytest.approx(810.66, abs=0.01)
        assert first.amount == pytest.approx(860.66, abs=0.01)

    def test_total_interest(self, standard_parameters):
        loan = amortize(standard_parameters)
        # 12 * 860.664 - 10,000
        assert loan.total_paid_interest == pytest.approx(327.97, abs=0.01)

    def test_total_interest_is_sum_of_parts(self, standard_parameters):
        loan = amortize(standard_parameters)
        assert loan.total_paid_interest == sum(p.interest_part for p in loan.payments)

    def test_start_principal_chains(self):
        loan = amortize(LoanParameters(principal=250000.0, annual_rate=0.045, duration_months=300))
        for prev, nxt in zip(loan.payments, loan.payments[1:]):
            assert nxt.start_principal == pytest.approx(
                prev.start_principal - prev.principal_part, rel=1e-9
            )

    def test_amount_is_constant(self, standard_parameters):
        loan = amortize(standard_parameters)
        for p in loan.payments:
            assert p.amount == pytest.approx(loan.monthly_payment, rel=1e-12)

    def test_balance_decreases(self, standard_parameters):
        loan = amortize(standard_parameters)
        for i in range(1, len(loan.payments)):
            assert loan.payments[i].start_principal < loan.payments[i - 1].start_principal

    def test_final_balance_near_zero(self):
        loan = amortize(LoanParameters(principal=400000.0, annual_rate=0.07, duration_months=360))
        assert loan.final_balance == pytest.approx(0.0, abs=1e-4)

    def test_zero_rate_schedule(self, zero_rate_loan):
        assert zero_rate_loan.monthly_payment == 100.0
        for p in zero_rate_loan.payments:
            assert p.interest_part == 0.0
            assert p.principal_part == 100.0
        assert zero_rate_loan.payments[11].start_principal == 100.0
        assert zero_rate_loan.final_balance == 0.0
        assert zero_rate_loan.total_paid_interest == 0.0

    def test_zero_principal_schedule(self):
        loan = amortize(LoanParameters(principal=0.0, annual_rate=0.05, duration_months=6))
        assert len(loan.payments) == 6
        assert all(p.amount == 0.0 for p in loan.payments)
        assert loan.total_paid_interest == 0.0

    def test_single_month(self):
        loan = amortize(LoanParameters(principal=1000.0, annual_rate=0.12, duration_months=1))
        assert len(loan.payments) == 1
        only = loan.payments[0]
        assert only.interest_part == pytest.approx(10.0)
        assert only.amount == pytest.approx(1000.0 + only.interest_part)
        assert only.end_principal == pytest.approx(0.0, abs=1e-9)

    def test_idempotent(self, standard_parameters):
        assert amortize(standard_parameters) == amortize(standard_parameters)

    def test_total_paid(self, standard_parameters):
        loan = amortize(standard_parameters)
        assert loan.total_paid == pytest.approx(loan.principal + loan.total_paid_interest)


class TestYearlyDebtSummary:
    def test_whole_years(self):
        loan = amortize(LoanParameters(principal=400000.0, annual_rate=0.07, duration_months=84))
        yearly = yearly_debt_summary(loan)
        assert [y.year for y in yearly] == list(range(1, 8))

    def test_partial_last_year(self):
        loan = amortize(LoanParameters(principal=5000.0, annual_rate=0.05, duration_months=18))
        yearly = yearly_debt_summary(loan)
        assert len(yearly) == 2
        assert yearly[-1].debt_service == pytest.approx(loan.monthly_payment * 6)

    def test_yearly_totals_match(self):
        loan = amortize(LoanParameters(principal=400000.0, annual_rate=0.07, duration_months=360))
        yearly = yearly_debt_summary(loan)
        assert sum(y.interest for y in yearly) == pytest.approx(loan.total_paid_interest)
        assert sum(y.principal for y in yearly) == pytest.approx(loan.principal)

    def test_debt_service_equals_12_payments(self):
        loan = amortize(LoanParameters(principal=400000.0, annual_rate=0.07, duration_months=360))
        for y in yearly_debt_summary(loan):
            assert y.debt_service == pytest.approx(loan.monthly_payment * 12)

    def test_ending_balance_is_end_of_year(self, standard_loan):
        (only,) = yearly_debt_summary(standard_loan)
        assert only.ending_balance == standard_loan.final_balance


class TestOverflow:
    def test_huge_principal_overflows_without_raising(self):
        loan = amortize(LoanParameters(principal=1.7e308, annual_rate=1.0, duration_months=1))
        assert math.isinf(loan.monthly_payment)
        assert math.isinf(loan.payments[0].amount)

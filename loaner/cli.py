"""Terminal wizard: prompts for a loan and prints its amortization schedule.

Usage:
    python -m loaner.cli
    python -m loaner.cli --currency € --principal 10000 --rate 6 --months 12
    python -m loaner.cli --principal 250000 --rate 4.5 --months 300 --yearly
    python -m loaner.cli --api-url http://localhost:8000
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from typing import TypeVar

import httpx

from loaner.api.schemas import ScheduleResponse
from loaner.config import settings
from loaner.engine.builder import LoanBuilder
from loaner.errors import LoanBuilderError
from loaner.models.loan import Loan

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PromptError(Exception):
    """Raised when terminal input cannot be parsed."""


# What the user was entering when each builder error occurred
ERROR_CONTEXT = {
    "InvalidPrincipal": "Invalid loan amount",
    "InvalidAnnualRate": "Invalid loan annual interest rates",
    "InvalidDuration": "Invalid loan duration",
}


def error_context(error_name: str) -> str:
    return ERROR_CONTEXT.get(error_name, "Invalid loan")


class WizardError(Exception):
    """A builder error wrapped with what the user was entering."""

    def __init__(self, context: str, cause: LoanBuilderError) -> None:
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")


class ApiError(Exception):
    """Non-200 answer from the loaner API."""

    def __init__(self, status_code: int, detail, error: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        self.error = error
        super().__init__(f"API returned {status_code}: {detail}")

    def user_message(self) -> str:
        """Builder rejections read the same as in local mode."""
        if self.error:
            return f"{error_context(self.error)}: {self.detail}"
        return str(self)


# ── Prompting ────────────────────────────────────────────────────────────────

def prompt_value(
    label: str,
    name: str,
    parse: Callable[[str], T],
    input_fn: Callable[[str], str] = input,
) -> T:
    """Ask for one value and parse it, naming the field on failure."""
    try:
        return parse(input_fn(f"{label}: ").strip())
    except (ValueError, EOFError) as e:
        raise PromptError(f"Unable to read `{name}` from terminal input") from e


def collect_inputs(args: argparse.Namespace, input_fn: Callable[[str], str] = input) -> dict:
    """Fill in every value not given on the command line by prompting."""
    currency = args.currency
    if currency is None:
        currency = prompt_value("Your currency", "currency", str, input_fn)
    principal = args.principal
    if principal is None:
        principal = prompt_value("Loan amount", "loan amount", float, input_fn)
    rate_pct = args.rate
    if rate_pct is None:
        rate_pct = prompt_value("Annual interest rates (%)", "annual rate", float, input_fn)
    months = args.months
    if months is None:
        months = prompt_value("Duration in months", "duration", int, input_fn)

    return {
        "currency": currency or settings.default_currency,
        "principal": principal,
        "annual_rate": rate_pct / 100,
        "duration_months": months,
    }


def build_loan(values: dict) -> Loan:
    """Run the collected values through the builder, adding context to errors."""
    try:
        return (
            LoanBuilder()
            .with_principal(values["principal"])
            .with_annual_rate(values["annual_rate"])
            .with_duration_months(values["duration_months"])
            .build()
        )
    except LoanBuilderError as e:
        raise WizardError(error_context(type(e).__name__), e) from e


# ── Remote mode ──────────────────────────────────────────────────────────────

async def fetch_schedule(
    api_url: str,
    values: dict,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ScheduleResponse:
    """Ask a running loaner API for the schedule."""
    url = f"{api_url.rstrip('/')}/api/v1/loans/schedule"
    async with httpx.AsyncClient(timeout=settings.request_timeout, transport=transport) as client:
        resp = await client.post(url, json=values)

    if resp.status_code != 200:
        try:
            body = resp.json()
        except ValueError:
            raise ApiError(resp.status_code, resp.text) from None
        if not isinstance(body, dict):
            raise ApiError(resp.status_code, body)
        raise ApiError(resp.status_code, body.get("detail", resp.text), body.get("error"))

    return ScheduleResponse.model_validate(resp.json())


# ── Report ───────────────────────────────────────────────────────────────────

def _money(v: float, currency: str) -> str:
    return f"{v:,.2f}{currency}"


def print_schedule(schedule: ScheduleResponse) -> None:
    cur = schedule.currency
    header = (
        f"  {'Month':>5}  {'Starting principal':>20}  {'Principal payment':>20}  "
        f"{'Interests payment':>20}  {'Payment amount':>20}"
    )
    print(header)
    print(f"  {'-' * 5}  {'-' * 20}  {'-' * 20}  {'-' * 20}  {'-' * 20}")
    for p in schedule.payments:
        print(
            f"  {p.month_index + 1:>5}  {_money(p.start_principal, cur):>20}  "
            f"{_money(p.principal_part, cur):>20}  {_money(p.interest_part, cur):>20}  "
            f"{_money(p.amount, cur):>20}"
        )
    print()
    print(f"You will pay a total of {_money(schedule.total_paid_interest, cur)} in interests.")


def print_yearly_summary(schedule: ScheduleResponse) -> None:
    if not schedule.yearly_summary:
        return
    cur = schedule.currency
    print()
    print(
        f"  {'Yr':>3}  {'Principal':>16}  {'Interest':>16}  "
        f"{'Debt service':>16}  {'Ending balance':>16}"
    )
    print(f"  {'---':>3}  {'-' * 16}  {'-' * 16}  {'-' * 16}  {'-' * 16}")
    for y in schedule.yearly_summary:
        print(
            f"  {y.year:>3}  {_money(y.principal, cur):>16}  {_money(y.interest, cur):>16}  "
            f"{_money(y.debt_service, cur):>16}  {_money(y.ending_balance, cur):>16}"
        )


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-rate loan amortization schedule")
    parser.add_argument("--currency", help="Currency label appended to amounts")
    parser.add_argument("--principal", type=float, help="Loan amount")
    parser.add_argument("--rate", type=float, help="Annual interest rate in percent (6 for 6%%)")
    parser.add_argument("--months", type=int, help="Duration in months")
    parser.add_argument("--yearly", action="store_true", help="Also print a per-year summary")
    parser.add_argument(
        "--api-url",
        nargs="?",
        const=settings.api_url,
        default=None,
        help=f"Compute via a running API instead of locally (bare flag: {settings.api_url})",
    )
    return parser


async def main(
    argv: list[str] | None = None,
    input_fn: Callable[[str], str] = input,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        values = collect_inputs(args, input_fn)
    except PromptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.api_url:
        try:
            schedule = await fetch_schedule(args.api_url, values, transport=transport)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn loaner.api.app:app --reload", file=sys.stderr)
            return 1
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            return 1
        except httpx.TransportError as e:
            print(f"Error: Connection to API at {args.api_url} failed: {e}", file=sys.stderr)
            return 1
        except ApiError as e:
            logger.debug("API error %s: %s", e.status_code, e.detail)
            print(f"Error: {e.user_message()}", file=sys.stderr)
            return 1
    else:
        try:
            loan = build_loan(values)
        except WizardError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logger.debug("Built %d-month loan locally", loan.duration_months)
        schedule = ScheduleResponse.from_loan(loan, currency=values["currency"])

    print_schedule(schedule)
    if args.yearly:
        print_yearly_summary(schedule)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

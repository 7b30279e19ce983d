import logging
from datetime import datetime
from decimal import Decimal

from ..models import TransactionKind
from .ledger_store import LedgerStore
from .period import (
    Clock,
    current_month_token,
    current_year_token,
    month_of,
    month_range,
    year_months,
    year_range,
)

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def _totals(transactions) -> tuple[Decimal, Decimal]:
    income = expense = ZERO
    for t in transactions:
        if t.kind == TransactionKind.INCOME:
            income += t.amount
        else:
            expense += t.amount
    return income, expense


def _category_breakdown(transactions) -> list[dict]:
    """Expense totals per category, largest first."""
    amounts: dict[str, Decimal] = {}
    for t in transactions:
        if t.kind != TransactionKind.EXPENSE:
            continue
        amounts[t.category] = amounts.get(t.category, ZERO) + t.amount

    # sorted() is stable, so ties keep the order categories were first seen
    ordered = sorted(amounts.items(), key=lambda item: item[1], reverse=True)
    return [{"category": category, "amount": amount} for category, amount in ordered]


def _budget_usage(budget_amount: Decimal | None, expense: Decimal) -> dict:
    # Not clamped: remaining < 0 and percentage_used > 100 signal overspend
    if budget_amount is None:
        return {
            "amount": ZERO,
            "used": expense,
            "remaining": ZERO,
            "percentage_used": ZERO,
        }
    return {
        "amount": budget_amount,
        "used": expense,
        "remaining": budget_amount - expense,
        "percentage_used": (expense / budget_amount) * 100 if budget_amount > 0 else ZERO,
    }


class SummaryService:
    """Builds monthly summaries and yearly overviews from ledger records."""

    def __init__(self, store: LedgerStore, clock: Clock = datetime.now):
        self.store = store
        self.clock = clock

    def monthly_summary(self, user_id: int, month: str | None = None) -> dict:
        """
        Totals, balance, budget usage and expense breakdown for one month.

        ``month`` defaults to the current month according to the clock.
        """
        if month is None:
            month = current_month_token(self.clock)
        period = month_range(month)
        logger.debug("Building monthly summary for user %s, month %s", user_id, month)

        transactions = self.store.find_transactions(user_id, period.start, period.end)
        income, expense = _totals(transactions)

        budget = self.store.find_budget(user_id, month)

        return {
            "month": month,
            "income": income,
            "expense": expense,
            "balance": income - expense,
            "budget": _budget_usage(budget.amount if budget else None, expense),
            "category_breakdown": _category_breakdown(transactions),
        }

    def yearly_overview(self, user_id: int, year: str | None = None) -> list[dict]:
        """
        Income, expense, balance and budget amount for each month of a year.

        Always twelve entries ordered January to December. Transactions for the
        whole year are fetched in one query and bucketed by month.
        """
        if year is None:
            year = current_year_token(self.clock)
        months = year_months(year)
        period = year_range(year)
        logger.debug("Building yearly overview for user %s, year %s", user_id, year)

        buckets: dict[str, list] = {month: [] for month in months}
        for t in self.store.find_transactions(user_id, period.start, period.end):
            bucket = buckets.get(month_of(t.date))
            if bucket is not None:
                bucket.append(t)

        overview = []
        for month in months:
            income, expense = _totals(buckets[month])
            budget = self.store.find_budget(user_id, month)
            overview.append({
                "month": month,
                "income": income,
                "expense": expense,
                "balance": income - expense,
                "budget_amount": budget.amount if budget else ZERO,
            })
        return overview

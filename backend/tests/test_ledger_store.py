from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from finance_tracker.models import User
from finance_tracker.services.budget_service import BudgetService
from finance_tracker.services.ledger_store import SqlLedgerStore
from finance_tracker.services.period import month_range
from finance_tracker.services.summary_service import SummaryService

from tests.factories import make_budget, make_tx


@pytest.fixture
def users(db):
    alice = User(name="Alice", email="alice@mail.com", hashed_password="x")
    bob = User(name="Bob", email="bob@mail.com", hashed_password="x")
    db.add_all([alice, bob])
    db.flush()
    return alice, bob


def test_find_transactions_is_inclusive_and_scoped(db, users):
    alice, bob = users
    db.add_all([
        make_tx("expense", "Rent", 1, datetime(2024, 2, 29, 23, 59, 59), user_id=alice.id),
        make_tx("expense", "Rent", 2, datetime(2024, 3, 1), user_id=alice.id),
        make_tx("expense", "Rent", 3, datetime(2024, 3, 31, 23, 59, 59, 999000), user_id=alice.id),
        make_tx("expense", "Rent", 4, datetime(2024, 4, 1), user_id=alice.id),
        make_tx("expense", "Rent", 5, datetime(2024, 3, 10), user_id=bob.id),
    ])
    db.flush()

    period = month_range("2024-03")
    found = SqlLedgerStore(db).find_transactions(alice.id, period.start, period.end)

    assert sorted(t.amount for t in found) == [Decimal("2"), Decimal("3")]


def test_find_budget_returns_none_when_absent(db, users):
    alice, _ = users
    assert SqlLedgerStore(db).find_budget(alice.id, "2024-03") is None


def test_budget_unique_per_user_and_month(db, users):
    alice, _ = users
    db.add(make_budget("2024-03", 100, user_id=alice.id))
    db.flush()
    db.add(make_budget("2024-03", 200, user_id=alice.id))
    with pytest.raises(IntegrityError):
        db.flush()


def test_set_budget_updates_in_place(db, users):
    alice, _ = users
    service = BudgetService(db)
    first = service.set_budget(alice.id, "2024-03", Decimal("100"))
    second = service.set_budget(alice.id, "2024-03", Decimal("250.50"))

    assert first.id == second.id
    assert service.get_budget(alice.id, "2024-03").amount == Decimal("250.50")
    assert len(service.list_budgets(alice.id)) == 1


def test_summary_over_sql_store_scenario_a(db, users):
    alice, _ = users
    db.add_all([
        make_tx("income", "Salary", 5000, datetime(2024, 3, 1), user_id=alice.id),
        make_tx("expense", "Rent", 1200, datetime(2024, 3, 2), user_id=alice.id),
        make_tx("expense", "Groceries", 300, datetime(2024, 3, 15), user_id=alice.id),
        make_budget("2024-03", 3000, user_id=alice.id),
    ])
    db.flush()

    summary = SummaryService(SqlLedgerStore(db)).monthly_summary(alice.id, "2024-03")

    assert summary["balance"] == Decimal("3500")
    assert summary["budget"]["percentage_used"] == 50
    assert [c["category"] for c in summary["category_breakdown"]] == ["Rent", "Groceries"]

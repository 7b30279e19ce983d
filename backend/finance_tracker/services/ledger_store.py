from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from ..models import Budget, Transaction


class LedgerStore(Protocol):
    """Read-only queries the report engine needs from persistence."""

    def find_transactions(self, user_id: int, start: datetime, end: datetime) -> list[Transaction]:
        ...

    def find_budget(self, user_id: int, month: str) -> Budget | None:
        ...


class SqlLedgerStore:
    """LedgerStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find_transactions(self, user_id: int, start: datetime, end: datetime) -> list[Transaction]:
        return (
            self.db.query(Transaction)
            .filter(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date <= end,
            )
            .all()
        )

    def find_budget(self, user_id: int, month: str) -> Budget | None:
        return (
            self.db.query(Budget)
            .filter(Budget.user_id == user_id, Budget.month == month)
            .first()
        )

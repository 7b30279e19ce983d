import logging
import math
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Session

from ..models import Transaction, TransactionKind

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(self, db: Session):
        self.db = db

    def _owned_query(self, user_id: int):
        return self.db.query(Transaction).filter(Transaction.user_id == user_id)

    def list_transactions(
        self,
        user_id: int,
        kind: TransactionKind | None = None,
        category: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        min_amount: Decimal | None = None,
        max_amount: Decimal | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> dict:
        """One page of the user's transactions, newest first, plus paging info."""
        query = self._owned_query(user_id)

        if kind:
            query = query.filter(Transaction.kind == kind)
        if category:
            query = query.filter(Transaction.category == category)
        if start_date:
            query = query.filter(Transaction.date >= start_date)
        if end_date:
            query = query.filter(Transaction.date <= end_date)
        if min_amount is not None:
            query = query.filter(Transaction.amount >= min_amount)
        if max_amount is not None:
            query = query.filter(Transaction.amount <= max_amount)

        total = query.count()
        transactions = (
            query.order_by(Transaction.date.desc(), Transaction.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        return {
            "transactions": transactions,
            "pagination": {
                "total": total,
                "pages": math.ceil(total / limit),
                "page": page,
                "limit": limit,
            },
        }

    def get_transaction(self, user_id: int, transaction_id: int) -> Transaction | None:
        return self._owned_query(user_id).filter(Transaction.id == transaction_id).first()

    def create_transaction(self, user_id: int, data: dict) -> Transaction:
        transaction = Transaction(user_id=user_id, **data)
        self.db.add(transaction)
        self.db.flush()
        self.db.refresh(transaction)
        logger.info("Created transaction %s for user %s", transaction.id, user_id)
        return transaction

    def update_transaction(self, transaction: Transaction, changes: dict) -> Transaction:
        for field, value in changes.items():
            setattr(transaction, field, value)

        self.db.flush()
        self.db.refresh(transaction)
        logger.info("Updated transaction %s", transaction.id)
        return transaction

    def delete_transaction(self, transaction: Transaction) -> None:
        logger.info("Deleted transaction %s", transaction.id)
        self.db.delete(transaction)
        self.db.flush()

import logging
from decimal import Decimal
from sqlalchemy.orm import Session

from ..models import Budget

logger = logging.getLogger(__name__)


class BudgetService:
    def __init__(self, db: Session):
        self.db = db

    def get_budget(self, user_id: int, month: str) -> Budget | None:
        return (
            self.db.query(Budget)
            .filter(Budget.user_id == user_id, Budget.month == month)
            .first()
        )

    def list_budgets(self, user_id: int) -> list[Budget]:
        """All budgets for the user, newest month first."""
        return (
            self.db.query(Budget)
            .filter(Budget.user_id == user_id)
            .order_by(Budget.month.desc())
            .all()
        )

    def set_budget(self, user_id: int, month: str, amount: Decimal) -> Budget:
        """Create the month's budget, or change its amount if it already exists."""
        budget = self.get_budget(user_id, month)
        if budget:
            budget.amount = amount
            logger.info("Updated budget for user %s, month %s", user_id, month)
        else:
            budget = Budget(user_id=user_id, month=month, amount=amount)
            self.db.add(budget)
            logger.info("Created budget for user %s, month %s", user_id, month)

        self.db.flush()
        self.db.refresh(budget)
        return budget

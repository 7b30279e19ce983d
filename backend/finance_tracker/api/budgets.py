from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import BudgetSet, BudgetResponse
from ..security import get_current_user_id
from ..services.budget_service import BudgetService
from ..services.period import MONTH_PATTERN, Clock, current_month_token
from .dependencies import get_clock

router = APIRouter()


@router.get("/", response_model=BudgetResponse)
def get_budget(
    month: str | None = Query(None, pattern=MONTH_PATTERN),
    user_id: int = Depends(get_current_user_id),
    clock: Clock = Depends(get_clock),
    db: Session = Depends(get_db),
):
    """Get the budget for a month (defaults to the current month)."""
    budget = BudgetService(db).get_budget(user_id, month or current_month_token(clock))
    if not budget:
        raise HTTPException(status_code=404, detail="No budget found for this month")
    return budget


@router.post("/", response_model=BudgetResponse)
def set_budget(
    data: BudgetSet,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Set the spending limit for a month, replacing any earlier amount."""
    return BudgetService(db).set_budget(user_id, data.month, data.amount)


@router.get("/history", response_model=list[BudgetResponse])
def budget_history(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return BudgetService(db).list_budgets(user_id)

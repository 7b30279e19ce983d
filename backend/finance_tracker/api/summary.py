from fastapi import APIRouter, Depends, Query

from ..schemas import MonthlySummary, MonthlyOverviewItem
from ..security import get_current_user_id
from ..services.period import MONTH_PATTERN, YEAR_PATTERN
from ..services.summary_service import SummaryService
from .dependencies import get_summary_service

router = APIRouter()


@router.get("/", response_model=MonthlySummary)
def monthly_summary(
    month: str | None = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM, defaults to the current month"),
    user_id: int = Depends(get_current_user_id),
    service: SummaryService = Depends(get_summary_service),
):
    """Income, expense, balance, budget usage and expense categories for one month."""
    return service.monthly_summary(user_id, month)


@router.get("/monthly", response_model=list[MonthlyOverviewItem])
def yearly_overview(
    year: str | None = Query(None, pattern=YEAR_PATTERN, description="YYYY, defaults to the current year"),
    user_id: int = Depends(get_current_user_id),
    service: SummaryService = Depends(get_summary_service),
):
    """Per-month totals for all twelve months of a year."""
    return service.yearly_overview(user_id, year)

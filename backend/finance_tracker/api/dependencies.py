from datetime import datetime
from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.ledger_store import SqlLedgerStore
from ..services.period import Clock
from ..services.summary_service import SummaryService


def get_clock() -> Clock:
    """Time source for current-period defaults. Overridden in tests."""
    return datetime.now


def get_summary_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> SummaryService:
    return SummaryService(SqlLedgerStore(db), clock=clock)

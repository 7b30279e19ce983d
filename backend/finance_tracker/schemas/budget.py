from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from ..services.period import MONTH_PATTERN


class BudgetSet(BaseModel):
    month: str = Field(pattern=MONTH_PATTERN, description="Month in YYYY-MM format")
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)


class BudgetResponse(BaseModel):
    id: int
    user_id: int
    month: str
    amount: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

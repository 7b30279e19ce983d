from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from ..models.transaction import TransactionKind


class TransactionBase(BaseModel):
    """Base transaction fields."""
    kind: TransactionKind
    category: str = Field(min_length=1, max_length=100)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    date: datetime
    note: str | None = Field(default=None, max_length=1000)


class TransactionCreate(TransactionBase):
    """Fields for creating a transaction."""
    pass


class TransactionUpdate(BaseModel):
    """Fields for updating a transaction (all optional)."""
    kind: TransactionKind | None = None
    category: str | None = Field(default=None, min_length=1, max_length=100)
    amount: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    date: datetime | None = None
    note: str | None = Field(default=None, max_length=1000)


class TransactionResponse(BaseModel):
    """Transaction response with all fields."""
    id: int
    user_id: int
    kind: TransactionKind
    category: str
    amount: float
    date: datetime
    note: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class Pagination(BaseModel):
    total: int
    pages: int
    page: int
    limit: int


class TransactionPage(BaseModel):
    transactions: list[TransactionResponse]
    pagination: Pagination

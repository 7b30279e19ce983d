from datetime import datetime
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import TransactionKind
from ..schemas import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionPage,
)
from ..security import get_current_user_id
from ..services.transaction_service import TransactionService

router = APIRouter()


@router.get("/", response_model=TransactionPage)
def list_transactions(
    kind: TransactionKind | None = Query(None),
    category: str | None = Query(None),
    start_date: datetime | None = Query(None),
    end_date: datetime | None = Query(None),
    min_amount: Decimal | None = Query(None, ge=0),
    max_amount: Decimal | None = Query(None, ge=0),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Get the caller's transactions, newest first, with optional filters.

    Results are paginated; the response carries the total count and page count.
    """
    service = TransactionService(db)
    return service.list_transactions(
        user_id,
        kind=kind,
        category=category,
        start_date=start_date,
        end_date=end_date,
        min_amount=min_amount,
        max_amount=max_amount,
        page=page,
        limit=limit,
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get a single transaction by ID."""
    transaction = TransactionService(db).get_transaction(user_id, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Record a new income or expense."""
    return TransactionService(db).create_transaction(user_id, transaction.model_dump())


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction: TransactionUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update the fields supplied in the body."""
    service = TransactionService(db)
    db_transaction = service.get_transaction(user_id, transaction_id)
    if not db_transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    changes = transaction.model_dump(exclude_unset=True)
    # kind, category, amount and date are required columns
    for field in ("kind", "category", "amount", "date"):
        if field in changes and changes[field] is None:
            del changes[field]

    return service.update_transaction(db_transaction, changes)


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a transaction."""
    service = TransactionService(db)
    db_transaction = service.get_transaction(user_id, transaction_id)
    if not db_transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    service.delete_transaction(db_transaction)
    return {"message": "Transaction deleted"}

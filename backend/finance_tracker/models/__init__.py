from .base import Base
from .user import User
from .transaction import Transaction, TransactionKind
from .budget import Budget

__all__ = [
    "Base",
    "User",
    "Transaction",
    "TransactionKind",
    "Budget",
]

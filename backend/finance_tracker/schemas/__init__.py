from .user import UserRegister, UserLogin, UserResponse, TokenResponse
from .transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    Pagination,
    TransactionPage,
)
from .budget import BudgetSet, BudgetResponse
from .report import BudgetUsage, CategoryAmount, MonthlySummary, MonthlyOverviewItem

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "TokenResponse",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "Pagination",
    "TransactionPage",
    "BudgetSet",
    "BudgetResponse",
    "BudgetUsage",
    "CategoryAmount",
    "MonthlySummary",
    "MonthlyOverviewItem",
]

from .period import DateRange, month_range, year_range, year_ranges, current_month_token, current_year_token
from .ledger_store import LedgerStore, SqlLedgerStore
from .summary_service import SummaryService
from .budget_service import BudgetService
from .transaction_service import TransactionService
from .user_service import UserService

__all__ = [
    "DateRange",
    "month_range",
    "year_range",
    "year_ranges",
    "current_month_token",
    "current_year_token",
    "LedgerStore",
    "SqlLedgerStore",
    "SummaryService",
    "BudgetService",
    "TransactionService",
    "UserService",
]

from fastapi import APIRouter

from .auth import router as auth_router
from .transactions import router as transactions_router
from .budgets import router as budgets_router
from .summary import router as summary_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(budgets_router, prefix="/budget", tags=["budget"])
api_router.include_router(summary_router, prefix="/summary", tags=["summary"])

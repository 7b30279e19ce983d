from pydantic import BaseModel


class BudgetUsage(BaseModel):
    amount: float
    used: float
    remaining: float
    percentage_used: float


class CategoryAmount(BaseModel):
    category: str
    amount: float


class MonthlySummary(BaseModel):
    month: str
    income: float
    expense: float
    balance: float
    budget: BudgetUsage
    category_breakdown: list[CategoryAmount]


class MonthlyOverviewItem(BaseModel):
    month: str
    income: float
    expense: float
    balance: float
    budget_amount: float

"""
Statistics API endpoints.
"""

from fastapi import APIRouter, Depends

from finance_api.dependencies import get_repository
from finance_api.services.transaction_repository import TransactionRepository
from finance_api.schemas.statistics import CategoryTotal, StatisticsResponse

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
def get_statistics(repo: TransactionRepository = Depends(get_repository)):
    """
    Income and expense totals, balance, and expense totals per category.
    Recomputed from the table on every call.
    """
    total_income = repo.total_by_type("income")
    total_expense = repo.total_by_type("expense")
    categories = repo.expense_totals_by_category()

    return StatisticsResponse(
        total_income=float(total_income),
        total_expense=float(total_expense),
        balance=float(total_income - total_expense),
        categories=[
            CategoryTotal(category=category, total=float(total))
            for category, total in categories
        ]
    )

"""
Main API router.
"""

from fastapi import APIRouter
from finance_api.api import health, transactions, statistics

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(transactions.router)
api_router.include_router(statistics.router)

"""
Pydantic schemas package.
"""

from finance_api.schemas.health import HealthResponse, UnhealthyResponse
from finance_api.schemas.statistics import CategoryTotal, StatisticsResponse
from finance_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    BulkFailure,
    BulkCreateResponse,
    TransactionCount,
)

__all__ = [
    "HealthResponse",
    "UnhealthyResponse",
    "CategoryTotal",
    "StatisticsResponse",
    "TransactionCreate",
    "TransactionResponse",
    "BulkFailure",
    "BulkCreateResponse",
    "TransactionCount",
]

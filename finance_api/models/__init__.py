"""
Database models package.
"""

from finance_api.models.transaction import Transaction

__all__ = [
    "Transaction",
]

"""
Transaction schemas.
"""

from pydantic import BaseModel
from typing import Any, Optional
import datetime as dt
from decimal import Decimal


class TransactionCreate(BaseModel):
    # Presence is left to the database NOT NULL constraints
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None
    category: Optional[str] = None
    date: Optional[dt.date] = None


class TransactionResponse(BaseModel):
    id: int
    description: str
    amount: Decimal
    type: str
    category: str
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class BulkFailure(BaseModel):
    index: int
    transaction: Any
    error: str


class BulkCreateResponse(BaseModel):
    message: str
    count: int
    transactions: list[TransactionResponse]
    failed: list[BulkFailure]


class TransactionCount(BaseModel):
    count: int

"""
Transaction database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, func
from finance_api.database import Base


class Transaction(Base):
    """A single income or expense entry."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(String(50), nullable=False)  # "income" or "expense", not enforced
    category = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now())
    # Never refreshed: rows are not updated in place
    updated_at = Column(DateTime, default=datetime.utcnow, server_default=func.now())

"""
FastAPI dependencies.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from finance_api.database import SessionLocal
from finance_api.services.transaction_repository import TransactionRepository


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    """Repository bound to the request's session."""
    return TransactionRepository(db)

"""
Transaction API endpoints.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from finance_api.dependencies import get_repository
from finance_api.errors import error_message
from finance_api.services.transaction_repository import TransactionRepository
from finance_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionCount,
    BulkFailure,
    BulkCreateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionResponse])
def list_transactions(repo: TransactionRepository = Depends(get_repository)):
    """List all transactions, most recent first."""
    return repo.list_all()


@router.get("/count", response_model=TransactionCount)
def count_transactions(repo: TransactionRepository = Depends(get_repository)):
    """Total number of transactions."""
    return TransactionCount(count=repo.count())


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    repo: TransactionRepository = Depends(get_repository)
):
    """Create a transaction. Missing fields are left for the database to reject."""
    return repo.create(transaction.model_dump())


@router.post("/bulk", response_model=BulkCreateResponse, status_code=201)
def bulk_create_transactions(
    payload: Any = Body(None),
    repo: TransactionRepository = Depends(get_repository)
):
    """
    Insert each element of ``transactions`` independently.

    Elements that fail to parse or insert are skipped and reported in
    ``failed``; the rest are committed one by one.
    """
    items = payload.get("transactions") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid format: 'transactions' must be an array"}
        )

    inserted = []
    failed = []
    for index, item in enumerate(items):
        try:
            values = TransactionCreate.model_validate(item).model_dump()
            row = repo.insert_ignore_conflict(values)
        except (ValidationError, SQLAlchemyError) as e:
            logger.warning(f"Skipping bulk transaction #{index}: {e}")
            failed.append(BulkFailure(index=index, transaction=item, error=error_message(e)))
            continue
        if row is not None:
            inserted.append(TransactionResponse.model_validate(row))

    logger.info(f"Bulk insert processed {len(items)} transactions: {len(inserted)} inserted, {len(failed)} failed")

    return BulkCreateResponse(
        message="Transactions processed",
        count=len(inserted),
        transactions=inserted,
        failed=failed
    )


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    repo: TransactionRepository = Depends(get_repository)
):
    """Delete a transaction. Unknown ids are a no-op."""
    repo.delete(transaction_id)
    return None

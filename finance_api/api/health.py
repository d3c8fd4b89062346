"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from finance_api.dependencies import get_repository
from finance_api.errors import error_message
from finance_api.services.transaction_repository import TransactionRepository
from finance_api.schemas.health import HealthResponse, UnhealthyResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"model": UnhealthyResponse}}
)
def health_check(repo: TransactionRepository = Depends(get_repository)):
    """Check database connectivity and report its version."""
    try:
        version = repo.server_version()
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=500,
            content=UnhealthyResponse(error=error_message(e)).model_dump()
        )

    return HealthResponse(status="healthy", database="connected", version=version)

"""
Health check schemas.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    database: str
    version: str


class UnhealthyResponse(BaseModel):
    status: str = "unhealthy"
    database: str = "disconnected"
    error: str

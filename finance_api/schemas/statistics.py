"""
Statistics schemas.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List


class CategoryTotal(BaseModel):
    category: str
    total: float


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_income: float
    total_expense: float
    balance: float
    categories: List[CategoryTotal]

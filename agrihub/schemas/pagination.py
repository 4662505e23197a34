from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar('T')

class Pagination(BaseModel):
    page: int
    limit: int
    total: int

class PaginatedResponse(BaseModel, Generic[T]):
    items: List[T]
    pagination: Pagination

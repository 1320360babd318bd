from pydantic import BaseModel, Field
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: UUID
    name: Optional[str] = None
    email: str
    role: str
    status: Optional[str] = None
    exp: Optional[int] = None

    @property
    def display_name(self) -> str:
        # stock updates record who made the change
        return self.name or self.email


class JsonOutResult(EmptyStringModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str


class PageOptions(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    # "field:direction", checked against an allow-list per resource
    sort_by: Optional[str] = None


class PagedResult(BaseModel, Generic[T]):
    results: List[T]
    page: int
    limit: int
    total_pages: int
    total_results: int



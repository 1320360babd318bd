from pydantic import BaseModel, EmailStr, Field
from typing import List, Literal, Optional
from uuid import UUID
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# For reading a user (response model)
class UserRead(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    role: str
    status: str
    is_email_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # allows Pydantic to work with SQLAlchemy objects


class RegisterRequest(EmptyStringModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)


class UserCreate(RegisterRequest):
    role: Literal["user", "admin"] = "user"


class UserStatusUpdate(BaseModel):
    status: Literal["active", "inactive"]


class UserListResponse(BaseModel):
    results: List[UserRead]
    total_results: int

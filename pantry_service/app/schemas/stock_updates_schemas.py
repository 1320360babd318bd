from pydantic import BaseModel, Field, field_validator, model_validator
from uuid import UUID
from typing import Optional
from datetime import datetime, timezone

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from .items_schemas import ItemSummary


class StockUpdateCreate(EmptyStringModel):
    item_id: UUID
    old_quantity: float = Field(ge=0)
    new_quantity: float = Field(ge=0)
    notes: Optional[str] = None


class StockUpdateOut(BaseModel):
    id: UUID
    item_id: UUID
    old_quantity: float
    new_quantity: float
    updated_by: str
    notes: Optional[str] = None
    created_at: datetime
    item: Optional[ItemSummary] = None

    class Config:
        from_attributes = True


class StockUpdateFilters(BaseModel):
    item_id: Optional[UUID] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, v):
        # naive timestamps are read as UTC; stored timestamps are UTC
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self

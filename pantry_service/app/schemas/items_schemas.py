from pydantic import BaseModel, Field, computed_field, model_validator
from uuid import UUID
from typing import Optional
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.inventory_enum import ItemCategory, ItemUnit, StockLevel
from ..util.stock_level import stock_level_label


class ItemBase(EmptyStringModel):
    name: str = Field(min_length=1, max_length=200)
    category: ItemCategory
    brand: Optional[str] = None
    quantity: float = Field(ge=0)
    unit: ItemUnit
    min_stock_level: float = Field(ge=0)
    price: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    image_url: Optional[str] = None


class ItemCreate(ItemBase):
    pass


REQUIRED_ITEM_FIELDS = ("name", "category", "unit", "quantity", "min_stock_level")


class ItemUpdate(EmptyStringModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[ItemCategory] = None
    brand: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[ItemUnit] = None
    min_stock_level: Optional[float] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        nulled = [f for f in REQUIRED_ITEM_FIELDS
                  if f in self.model_fields_set and getattr(self, f) is None]
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self


class ItemOut(ItemBase):
    id: UUID
    stock_level: StockLevel
    last_updated: datetime
    updated_by: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def stock_level_text(self) -> str:
        return stock_level_label(self.stock_level)


class ItemSummary(BaseModel):
    id: UUID
    name: str
    category: str
    unit: str

    class Config:
        from_attributes = True


class ItemFilters(BaseModel):
    category: Optional[ItemCategory] = None
    stock_level: Optional[StockLevel] = None
    search: Optional[str] = None

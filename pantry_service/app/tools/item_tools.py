# app/tools/item_tools.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from shared.core.exceptions import NotFoundError
from shared.core.schemas import PageOptions, PagedResult
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import Right
from ..crud import items_crud
from ..enum.inventory_enum import ItemCategory, StockLevel
from ..schemas.items_schemas import ItemCreate, ItemFilters, ItemOut, ItemUpdate
from .registry import ToolDefinition, register

IDENTITY_FIELDS = {"id", "user_id", "updated_by"}


class CallerIdentity(BaseModel):
    user_id: UUID


class ActingCaller(CallerIdentity):
    updated_by: str = Field(min_length=1)


class ItemCreateInput(ItemCreate, ActingCaller):
    pass


class ItemQueryInput(CallerIdentity):
    category: Optional[ItemCategory] = None
    stock_level: Optional[StockLevel] = None
    search: Optional[str] = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    sort_by: Optional[str] = None


class ItemIdInput(CallerIdentity):
    id: UUID


class ItemUpdateInput(ItemUpdate, ActingCaller):
    id: UUID


def _create(db, inputs: ItemCreateInput):
    item = ItemCreate.model_validate(
        inputs.model_dump(exclude=IDENTITY_FIELDS))
    return items_crud.create_item(db, item, inputs.user_id, inputs.updated_by)


def _query(db, inputs: ItemQueryInput):
    filters = ItemFilters(category=inputs.category,
                          stock_level=inputs.stock_level, search=inputs.search)
    options = PageOptions(page=inputs.page, limit=inputs.limit,
                          sort_by=inputs.sort_by)
    return items_crud.query_items(db, filters, options, inputs.user_id)


def _get(db, inputs: ItemIdInput):
    item = items_crud.get_item_by_id(db, inputs.id, inputs.user_id)
    if not item:
        raise NotFoundError("Item not found", AppStatusCode.ITEM_NOT_FOUND)
    return item


def _update(db, inputs: ItemUpdateInput):
    # re-validated without identity fields so an empty update is rejected
    changes = ItemUpdate.model_validate(
        inputs.model_dump(exclude_unset=True, exclude=IDENTITY_FIELDS))
    return items_crud.update_item_by_id(db, inputs.id, changes, inputs.user_id, inputs.updated_by)


def _delete(db, inputs: ItemIdInput):
    return items_crud.delete_item_by_id(db, inputs.id, inputs.user_id)


register(
    ToolDefinition(
        id="item_create",
        name="Create Item",
        description="Create a new grocery item in inventory",
        input_model=ItemCreateInput,
        output_model=ItemOut,
        fn=_create,
        right=Right.MANAGE_OWN_ITEMS,
    ),
    ToolDefinition(
        id="item_get_all",
        name="Get All Items",
        description="Get all grocery items with optional filters and pagination",
        input_model=ItemQueryInput,
        output_model=PagedResult[ItemOut],
        fn=_query,
    ),
    ToolDefinition(
        id="item_get_by_id",
        name="Get Item By ID",
        description="Get a single grocery item by its ID",
        input_model=ItemIdInput,
        output_model=ItemOut,
        fn=_get,
    ),
    ToolDefinition(
        id="item_update",
        name="Update Item",
        description="Update grocery item information by ID",
        input_model=ItemUpdateInput,
        output_model=ItemOut,
        fn=_update,
        right=Right.MANAGE_OWN_ITEMS,
    ),
    ToolDefinition(
        id="item_delete",
        name="Delete Item",
        description="Delete a grocery item and its stock history by ID",
        input_model=ItemIdInput,
        output_model=ItemOut,
        fn=_delete,
        right=Right.MANAGE_OWN_ITEMS,
    ),
)

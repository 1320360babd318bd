# app/tools/stock_update_tools.py
from typing import Optional
from uuid import UUID

from pydantic import Field

from shared.core.schemas import PageOptions, PagedResult
from shared.utils.enums import Right
from ..crud import stock_updates_crud
from ..schemas.stock_updates_schemas import StockUpdateCreate, StockUpdateFilters, StockUpdateOut
from .item_tools import ActingCaller, CallerIdentity
from .registry import ToolDefinition, register


class StockUpdateCreateInput(StockUpdateCreate, ActingCaller):
    pass


class PageInput(CallerIdentity):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    sort_by: Optional[str] = None

    def page_options(self) -> PageOptions:
        return PageOptions(page=self.page, limit=self.limit, sort_by=self.sort_by)


class StockUpdateQueryInput(StockUpdateFilters, PageInput):
    pass


class StockUpdateIdInput(CallerIdentity):
    id: UUID


class ItemStockUpdatesInput(PageInput):
    item_id: UUID


def _create(db, inputs: StockUpdateCreateInput):
    return stock_updates_crud.adjust_stock(
        db,
        item_id=inputs.item_id,
        old_quantity=inputs.old_quantity,
        new_quantity=inputs.new_quantity,
        user_id=inputs.user_id,
        updated_by=inputs.updated_by,
        notes=inputs.notes,
    )


def _query(db, inputs: StockUpdateQueryInput):
    filters = StockUpdateFilters(
        item_id=inputs.item_id, start_date=inputs.start_date, end_date=inputs.end_date)
    return stock_updates_crud.query_stock_updates(db, filters, inputs.page_options(), inputs.user_id)


def _get(db, inputs: StockUpdateIdInput):
    return stock_updates_crud.get_stock_update_by_id(db, inputs.id, inputs.user_id)


def _get_by_item(db, inputs: ItemStockUpdatesInput):
    return stock_updates_crud.get_stock_updates_by_item_id(
        db, inputs.item_id, inputs.page_options(), inputs.user_id)


register(
    ToolDefinition(
        id="stock_update_create",
        name="Create Stock Update",
        description="Create a new stock update and automatically update the item quantity",
        input_model=StockUpdateCreateInput,
        output_model=StockUpdateOut,
        fn=_create,
        right=Right.MANAGE_OWN_ITEMS,
    ),
    ToolDefinition(
        id="stock_update_get_all",
        name="Get All Stock Updates",
        description="Get all stock updates with optional filters and pagination",
        input_model=StockUpdateQueryInput,
        output_model=PagedResult[StockUpdateOut],
        fn=_query,
    ),
    ToolDefinition(
        id="stock_update_get_by_id",
        name="Get Stock Update By ID",
        description="Get a single stock update by its ID",
        input_model=StockUpdateIdInput,
        output_model=StockUpdateOut,
        fn=_get,
    ),
    ToolDefinition(
        id="stock_update_get_by_item",
        name="Get Stock Updates By Item",
        description="Get all stock updates for a specific item with pagination",
        input_model=ItemStockUpdatesInput,
        output_model=PagedResult[StockUpdateOut],
        fn=_get_by_item,
    ),
)

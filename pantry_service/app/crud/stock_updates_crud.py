# app/crud/stock_updates_crud.py
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID
from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload

from shared.core.database import transaction
from shared.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from shared.core.schemas import PageOptions
from shared.utils.app_status_code import AppStatusCode
from ..models.items import Item
from ..models.stock_updates import StockUpdate
from ..schemas.stock_updates_schemas import StockUpdateFilters, StockUpdateOut
from ..util.stock_level import calculate_stock_level
from .common.query_options import paginate
from .items_crud import get_owned_item

logger = logging.getLogger(__name__)

STOCK_UPDATE_SORT_FIELDS = {
    "created_at": StockUpdate.created_at,
    "old_quantity": StockUpdate.old_quantity,
    "new_quantity": StockUpdate.new_quantity,
    "updated_by": StockUpdate.updated_by,
}
DEFAULT_STOCK_UPDATE_SORT = "created_at:desc"


def _apply_new_quantity(db: Session, item: Item, old_quantity: float, new_quantity: float, updated_by: str) -> int:
    """Conditional write: only lands if the stored quantity still equals old_quantity."""
    stock_level = calculate_stock_level(new_quantity, item.min_stock_level)
    result = db.execute(
        update(Item)
        .where(Item.id == item.id, Item.quantity == old_quantity)
        .values(
            quantity=new_quantity,
            stock_level=stock_level.value,
            last_updated=datetime.now(timezone.utc),
            updated_by=updated_by,
        )
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


def adjust_stock(
        db: Session,
        item_id: UUID,
        old_quantity: float,
        new_quantity: float,
        user_id: UUID,
        updated_by: str,
        notes: Optional[str] = None) -> StockUpdate:
    """Record a quantity change and apply it to the item in one transaction.

    The caller claims the quantity it last read. If the stored quantity
    differs at write time the whole change is rejected with a conflict and
    nothing is persisted; the caller has to re-read and resubmit.
    """
    if new_quantity < 0:
        raise ValidationError("New quantity cannot be negative",
                              AppStatusCode.STOCK_QUANTITY_NEGATIVE)

    with transaction(db):
        item = get_owned_item(db, item_id, user_id, for_update=True)

        if item.quantity != old_quantity:
            logger.info("Stale stock update on item %s: claimed %s, stored %s",
                        item_id, old_quantity, item.quantity)
            raise ConflictError("Old quantity does not match current item quantity",
                                AppStatusCode.STOCK_QUANTITY_MISMATCH)

        stock_update = StockUpdate(
            item_id=item.id,
            user_id=user_id,
            old_quantity=old_quantity,
            new_quantity=new_quantity,
            updated_by=updated_by,
            notes=notes,
        )
        db.add(stock_update)
        db.flush()

        if _apply_new_quantity(db, item, old_quantity, new_quantity, updated_by) != 1:
            # another adjustment committed between our read and our write
            logger.info("Lost race on item %s, rolling back", item_id)
            raise ConflictError("Old quantity does not match current item quantity",
                                AppStatusCode.STOCK_QUANTITY_MISMATCH)

    db.refresh(stock_update)
    logger.info("Stock of item %s moved %s -> %s by %s",
                item_id, old_quantity, new_quantity, updated_by)
    return stock_update


def query_stock_updates(db: Session, filters: StockUpdateFilters, options: PageOptions, user_id: UUID) -> dict:
    query = (
        db.query(StockUpdate)
        .options(joinedload(StockUpdate.item))
        .filter(StockUpdate.user_id == user_id)
    )

    if filters.item_id:
        query = query.filter(StockUpdate.item_id == filters.item_id)
    if filters.start_date:
        query = query.filter(StockUpdate.created_at >= filters.start_date)
    if filters.end_date:
        query = query.filter(StockUpdate.created_at <= filters.end_date)

    page = paginate(query, options, STOCK_UPDATE_SORT_FIELDS,
                    DEFAULT_STOCK_UPDATE_SORT, StockUpdate.id)
    page["results"] = [StockUpdateOut.model_validate(s)
                       for s in page["results"]]
    return page


def get_stock_update_by_id(db: Session, stock_update_id: UUID, user_id: UUID) -> StockUpdate:
    stock_update = (
        db.query(StockUpdate)
        .options(joinedload(StockUpdate.item))
        .filter(StockUpdate.id == stock_update_id)
        .first()
    )

    if not stock_update:
        raise NotFoundError("Stock update not found",
                            AppStatusCode.STOCK_UPDATE_NOT_FOUND)

    if stock_update.user_id != user_id:
        raise ForbiddenError("Not authorized to access this stock update",
                             AppStatusCode.STOCK_UPDATE_ACCESS_FORBIDDEN)

    return stock_update


def get_stock_updates_by_item_id(db: Session, item_id: UUID, options: PageOptions, user_id: UUID) -> dict:
    # NotFound for a missing item comes before Forbidden for a foreign one
    get_owned_item(db, item_id, user_id)
    return query_stock_updates(db, StockUpdateFilters(item_id=item_id), options, user_id)

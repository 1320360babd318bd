# app/crud/items_crud.py
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID
from sqlalchemy import update
from sqlalchemy.orm import Session

from shared.core.database import transaction
from shared.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from shared.core.schemas import PageOptions
from shared.utils.app_status_code import AppStatusCode
from ..models.items import Item
from ..schemas.items_schemas import ItemCreate, ItemFilters, ItemOut, ItemUpdate
from ..util.stock_level import calculate_stock_level
from .common.query_options import paginate

logger = logging.getLogger(__name__)

ITEM_SORT_FIELDS = {
    "name": Item.name,
    "category": Item.category,
    "quantity": Item.quantity,
    "min_stock_level": Item.min_stock_level,
    "price": Item.price,
    "stock_level": Item.stock_level,
    "last_updated": Item.last_updated,
    "created_at": Item.created_at,
}
DEFAULT_ITEM_SORT = "last_updated:desc"


def name_taken(db: Session, name: str, user_id: UUID, exclude_id: UUID = None) -> bool:
    query = db.query(Item.id).filter(Item.name == name, Item.user_id == user_id)
    if exclude_id is not None:
        query = query.filter(Item.id != exclude_id)
    return query.first() is not None


def create_item(db: Session, item: ItemCreate, user_id: UUID, updated_by: str) -> Item:
    # ✅ Names are unique per owner
    if name_taken(db, item.name, user_id):
        raise ConflictError("Item with this name already exists",
                            AppStatusCode.ITEM_NAME_IS_UNIQUE)

    item_data = item.model_dump(mode="json")
    db_item = Item(
        **item_data,
        user_id=user_id,
        updated_by=updated_by,
        stock_level=calculate_stock_level(
            item.quantity, item.min_stock_level).value,
        last_updated=datetime.now(timezone.utc),
    )
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    logger.info("Item %s (%s) created by %s", db_item.id,
                db_item.name, updated_by)
    return db_item


def query_items(db: Session, filters: ItemFilters, options: PageOptions, user_id: UUID) -> dict:
    query = db.query(Item).filter(Item.user_id == user_id)

    if filters.category:
        query = query.filter(Item.category == filters.category.value)
    if filters.stock_level:
        query = query.filter(Item.stock_level == filters.stock_level.value)
    if filters.search:
        query = query.filter(Item.name.icontains(filters.search, autoescape=True))

    page = paginate(query, options, ITEM_SORT_FIELDS,
                    DEFAULT_ITEM_SORT, Item.id)
    page["results"] = [ItemOut.model_validate(i) for i in page["results"]]
    return page


def get_item_by_id(db: Session, item_id: UUID, user_id: UUID, for_update: bool = False) -> Optional[Item]:
    query = db.query(Item).filter(Item.id == item_id)
    if for_update:
        query = query.with_for_update().populate_existing()
    item = query.first()

    if not item:
        return None

    # ✅ Security check
    if item.user_id != user_id:
        raise ForbiddenError("Not authorized to access this item",
                             AppStatusCode.ITEM_ACCESS_FORBIDDEN)

    return item


def get_owned_item(db: Session, item_id: UUID, user_id: UUID, for_update: bool = False) -> Item:
    item = get_item_by_id(db, item_id, user_id, for_update=for_update)
    if not item:
        raise NotFoundError("Item not found", AppStatusCode.ITEM_NOT_FOUND)
    return item


def update_item_by_id(db: Session, item_id: UUID, item: ItemUpdate, user_id: UUID, updated_by: str) -> Item:
    changes = item.model_dump(exclude_unset=True, mode="json")

    with transaction(db):
        db_item = get_owned_item(db, item_id, user_id, for_update=True)

        if changes.get("name") and changes["name"] != db_item.name:
            if name_taken(db, changes["name"], user_id, exclude_id=db_item.id):
                raise ConflictError("Item with this name already exists",
                                    AppStatusCode.ITEM_NAME_IS_UNIQUE)

        read_quantity = db_item.quantity
        read_min_stock_level = db_item.min_stock_level
        quantity = changes.get("quantity", read_quantity)
        min_stock_level = changes.get("min_stock_level", read_min_stock_level)

        # stock level must be derived from the values the row holds at write time
        result = db.execute(
            update(Item)
            .where(
                Item.id == db_item.id,
                Item.quantity == read_quantity,
                Item.min_stock_level == read_min_stock_level,
            )
            .values(
                **changes,
                stock_level=calculate_stock_level(
                    quantity, min_stock_level).value,
                last_updated=datetime.now(timezone.utc),
                updated_by=updated_by,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            logger.info("Item %s changed while being updated, rolling back", item_id)
            raise ConflictError("Item was modified concurrently, reload and retry",
                                AppStatusCode.STOCK_QUANTITY_MISMATCH)

    db.refresh(db_item)
    logger.info("Item %s updated by %s", db_item.id, updated_by)
    return db_item


def delete_item_by_id(db: Session, item_id: UUID, user_id: UUID) -> ItemOut:
    """Hard delete; the item's stock updates go with it through the FK cascade."""
    db_item = get_owned_item(db, item_id, user_id)
    deleted = ItemOut.model_validate(db_item)

    db.delete(db_item)
    db.commit()
    logger.info("Item %s deleted", item_id)
    return deleted

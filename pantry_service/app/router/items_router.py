# app/router/items_router.py
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from shared.core.auth import require_right
from shared.core.database import get_pantry_db as get_db
from shared.core.schemas import PageOptions, PagedResult, UserToken
from shared.utils.enums import Right
from ..enum.inventory_enum import ItemCategory, StockLevel
from ..schemas.items_schemas import ItemCreate, ItemFilters, ItemOut, ItemUpdate
from ..schemas.stock_updates_schemas import StockUpdateOut
from ..crud import items_crud as crud
from ..crud import stock_updates_crud

router = APIRouter(prefix="/api/items", tags=["items"])

can_read = require_right(Right.GET_OWN_ITEMS)
can_manage = require_right(Right.MANAGE_OWN_ITEMS)


@router.post("/", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(
    item: ItemCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_manage)
):
    return crud.create_item(db, item, current_user.user_id, current_user.display_name)


@router.get("/", response_model=PagedResult[ItemOut])
def read_items(
    category: Optional[ItemCategory] = None,
    stock_level: Optional[StockLevel] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_read)
):
    filters = ItemFilters(category=category,
                          stock_level=stock_level, search=search)
    options = PageOptions(page=page, limit=limit, sort_by=sort_by)
    return crud.query_items(db, filters, options, current_user.user_id)


@router.get("/{item_id}", response_model=ItemOut)
def read_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_read)
):
    return crud.get_owned_item(db, item_id, current_user.user_id)


@router.patch("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: UUID,
    item: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_manage)
):
    return crud.update_item_by_id(db, item_id, item, current_user.user_id, current_user.display_name)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_manage)
):
    crud.delete_item_by_id(db, item_id, current_user.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{item_id}/stock-updates", response_model=PagedResult[StockUpdateOut])
def read_item_stock_updates(
    item_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(can_read)
):
    options = PageOptions(page=page, limit=limit, sort_by=sort_by)
    return stock_updates_crud.get_stock_updates_by_item_id(db, item_id, options, current_user.user_id)

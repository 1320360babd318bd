# app/router/stock_updates_router.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from shared.core.auth import require_right
from shared.core.database import get_pantry_db as get_db
from shared.core.schemas import PageOptions, PagedResult, UserToken
from shared.utils.enums import Right
from ..schemas.stock_updates_schemas import StockUpdateCreate, StockUpdateFilters, StockUpdateOut
from ..crud import stock_updates_crud as crud

router = APIRouter(prefix="/api/stock-updates", tags=["stock_updates"])


@router.post("/", response_model=StockUpdateOut, status_code=status.HTTP_201_CREATED)
def create_stock_update(
    body: StockUpdateCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(require_right(Right.MANAGE_OWN_ITEMS))
):
    return crud.adjust_stock(
        db,
        item_id=body.item_id,
        old_quantity=body.old_quantity,
        new_quantity=body.new_quantity,
        user_id=current_user.user_id,
        updated_by=current_user.display_name,
        notes=body.notes,
    )


@router.get("/", response_model=PagedResult[StockUpdateOut])
def read_stock_updates(
    item_id: Optional[UUID] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(require_right(Right.GET_OWN_ITEMS))
):
    filters = StockUpdateFilters(
        item_id=item_id, start_date=start_date, end_date=end_date)
    options = PageOptions(page=page, limit=limit, sort_by=sort_by)
    return crud.query_stock_updates(db, filters, options, current_user.user_id)


@router.get("/{stock_update_id}", response_model=StockUpdateOut)
def read_stock_update(
    stock_update_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(require_right(Right.GET_OWN_ITEMS))
):
    return crud.get_stock_update_by_id(db, stock_update_id, current_user.user_id)

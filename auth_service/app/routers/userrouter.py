from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from shared.core.auth import require_right
from shared.core.database import get_auth_db as get_db
from shared.utils.enums import Right
from ..schemas import userschema
from ..services import userservices

router = APIRouter(prefix="/api/users", tags=["Pantry Users"])


@router.get("/", response_model=userschema.UserListResponse,
            dependencies=[Depends(require_right(Right.GET_USERS))])
def read_users(
        skip: int = 0,
        limit: int = 100,
        db: Session = Depends(get_db)):
    return userservices.list_users(db, skip=skip, limit=limit)


@router.post("/", response_model=userschema.UserRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_right(Right.MANAGE_USERS))])
def create_user(
        new_user: userschema.UserCreate,
        db: Session = Depends(get_db)):
    return userservices.create_user(db, new_user)


@router.patch("/{user_id}/status", response_model=userschema.UserRead,
              dependencies=[Depends(require_right(Right.MANAGE_USERS))])
def update_status(
        user_id: UUID,
        body: userschema.UserStatusUpdate,
        db: Session = Depends(get_db)):
    return userservices.update_user_status(db, user_id, body.status)

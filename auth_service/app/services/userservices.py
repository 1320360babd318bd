import logging
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, NotFoundError
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserStatus
from ..schemas.userschema import UserCreate, UserListResponse, UserRead

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: UUID) -> Optional[Users]:
    return db.query(Users).filter(Users.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[Users]:
    return db.query(Users).filter(Users.email == email.lower()).first()


def create_user(db: Session, user: UserCreate, is_email_verified: bool = False) -> Users:
    # ✅ Check duplicate email
    if get_user_by_email(db, user.email):
        raise ConflictError(
            f"Email '{user.email}' is already registered.",
            AppStatusCode.USER_EMAIL_IS_UNIQUE)

    user_instance = Users(
        name=user.name,
        email=user.email.lower(),
        role=user.role,
        status=UserStatus.ACTIVE.value,
        is_email_verified=is_email_verified,
    )
    user_instance.set_password(user.password)

    db.add(user_instance)
    db.commit()
    db.refresh(user_instance)
    logger.info("Created %s user %s", user_instance.role, user_instance.email)
    return user_instance


def list_users(db: Session, skip: int = 0, limit: int = 100) -> UserListResponse:
    base_query = db.query(Users)
    total = base_query.count()
    users = base_query.order_by(Users.created_at.desc()).offset(
        skip).limit(limit).all()
    return UserListResponse(
        results=[UserRead.model_validate(u) for u in users],
        total_results=total
    )


def update_user_status(db: Session, user_id: UUID, new_status: str) -> Users:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found",
                            AppStatusCode.AUTHENTICATION_USER_INVALID)

    user.status = new_status
    db.commit()
    db.refresh(user)
    logger.info("User %s is now %s", user.email, new_status)
    return user

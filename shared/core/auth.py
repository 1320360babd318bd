import logging
from datetime import datetime, timedelta, timezone
from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import ROLE_RIGHTS, Right, UserRole, UserStatus
from shared.core.config import settings
from shared.helpers.json_response_helper import error_response
from shared.core.schemas import UserToken
from shared.core.database import get_auth_db as get_db

logger = logging.getLogger(__name__)

security = HTTPBearer()


def create_access_token(data: dict, expires_minutes: int = None):
    payload = data.copy()
    expires = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def token_payload_for(user: Users) -> dict:
    return {
        "user_id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        return UserToken(**payload)
    except (JWTError, ValueError):
        logger.info("Rejected invalid or expired token")
        return error_response(
            message="Invalid or expired token",
            status_code=AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED,
            http_status=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    # decoded token → contains user_id, name and role
    user_data = verify_token(credentials.credentials)

    user = db.query(Users).filter(Users.id == user_data.user_id).first()

    if not user:
        return error_response(
            message="User not found",
            status_code=AppStatusCode.AUTHENTICATION_USER_INVALID,
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if user.status.lower() != UserStatus.ACTIVE.value:
        return error_response(
            message="User is not active. Access denied",
            status_code=AppStatusCode.AUTHENTICATION_USER_INACTIVE,
            http_status=status.HTTP_403_FORBIDDEN
        )

    # role may have changed since the token was issued
    user_data.status = user.status
    user_data.role = user.role
    user_data.name = user.name
    return user_data


def require_right(right: Right):
    def checker(current_user: UserToken = Depends(validate_current_token)) -> UserToken:
        try:
            rights = ROLE_RIGHTS[UserRole(current_user.role)]
        except ValueError:
            rights = set()

        if right not in rights:
            return error_response(
                message="Access forbidden",
                status_code=AppStatusCode.AUTHORIZATION_FORBIDDEN,
                http_status=status.HTTP_403_FORBIDDEN
            )
        return current_user

    return checker

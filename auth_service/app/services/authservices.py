import logging
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.config import settings
from shared.core.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from shared.core.schemas import UserToken
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserStatus
from ..schemas.authschemas import AuthenticationResponse, LoginRequest
from ..schemas.userschema import RegisterRequest, UserCreate, UserRead
from . import userservices

logger = logging.getLogger(__name__)


def get_user_token(user: Users) -> AuthenticationResponse:
    token = auth.create_access_token(auth.token_payload_for(user))
    return AuthenticationResponse(
        access_token=token,
        expires_in=settings.JWT_EXPIRE_MINUTES * 60,
        user=UserRead.model_validate(user)
    )


def register(db: Session, req: RegisterRequest) -> AuthenticationResponse:
    # self-registration never grants admin
    user = userservices.create_user(db, UserCreate(
        name=req.name, email=req.email, password=req.password))
    return get_user_token(user)


def login(db: Session, req: LoginRequest) -> AuthenticationResponse:
    user = userservices.get_user_by_email(db, req.email)

    if not user or not user.verify_password(req.password):
        logger.info("Failed login for %s", req.email)
        raise UnauthorizedError("Incorrect email or password",
                                AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID)

    if user.status != UserStatus.ACTIVE.value:
        raise ForbiddenError("User is not active. Access denied",
                             AppStatusCode.AUTHENTICATION_USER_INACTIVE)

    return get_user_token(user)


def get_current_user(db: Session, current_user: UserToken) -> Users:
    user = userservices.get_user_by_id(db, current_user.user_id)
    if user is None:
        raise NotFoundError("User not found",
                            AppStatusCode.AUTHENTICATION_USER_INVALID)
    return user

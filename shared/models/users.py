import uuid
from sqlalchemy import TIMESTAMP, Boolean, Column, String, Uuid, func
from passlib.context import CryptContext
from ..core.database import AuthBase
from ..utils.enums import UserRole, UserStatus

bcrypt_context = CryptContext(schemes=['bcrypt'], deprecated='auto')


class Users(AuthBase):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default=UserRole.USER.value)
    status = Column(String(16), nullable=False,
                    default=UserStatus.ACTIVE.value)
    is_email_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)

from pydantic import BaseModel, EmailStr
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from .userschema import UserRead


class LoginRequest(EmptyStringModel):
    email: EmailStr
    password: str


class TokenSuccessResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class AuthenticationResponse(TokenSuccessResponse):
    user: UserRead

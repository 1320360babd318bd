from fastapi import status

from shared.utils.app_status_code import AppStatusCode


class AppError(Exception):
    """Base for failures that map onto a distinct caller-visible status."""

    http_status = status.HTTP_400_BAD_REQUEST
    default_status_code = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str, status_code: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.default_status_code


class NotFoundError(AppError):
    http_status = status.HTTP_404_NOT_FOUND


class ForbiddenError(AppError):
    http_status = status.HTTP_403_FORBIDDEN
    default_status_code = AppStatusCode.AUTHORIZATION_FORBIDDEN


class ConflictError(AppError):
    # stale reads and duplicates surface as unprocessable
    http_status = 422


class ValidationError(AppError):
    http_status = 422
    default_status_code = AppStatusCode.INVALID_INPUT


class UnauthorizedError(AppError):
    http_status = status.HTTP_401_UNAUTHORIZED
    default_status_code = AppStatusCode.AUTHENTICATION_TOKEN_INVALID

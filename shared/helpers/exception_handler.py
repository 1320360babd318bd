import logging
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from shared.core.exceptions import AppError
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def failure(message: str, status_code: str) -> dict:
    return JsonOutResult(
        data=None,
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.info("%s %s -> %s: %s", request.method,
                    request.url.path, exc.http_status, exc.message)
        return JSONResponse(
            content=failure(exc.message, exc.status_code),
            status_code=exc.http_status
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already packs a JsonOutResult into detail
        if isinstance(exc.detail, dict) and "status_code" in exc.detail:
            wrapped = exc.detail
        else:
            wrapped = failure(str(exc.detail), str(exc.status_code))
        return JSONResponse(content=wrapped, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        wrapped = failure(str(exc), AppStatusCode.INVALID_INPUT)
        return JSONResponse(content=wrapped, status_code=422)

    # models built inside handlers (filters, tool inputs)
    @app.exception_handler(PydanticValidationError)
    async def model_validation_handler(request: Request, exc: PydanticValidationError):
        wrapped = failure(str(exc), AppStatusCode.INVALID_INPUT)
        return JSONResponse(content=wrapped, status_code=422)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)
        return JSONResponse(
            content=failure(str(exc), AppStatusCode.OPERATION_FAILED),
            status_code=500
        )

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi.responses import JSONResponse
from fastapi import Request
from shared.core.schemas import JsonOutResult
from typing import Callable
import json
import logging

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = {"status", "status_code", "message"}


def _headers_without_length(response):
    return {k: v for k, v in response.headers.items() if k.lower() != "content-length"}


class JsonResponseMiddleware(BaseHTTPMiddleware):
    """Wrap every JSON body in the JsonOutResult envelope."""

    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        response = await call_next(request)

        content_type = response.headers.get("content-type", "")
        if response.status_code == 204 or "application/json" not in content_type:
            return response

        # Read the full body
        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        try:
            data = json.loads(body_bytes.decode("utf-8"))
        except ValueError:
            logger.warning("Could not decode JSON body for %s", request.url.path)
            data = None

        # Skip wrapping if already wrapped
        if isinstance(data, dict) and ENVELOPE_KEYS.issubset(data.keys()):
            return JSONResponse(
                content=data,
                status_code=response.status_code,
                headers=_headers_without_length(response),
            )

        # Error responses (4xx/5xx)
        if not (200 <= response.status_code < 400):
            message = ""
            if isinstance(data, dict):
                message = data.get("detail") or data.get("message") or ""
            elif isinstance(data, str):
                message = data
            if not message:
                message = "An unexpected error occurred"

            wrapped_error = JsonOutResult(
                data=None,
                status="Failure",
                status_code=str(response.status_code),
                message=str(message),
            ).model_dump()

            return JSONResponse(
                content=wrapped_error,
                status_code=response.status_code,
                headers=_headers_without_length(response),
            )

        wrapped = JsonOutResult(
            data=data,
            status="Success",
            status_code=str(response.status_code),
            message="Data retrieved successfully"
        ).model_dump()

        return JSONResponse(
            content=wrapped,
            status_code=response.status_code,
            headers=_headers_without_length(response),
        )

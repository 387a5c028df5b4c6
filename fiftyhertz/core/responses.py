"""
Response envelope

Every response body has the shape
{"error": bool, "code": int, "status": 1|0, "message": str, "payload": {...}}
"""
import logging
from typing import Any, Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fiftyhertz.core.exceptions import ApiError

logger = logging.getLogger(__name__)


def envelope(code: int, message: str, payload: Optional[Any] = None) -> dict:
    failed = code >= 400
    return {
        "error": failed,
        "code": code,
        "status": 0 if failed else 1,
        "message": message,
        "payload": payload if payload is not None else {},
    }


def success(message: str, payload: Optional[Any] = None, code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=code, content=envelope(code, message, payload))


def failure(code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=code, content=envelope(code, message), headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return failure(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return failure(400, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return failure(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

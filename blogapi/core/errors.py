"""
Exception handlers registered on the FastAPI app.

Every failure leaves the API as a JSON object with an ``error`` field:

    HTTPException            -> its status code, {"error": detail}
    RequestValidationError   -> 422, {"error": "Invalid input", "details": [...]}
    anything else            -> 500, {"error": "Internal server error"}
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("blogapi")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Validation failed on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid input", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


exception_handlers = {
    StarletteHTTPException: http_exception_handler,
    RequestValidationError: request_validation_exception_handler,
    Exception: unhandled_exception_handler,
}

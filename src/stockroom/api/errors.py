"""Translate domain failures into JSON error responses."""

import os

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockroom.errors import InvalidStockOperationError, StockroomError

logger = structlog.get_logger(__name__)


async def stockroom_error_handler(request: Request, exc: StockroomError):
    if isinstance(exc, InvalidStockOperationError):
        logger.warning("Rejected stock operation", path=request.url.path, operation=exc.operation)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": exc.messages})


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = {".".join(str(part) for part in error["loc"]): error["msg"] for error in exc.errors()}
    return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": errors})


async def not_found_handler(request: Request, exc: ObjectNotFoundError):
    return JSONResponse(status_code=404, content={"message": "Resource not found"})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        content = {"message": "Route not found", "path": request.url.path, "method": request.method}
    else:
        content = {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    content = {"message": "Internal server error"}
    if os.environ.get("ENVIRONMENT") == "development":
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StockroomError, stockroom_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

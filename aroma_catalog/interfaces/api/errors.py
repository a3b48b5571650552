"""Translate domain errors into HTTP responses."""

from typing import Dict, Type

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aroma_catalog.application.errors import (
    AlreadyFavoritedError,
    CatalogError,
    CollectionNotFoundError,
    DuplicateProductError,
    FavoriteNotFoundError,
    InvalidProductError,
    InvalidQueryError,
    ProductNotFoundError,
)
from aroma_catalog.config.logging_config import get_logger
from aroma_catalog.interfaces.api.schemas.common import ErrorResponse

logger = get_logger(__name__)

ERROR_STATUS: Dict[Type[CatalogError], int] = {
    InvalidQueryError: 400,
    InvalidProductError: 400,
    DuplicateProductError: 400,
    ProductNotFoundError: 404,
    CollectionNotFoundError: 404,
    FavoriteNotFoundError: 404,
    AlreadyFavoritedError: 409,
}


def to_http_exception(error: CatalogError) -> HTTPException:
    """Map a domain error onto an HTTPException carrying the error envelope."""
    status_code = ERROR_STATUS.get(type(error), 500)
    detail = {"error": error.message}
    if error.details:
        detail["details"] = error.details
    return HTTPException(status_code=status_code, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        body = ErrorResponse(**exc.detail)
    else:
        body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render query/body validation failures in the error envelope."""
    body = ErrorResponse(
        error="Invalid request parameters",
        details={"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Exception handlers that render every failure as JSON {"message": ...}."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from offiswap.core.errors import Internal, OffiSwapError

logger = logging.getLogger(__name__)


def _describe_validation_error(errors: list[dict[str, Any]]) -> str:
    """Human-readable summary of the first validation error."""
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        return "Invalid listing ID format."
    if not errors:
        return "Invalid input."
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON."
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if not field:
        # Model-level validators (the availability window) report against the whole body.
        cause = first.get("ctx", {}).get("error")
        if first.get("type") == "value_error" and cause is not None:
            return f"{cause}."
        return "Request body is missing or malformed."
    if first.get("type") == "missing":
        return f"{field} is required."
    return f"Invalid value for {field}: {first.get('msg', 'invalid')}."


async def offiswap_error_handler(request: Request, exc: OffiSwapError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": _describe_validation_error(errors),
            "errors": jsonable_encoder(errors, custom_encoder={Exception: str}),
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unexpected database error on %s %s", request.method, request.url.path)
    return await offiswap_error_handler(request, Internal())


def install_error_handlers(app: FastAPI) -> None:
    """Register all handlers on the app."""
    app.add_exception_handler(OffiSwapError, offiswap_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses (SRP, OCP for adding new handlers).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import TodoException, ValidationException
from app.pages.tasks import render_not_found_page
from app.schemas.errors import (
    FieldErrorDetail,
    ValidationErrorResponse,
    field_errors_from_pydantic,
)

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
}

# Routes under this prefix render HTML pages instead of JSON errors.
_HTML_PREFIX = "/tasks"


def _wants_html(request: Request) -> bool:
    return request.url.path == _HTML_PREFIX or request.url.path.startswith(
        _HTML_PREFIX + "/"
    )


def _validation_response(errors: list[FieldErrorDetail]) -> JSONResponse:
    """Return 400 with the {message, errors[]} validation body."""
    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(errors=errors).model_dump(),
    )


def _todo_exception_handler(request: Request, exc: TodoException) -> Any:
    """Return JSON from TodoException.to_dict() with appropriate status code.

    ValidationException uses the field error body; not-found on HTML routes
    renders the not-found page.
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if isinstance(exc, ValidationException):
        return _validation_response(
            [
                FieldErrorDetail(
                    field=exc.details.get("field", ""),
                    defaultMessage=exc.message,
                    code=exc.details.get("code"),
                )
            ]
        )
    if status == 404 and _wants_html(request):
        return HTMLResponse(content=render_not_found_page(exc.message), status_code=404)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with one entry per failed field, in field order."""
    return _validation_response(field_errors_from_pydantic(exc.errors()))


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Any:
    """Return JSON for Starlette HTTP exceptions (status + detail); HTML 404 on view routes."""
    if exc.status_code == 404 and _wants_html(request):
        return HTMLResponse(content=render_not_found_page(str(exc.detail)), status_code=404)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TodoException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TodoException, _todo_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)

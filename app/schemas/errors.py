"""Validation error schemas. The shape is a stable contract for the front-end."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from app.core.constants import VALIDATION_FAILED_MESSAGE

_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


class FieldErrorDetail(BaseModel):
    """One field error: field name, message, and rule code."""

    field: str
    defaultMessage: str
    code: str | None = None


class ValidationErrorResponse(BaseModel):
    """Response for 400 validation failures."""

    message: str = VALIDATION_FAILED_MESSAGE
    errors: list[FieldErrorDetail]


def _field_name(loc: Sequence[Any]) -> str:
    """Join a pydantic error location into a field path (e.g. status[0])."""
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    name = ""
    for part in parts:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name += f".{part}" if name else str(part)
    return name


def field_errors_from_pydantic(errors: Sequence[dict[str, Any]]) -> list[FieldErrorDetail]:
    """Convert pydantic/FastAPI error dicts to FieldErrorDetail, keeping order.

    An error whose ctx carries "more" (code, message) pairs expands into one
    entry per violated rule of that field.
    """
    details: list[FieldErrorDetail] = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        details.append(
            FieldErrorDetail(
                field=field, defaultMessage=err.get("msg", ""), code=err.get("type")
            )
        )
        for code, message in (err.get("ctx") or {}).get("more", ()):
            details.append(FieldErrorDetail(field=field, defaultMessage=message, code=code))
    return details

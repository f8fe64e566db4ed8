"""
Error response schemas for API endpoints.

Validation failures are reported per form field so a client can show each
message next to its input.
"""
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field


class ValidationErrorResponse(BaseModel):
    """Response body for 422 validation failures on bookmark requests."""

    detail: str = "Validation failed"
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Field name to message, e.g. {'url': 'URL is required'}",
    )


def field_errors(errors: Sequence[Any]) -> dict[str, str]:
    """
    Flatten pydantic error dicts into a field-to-message mapping.

    Messages raised from our own validators (ValueError) are returned without
    pydantic's "Value error, " prefix. Other errors (wrong type, malformed body)
    keep pydantic's message. Only the first error per field is kept.

    Args:
        errors: Output of `ValidationError.errors()` or `RequestValidationError.errors()`.
    """
    result: dict[str, str] = {}
    for error in errors:
        # Request errors are located as ("body", "title"); model errors as ("title",)
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = loc[-1] if loc else "body"
        if field in result:
            continue
        ctx_error = error.get("ctx", {}).get("error")
        if isinstance(ctx_error, ValueError):
            result[field] = str(ctx_error)
        else:
            result[field] = error.get("msg", "Invalid value")
    return result

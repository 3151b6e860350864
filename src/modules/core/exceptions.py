"""Standardised error responses for the HTTP layer.

Every client-facing error uses the same envelope::

    {
        "type": "client_error" | "validation_error",
        "errors": [{"code": "...", "detail": "...", "attr": null}]
    }

Views build it through ``error_response`` when they translate domain
exceptions.  ``custom_exception_handler`` (wired as DRF's
``EXCEPTION_HANDLER``) applies the same envelope to DRF's own errors and
turns anything it cannot classify into a body-less 500 so internals never
leak to the client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

CLIENT_ERROR = "client_error"
VALIDATION_ERROR = "validation_error"


def error_response(
    status_code: int,
    code: str,
    detail: str,
    attr: Optional[str] = None,
    error_type: str = CLIENT_ERROR,
) -> Response:
    """Build a single-error response in the standard envelope."""
    return Response(
        {
            "type": error_type,
            "errors": [{"code": code, "detail": detail, "attr": attr}],
        },
        status=status_code,
    )


def validation_error_response(exc: PydanticValidationError) -> Response:
    """Translate a pydantic ``ValidationError`` into a 400 response."""
    errors = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        errors.append(
            {
                "code": "invalid_input",
                "detail": error["msg"],
                "attr": ".".join(str(part) for part in loc) or None,
            }
        )
    return Response(
        {"type": VALIDATION_ERROR, "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            nested = key if attr is None else f"{attr}.{key}"
            if key == "non_field_errors":
                nested = attr
            errors.extend(_flatten(value, nested))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler producing the standard error envelope."""
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is None:
        logger.error(
            "request.unhandled_exception",
            view=view_name,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    error_type = VALIDATION_ERROR if isinstance(exc, ValidationError) else CLIENT_ERROR
    detail = exc.detail if isinstance(exc, APIException) else response.data
    if isinstance(detail, dict) and set(detail) == {"detail"}:
        detail = detail["detail"]
    response.data = {"type": error_type, "errors": _flatten(detail)}
    logger.warning(
        "request.client_error",
        view=view_name,
        status_code=response.status_code,
    )
    return response

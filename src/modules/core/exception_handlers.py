"""Project-wide DRF exception handler.

Renders every error that escapes a view in the ``{"message": ...}``
envelope:

- ``ParseError`` (malformed JSON body) → 422.
- Other DRF ``APIException``s keep their own status (404 route, 405, ...).
- ``DomainError`` subclasses map to 400 / 404 / 409.
- Anything else is an unclassified infrastructure failure → 500.  It is
  logged with its traceback; the exception text reaches the client only
  when ``DEBUG`` is on.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.conf import settings
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from modules.core.responses import error_response

logger = structlog.get_logger(__name__)

DOMAIN_ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for_domain_error(exc: DomainError) -> int:
    """HTTP status for a domain error, matched by class hierarchy."""
    for error_class, status_code in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _api_exception_message(exc: APIException) -> str:
    detail = exc.detail
    if isinstance(detail, dict):
        detail = next(iter(detail.values()), "")
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` hook."""
    set_rollback()

    if isinstance(exc, ParseError):
        return error_response(
            _api_exception_message(exc), status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    if isinstance(exc, APIException):
        response = error_response(_api_exception_message(exc), exc.status_code)
        if getattr(exc, "wait", None):
            response["Retry-After"] = str(int(exc.wait))
        return response

    if isinstance(exc, Http404):
        return error_response("not found", status.HTTP_404_NOT_FOUND)

    if isinstance(exc, DomainError):
        return error_response(exc.message, status_for_domain_error(exc))

    view = context.get("view")
    logger.exception(
        "api.unhandled_error",
        view=view.__class__.__name__ if view else None,
        error_type=type(exc).__name__,
    )
    message = str(exc) if settings.DEBUG else "internal server error"
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

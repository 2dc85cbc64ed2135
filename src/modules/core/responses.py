"""Uniform response envelope for the HTTP API.

Success bodies wrap the payload in ``{"data": ...}``; error bodies carry
``{"message": "..."}``.  Views build every response through these helpers
so the envelope never drifts between endpoints.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status
from rest_framework.response import Response


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> Response:
    """Wrap ``data`` in the success envelope."""
    return Response({"data": data}, status=status_code)


def error_response(message: str, status_code: int) -> Response:
    """Build a consistent JSON error response."""
    return Response({"message": message}, status=status_code)


def no_content_response() -> Response:
    return Response(status=status.HTTP_204_NO_CONTENT)

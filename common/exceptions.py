"""
Error taxonomy and the project-wide DRF exception handler.

Every failure leaving the API has the body ``{"error": ..., "code": ...}``
so the web client can branch on ``code`` instead of parsing messages.
Validation failures additionally carry a ``fields`` mapping.  Exceptions
that are not ``APIException`` subclasses are logged with their traceback
and reported as a generic 500.
"""
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class InvalidInput(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "All required fields must be provided"
    default_code = "invalid_input"

    def __init__(self, detail=None, code=None, fields=None):
        super().__init__(detail, code)
        self.fields = fields


class InvalidAmount(InvalidInput):
    default_detail = "Valid amount is required"
    default_code = "invalid_amount"


class Forbidden(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = "forbidden"


class NotFound(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class PaymentNotCompleted(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Payment has not been completed successfully"
    default_code = "payment_not_completed"


class UpstreamUnavailable(exceptions.APIException):
    """The payment processor could not be reached or rejected the call."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Payment processor unavailable"
    default_code = "upstream_unavailable"


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """Render every API error as ``{"error", "code"}``."""
    if isinstance(exc, Http404):
        exc = NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = Forbidden()

    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if response is None:
        logger.exception("Unhandled error in %s", view_name, exc_info=exc)
        return Response(
            {"error": "Internal server error", "code": "server_error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error": _first_message(exc.detail) or InvalidInput.default_detail,
            "code": InvalidInput.default_code,
            "fields": exc.detail if isinstance(exc.detail, dict) else {"non_field_errors": exc.detail},
        }
        return response

    detail = getattr(exc, "detail", "")
    codes = exc.get_codes() if isinstance(exc, exceptions.APIException) else None
    response.data = {
        "error": _first_message(detail),
        "code": codes if isinstance(codes, str) else getattr(exc, "default_code", "error"),
    }
    if getattr(exc, "fields", None):
        response.data["fields"] = exc.fields
    if response.status_code >= 500:
        logger.error("%s failed: %s", view_name, response.data["error"])
    return response

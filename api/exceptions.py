"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every domain error maps to an explicit status code and JSON body.
"""

import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ConfigurationException,
    DomainException,
    InvalidRequestError,
    LicenseStoreError,
    WebhookAuthenticationError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, correlation_id)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"ok": False, "error": str(detail or exc.default_detail)}
    else:
        response = _handle_unexpected_exception(exc, correlation_id)

    if correlation_id:
        response["X-Correlation-ID"] = correlation_id
    return response


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _status_for(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status."""
    if isinstance(exc, WebhookAuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, InvalidRequestError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, (ConfigurationException, LicenseStoreError)):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = _status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Domain exception: %s - %s",
        exc.code,
        exc.message,
        extra={"correlation_id": correlation_id, "status_code": status_code},
    )
    return Response(exc.to_dict(), status=status_code)


def _handle_unexpected_exception(exc: Exception, correlation_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return Response(
        {"ok": False, "error": "Internal error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

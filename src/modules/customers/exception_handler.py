"""DRF exception handler rendering every API failure in the response envelope.

Domain errors raised by the Service Layer are mapped to HTTP statuses here;
DRF's own ``APIException`` subclasses (malformed JSON, unsupported media
type, authentication, method not allowed) keep their status code; anything
else is logged with its traceback and reported as a 500.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.views import set_rollback

from modules.customers.exceptions import (
    CustomerNotFound,
    DuplicateEmail,
    InvalidCustomer,
    RequiredFieldNull,
    StorageFailure,
)
from modules.customers.responses import (
    MSG_DUPLICATE_EMAIL,
    MSG_INVALID_INPUT,
    MSG_NOT_FOUND,
    MSG_NULL_VALUES,
    MSG_UNKNOWN_ERROR,
    MSG_VALIDATION,
    build_api_response,
)

logger = structlog.get_logger(__name__)


def _domain_response(exc: Exception):
    # CustomerNotFound is an InvalidCustomer; it must be matched first.
    if isinstance(exc, CustomerNotFound):
        return status.HTTP_404_NOT_FOUND, MSG_NOT_FOUND
    if isinstance(exc, InvalidCustomer):
        return status.HTTP_400_BAD_REQUEST, f"{MSG_VALIDATION}: {', '.join(exc.fields)}"
    if isinstance(exc, DuplicateEmail):
        return status.HTTP_409_CONFLICT, MSG_DUPLICATE_EMAIL
    if isinstance(exc, RequiredFieldNull):
        return status.HTTP_400_BAD_REQUEST, MSG_NULL_VALUES
    if isinstance(exc, StorageFailure):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_UNKNOWN_ERROR
    return None


def api_exception_handler(exc, context):
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view else None, error=str(exc))

    mapped = _domain_response(exc)
    if mapped is not None:
        code, message = mapped
        if code >= 500:
            log.error("api.storage_failure", error_type=type(exc).__name__)
        else:
            log.warning("api.domain_error", error_type=type(exc).__name__, status_code=code)
        set_rollback()
        return build_api_response(False, code, message=message)

    if isinstance(exc, APIException):
        message = MSG_INVALID_INPUT if isinstance(exc, ParseError) else str(exc.detail)
        log.warning("api.request_rejected", error_type=type(exc).__name__, status_code=exc.status_code)
        set_rollback()
        response = build_api_response(False, exc.status_code, message=message)
        if getattr(exc, "auth_header", None):
            response["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            response["Retry-After"] = "%d" % exc.wait
        return response

    log.exception("api.unhandled_error", error_type=type(exc).__name__)
    set_rollback()
    return build_api_response(False, status.HTTP_500_INTERNAL_SERVER_ERROR, message=MSG_UNKNOWN_ERROR)

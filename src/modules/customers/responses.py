"""Response envelope helpers shared by the customer views and the exception handler."""

from __future__ import annotations

from typing import Optional

from rest_framework.response import Response

from modules.customers.models import Customer
from modules.customers.serializers import CustomerApiResponseSerializer

# Messages returned to API clients.
MSG_VALIDATION = (
    "Failed due to property validations, check for missing or badly formatted properties"
)
MSG_INVALID_INPUT = (
    "Failed due to invalid input, check for missing or badly formatted properties"
)
MSG_NULL_VALUES = "Failed due to null values"
MSG_DUPLICATE_EMAIL = "Failed due to email already being in use"
MSG_UNKNOWN_ERROR = "Failed due to an unknown error"
MSG_NOT_FOUND = "Customer not found"
MSG_UPDATE_NOT_FOUND = "Customer with the ID does not exist"
MSG_CREATE_FAILED = "failed to add a new customer"
MSG_UPDATE_FAILED = "Customer modification failed"
MSG_DELETED = "Customer deleted successfully"
MSG_DELETE_FAILED = "Customer deletion failed"


def build_api_response(
    success: bool,
    status: int,
    message: Optional[str] = None,
    customer: Optional[Customer] = None,
) -> Response:
    payload = {"success": success}
    if message is not None:
        payload["message"] = message
    if customer is not None:
        payload["customer"] = customer
    return Response(CustomerApiResponseSerializer(payload).data, status=status)

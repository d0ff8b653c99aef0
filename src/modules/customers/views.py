"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet:

- ``POST   /api/customers``       create
- ``GET    /api/customers/{id}``  fetch
- ``PUT    /api/customers/{id}``  update
- ``DELETE /api/customers/{id}``  delete

Every response uses the ``{success, message?, customer?}`` envelope.
Route-specific outcomes (absence, vanished writes) are answered here; all
other domain errors bubble up to ``api_exception_handler``.
"""

from __future__ import annotations

from typing import Optional

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.exceptions import CustomerNotFound, PersistedCustomerMissing
from modules.customers.models import Customer
from modules.customers.repositories import CustomerDjangoRepository
from modules.customers.responses import (
    MSG_CREATE_FAILED,
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_NOT_FOUND,
    MSG_UPDATE_FAILED,
    MSG_UPDATE_NOT_FOUND,
    build_api_response,
)
from modules.customers.serializers import CustomerApiResponseSerializer, CustomerSerializer
from modules.customers.services import CustomerService

# Upper bound of a BigAutoField primary key.
MAX_CUSTOMER_ID = 2**63 - 1

ENVELOPE = CustomerApiResponseSerializer


def _parse_id(pk: Optional[str]) -> Optional[int]:
    """Turn the URL id into an int; ``None`` when it cannot name a customer."""
    try:
        value = int(pk)
    except (TypeError, ValueError):
        return None
    if value <= 0 or value > MAX_CUSTOMER_ID:
        return None
    return value


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def get_permissions(self):
        if settings.API_REQUIRE_AUTH:
            return [IsAuthenticated()]
        return [AllowAny()]

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Fetch a customer",
        responses={200: ENVELOPE, 404: OpenApiResponse(ENVELOPE, description="Customer not found")},
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/customers/{pk}"""
        customer_id = _parse_id(pk)
        customer = self._service.get_by_id(customer_id) if customer_id else None
        if customer is None:
            return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_NOT_FOUND)
        return build_api_response(True, status.HTTP_200_OK, customer=customer)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create a customer",
        request=CustomerSerializer,
        responses={
            201: ENVELOPE,
            400: OpenApiResponse(ENVELOPE, description="Invalid or missing properties"),
            404: OpenApiResponse(ENVELOPE, description="Customer could not be created"),
            409: OpenApiResponse(ENVELOPE, description="Email already in use"),
            500: OpenApiResponse(ENVELOPE, description="Unexpected storage failure"),
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/customers"""
        try:
            customer = self._service.upsert(request.data)
        except PersistedCustomerMissing:
            return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_CREATE_FAILED)
        return build_api_response(True, status.HTTP_201_CREATED, customer=customer)

    @extend_schema(
        summary="Update a customer",
        request=CustomerSerializer,
        responses={
            200: ENVELOPE,
            400: OpenApiResponse(ENVELOPE, description="Invalid or missing properties"),
            404: OpenApiResponse(ENVELOPE, description="Customer with the ID does not exist"),
            409: OpenApiResponse(ENVELOPE, description="Email already in use"),
        },
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/customers/{pk}

        PUT only modifies existing customers, it never creates one.
        """
        customer_id = _parse_id(pk)
        if customer_id is None:
            return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_UPDATE_NOT_FOUND)
        try:
            customer = self._service.upsert(request.data, id=customer_id)
        except CustomerNotFound:
            return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_UPDATE_NOT_FOUND)
        except PersistedCustomerMissing:
            return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_UPDATE_FAILED)
        return build_api_response(True, status.HTTP_200_OK, customer=customer)

    @extend_schema(
        summary="Delete a customer",
        request=None,
        responses={
            200: ENVELOPE,
            404: OpenApiResponse(ENVELOPE, description="Customer deletion failed"),
        },
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/customers/{pk}"""
        customer_id = _parse_id(pk)
        if customer_id and self._service.delete(customer_id):
            return build_api_response(True, status.HTTP_200_OK, message=MSG_DELETED)
        return build_api_response(False, status.HTTP_404_NOT_FOUND, message=MSG_DELETE_FAILED)

"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer entity, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Field validation happens before any store call (``CustomerInputDTO``).
- ``upsert`` creates when no id is given and updates an existing record
  otherwise; an unknown id is rejected before the store is touched.
- Email uniqueness is left to the store's atomic constraint; the resulting
  ``ConstraintViolation`` is translated into a domain error here, once.
- The record returned is always re-read from the store, which owns ``id``,
  ``created_at`` and ``modified_at``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import structlog
from django.db import transaction

from modules.core.repositories.integrity import ConstraintKind, ConstraintViolation
from modules.customers.dtos import UPDATABLE_FIELDS, CustomerInputDTO
from modules.customers.exceptions import (
    CustomerError,
    CustomerNotFound,
    DuplicateEmail,
    InvalidCustomer,
    PersistedCustomerMissing,
    RequiredFieldNull,
    StorageFailure,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

CustomerInput = Union[CustomerInputDTO, Mapping[str, Any]]


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def upsert(self, data: CustomerInput, id: Optional[int] = None) -> Customer:
        """Create a customer, or update the one identified by ``id``.

        Raises:
            InvalidCustomer: if a field is missing, malformed or oversized,
                or ``id`` is negative.
            CustomerNotFound: if ``id`` is given but not stored.
            DuplicateEmail: if the email is used by another customer.
            RequiredFieldNull: if the store rejected a NULL column.
            StorageFailure: for any other constraint failure, or when the
                written record cannot be read back.
        """
        dto = data if isinstance(data, CustomerInputDTO) else CustomerInputDTO.from_payload(data)

        if id is not None and id < 0:
            raise InvalidCustomer({"id": ["Customer id must be a positive integer."]})

        log = logger.bind(email=dto.email)

        if id:
            customer = self._repo.get_by_id(id)
            if customer is None:
                log.warning("customer.update_unknown_id", customer_id=id)
                raise CustomerNotFound(id)
            for field in UPDATABLE_FIELDS:
                setattr(customer, field, getattr(dto, field))
        else:
            customer = Customer(
                first_name=dto.first_name,
                last_name=dto.last_name,
                email=dto.email,
            )

        try:
            saved = self._repo.save(customer)
        except ConstraintViolation as exc:
            raise self._translate(exc, log) from exc

        stored = self._repo.get_by_id(saved.pk)
        if stored is None:
            log.error("customer.missing_after_write", customer_id=saved.pk)
            raise PersistedCustomerMissing(f"Customer {saved.pk} was not found after saving.")

        log.info("customer.updated" if id else "customer.created", customer_id=stored.pk)
        return stored

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer.

        Returns ``False`` (never raises) when no customer has this id.
        """
        if not self._repo.exists(id):
            logger.info("customer.delete_missing", customer_id=id)
            return False
        deleted = self._repo.delete(id)
        logger.info("customer.deleted", customer_id=id, deleted=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Return the customer, or ``None`` when absent."""
        customer = self._repo.get_by_id(id)
        logger.info("customer.retrieved", customer_id=id, found=customer is not None)
        return customer

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _translate(violation: ConstraintViolation, log) -> CustomerError:
        if violation.kind == ConstraintKind.UNIQUE and violation.column in (None, "email"):
            log.warning("customer.duplicate_email")
            return DuplicateEmail("Email is not unique!")
        if violation.kind == ConstraintKind.NOT_NULL:
            log.warning("customer.required_field_null", field=violation.column)
            return RequiredFieldNull(violation.column)
        log.error("customer.storage_failure", kind=str(violation.kind), detail=violation.detail)
        return StorageFailure(str(violation))

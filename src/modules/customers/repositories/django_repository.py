"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern for absence: methods return
``None`` / ``False`` instead of raising.  Integrity errors raised by the
database are translated into a structured ``ConstraintViolation`` so the
Service Layer never has to look at driver messages.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.repositories.integrity import ConstraintViolation
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or unusable IDs (non-numeric,
        out of the column's range).
        """
        try:
            return Customer.objects.filter(pk=id).first()
        except (ValueError, TypeError, OverflowError):
            return None

    def exists(self, id: int) -> bool:
        try:
            return Customer.objects.filter(pk=id).exists()
        except (ValueError, TypeError, OverflowError):
            return False

    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        The write runs in its own savepoint so a rejected statement leaves
        any enclosing transaction usable.

        Raises:
            ConstraintViolation: if a unique / not-null / other constraint
                rejected the write.
        """
        is_new = entity._state.adding
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            violation = ConstraintViolation.from_integrity_error(exc)
            logger.warning(
                "customer.constraint_violation",
                kind=str(violation.kind),
                column=violation.column,
                is_new=is_new,
            )
            raise violation from exc

        logger.info("customer.saved", customer_id=entity.pk, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer by ID.

        Returns ``True`` if a row was removed, ``False`` if no customer
        exists with the given ID.
        """
        try:
            deleted, _ = Customer.objects.filter(pk=id).delete()
        except (ValueError, TypeError, OverflowError):
            return False
        if deleted:
            logger.info("customer.hard_deleted", customer_id=id)
        return bool(deleted)

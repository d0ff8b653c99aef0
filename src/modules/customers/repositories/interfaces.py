"""Customer repository interface.

Specializes ``IRepository`` for ``Customer``.  Email uniqueness is not
looked up here: the store's unique constraint decides it atomically on
``save``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

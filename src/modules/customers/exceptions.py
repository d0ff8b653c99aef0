"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated or the store
rejects a write.  The API layer translates them into HTTP responses; none
of these classes know anything about HTTP.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class CustomerError(Exception):
    """Base class for every customer domain error."""


class InvalidCustomer(CustomerError):
    """Customer data is missing, malformed or oversized.

    ``errors`` maps each offending field to its messages.
    """

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None) -> None:
        self.errors = errors
        super().__init__(message or f"Invalid customer fields: {', '.join(self.fields)}")

    @property
    def fields(self) -> List[str]:
        return sorted(self.errors)


class CustomerNotFound(InvalidCustomer):
    """An update referenced a customer id that is not stored."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(
            {"id": [f"Customer {id} does not exist."]},
            message=f"Customer {id} not found.",
        )


class DuplicateEmail(CustomerError):
    """Another customer already uses this email address."""


class RequiredFieldNull(CustomerError):
    """A required column received NULL after slipping past validation."""

    def __init__(self, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(
            f"Null is not allowed for {field}." if field else "Null is not allowed for properties."
        )


class StorageFailure(CustomerError):
    """The store failed for a reason that is not a known constraint violation."""


class PersistedCustomerMissing(StorageFailure):
    """A write reported success but the record could not be read back."""

"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
``CustomerInputDTO`` is the contract between the API layer and the
Service layer for both create and update (upsert), and is immutable
(``frozen=True``).

Email syntax is checked with ``email-validator``: local part at most 64
characters, a valid domain, no consecutive dots and no unquoted ``@`` in the
local part. The address is stored exactly as sent: display names
(``Name <addr>``) and surrounding whitespace are rejected rather than
stripped, and letter case is kept.
"""

from __future__ import annotations

from typing import Any, Dict, List

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from modules.customers.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from modules.customers.exceptions import InvalidCustomer

PAYLOAD_FIELD = "payload"

UPDATABLE_FIELDS = ("first_name", "last_name", "email")


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by top-level field name."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else PAYLOAD_FIELD
        errors.setdefault(field, []).append(error["msg"])
    return errors


class CustomerInputDTO(BaseModel):
    """Immutable DTO for customer create/update requests.

    Unknown keys (``id``, timestamps) are ignored: those are owned by the
    store and never taken from the caller.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str

    @field_validator("email", mode="before")
    @classmethod
    def check_email_length(cls, v: Any) -> Any:
        if isinstance(v, str):
            if not v:
                raise ValueError("Email must not be empty.")
            if len(v) > EMAIL_MAX_LENGTH:
                raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters.")
        return v

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        if v != v.strip() or any(c.isspace() or c in "<>" for c in v):
            raise ValueError("Email must be a bare address without spaces or display name.")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(str(exc)) from exc
        # validate_email normalizes; the caller's spelling is what gets stored.
        return v

    @classmethod
    def from_payload(cls, payload: Any) -> CustomerInputDTO:
        """Validate an untrusted payload.

        Raises:
            InvalidCustomer: with the failing fields.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidCustomer(field_errors(exc)) from exc

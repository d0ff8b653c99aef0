"""Customer model.

Business rules implemented at the store level:
- Email must be unique across all customers (database ``UNIQUE``).
- First name, last name and email are ``NOT NULL``.
- ``id`` is an auto-incrementing integer assigned on insert.
- ``created_at`` / ``modified_at`` maintained by ``TimestampedModel``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel
from modules.customers.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH


class Customer(TimestampedModel):
    first_name = models.CharField(max_length=NAME_MAX_LENGTH)
    last_name = models.CharField(max_length=NAME_MAX_LENGTH)
    email = models.EmailField(max_length=EMAIL_MAX_LENGTH, unique=True)

    class Meta:
        db_table = "customer"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} (#{self.pk})"

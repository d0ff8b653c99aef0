"""Customer DRF serializers for API output and documentation.

Input validation lives in ``dtos.py`` (Pydantic); these serializers render
stored customers and the response envelope, and describe both in the
OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read representation of a Customer.

    Only ``first_name``, ``last_name`` and ``email`` are writable, which is
    also what the schema advertises as the request body.
    """

    class Meta:
        model = Customer
        fields = [
            "id",
            "first_name",
            "last_name",
            "email",
            "created_at",
            "modified_at",
        ]
        read_only_fields = ["id", "created_at", "modified_at"]
        # Uniqueness is enforced by the store and reported by the service.
        extra_kwargs = {"email": {"validators": []}}


class CustomerApiResponseSerializer(serializers.Serializer):
    """``{success, message?, customer?}`` envelope; absent keys are omitted."""

    success = serializers.BooleanField()
    message = serializers.CharField(required=False)
    customer = CustomerSerializer(required=False)

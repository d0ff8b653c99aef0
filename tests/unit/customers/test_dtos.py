"""Unit tests for CustomerInputDTO.

Covers:
- Valid payloads and boundary lengths.
- Field-level failures reported per field through ``InvalidCustomer``.
- Email grammar (local-part length, consecutive dots, unquoted ``@``).
- Frozen immutability and ignored store-owned keys.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CustomerInputDTO
from modules.customers.exceptions import InvalidCustomer

pytestmark = pytest.mark.unit


def _payload(**overrides):
    payload = {"first_name": "Man", "last_name": "Turtle", "email": "man@turtle.sea"}
    payload.update(overrides)
    return payload


def _failed_fields(payload) -> list[str]:
    with pytest.raises(InvalidCustomer) as excinfo:
        CustomerInputDTO.from_payload(payload)
    return excinfo.value.fields


# ===========================================================================
# Valid input
# ===========================================================================


class TestValidInput:
    def test_accepts_valid_payload(self):
        dto = CustomerInputDTO.from_payload(_payload())
        assert dto.first_name == "Man"
        assert dto.last_name == "Turtle"
        assert dto.email == "man@turtle.sea"

    def test_accepts_names_at_max_length(self):
        dto = CustomerInputDTO.from_payload(_payload(first_name="a" * 50, last_name="b" * 50))
        assert len(dto.first_name) == 50
        assert len(dto.last_name) == 50

    def test_accepts_single_character_names(self):
        dto = CustomerInputDTO.from_payload(_payload(first_name="M", last_name="T"))
        assert dto.first_name == "M"

    def test_accepts_local_part_of_64_characters(self):
        email = f"{'a' * 64}@turtle.sea"
        assert CustomerInputDTO.from_payload(_payload(email=email)).email == email

    def test_ignores_store_owned_keys(self):
        dto = CustomerInputDTO.from_payload(
            _payload(id=42, created_at="2020-01-01T00:00:00Z", modified_at="x")
        )
        assert not hasattr(dto, "id")


# ===========================================================================
# Names
# ===========================================================================


class TestNameValidation:
    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_empty_name_rejected(self, field):
        assert _failed_fields(_payload(**{field: ""})) == [field]

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_name_over_50_characters_rejected(self, field):
        assert _failed_fields(_payload(**{field: "x" * 51})) == [field]

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_null_name_rejected(self, field):
        assert _failed_fields(_payload(**{field: None})) == [field]

    def test_non_string_name_rejected(self):
        assert _failed_fields(_payload(first_name=123)) == ["first_name"]


# ===========================================================================
# Email
# ===========================================================================


class TestEmailValidation:
    @pytest.mark.parametrize(
        "email",
        [
            "",
            "not-an-email",
            "man@",
            "@turtle.sea",
            "man..turtle@turtle.sea",
            "man@turtle..sea",
            "man@turtle@sea.com",
            f"{'a' * 65}@turtle.sea",
        ],
    )
    def test_invalid_email_rejected(self, email):
        assert _failed_fields(_payload(email=email)) == ["email"]

    @pytest.mark.parametrize(
        "email",
        [
            "Evil <man@turtle.sea>",
            "<man@turtle.sea>",
            " man@turtle.sea ",
            "man@turtle.sea\n",
            "man turtle@turtle.sea",
        ],
    )
    def test_display_name_and_whitespace_rejected(self, email):
        assert _failed_fields(_payload(email=email)) == ["email"]

    @pytest.mark.parametrize("email", ["Man@Turtle.SEA", "MAN@turtle.sea", "man+shell@turtle.sea"])
    def test_email_kept_exactly_as_sent(self, email):
        assert CustomerInputDTO.from_payload(_payload(email=email)).email == email

    def test_email_over_254_characters_rejected(self):
        email = f"man@{'d' * 62}.{'o' * 62}.{'m' * 62}.{'a' * 62}.sea"
        assert len(email) > 254
        assert _failed_fields(_payload(email=email)) == ["email"]


# ===========================================================================
# Missing fields / payload shape
# ===========================================================================


class TestPayloadShape:
    def test_missing_fields_all_reported(self):
        assert _failed_fields({}) == ["email", "first_name", "last_name"]

    def test_multiple_invalid_fields_reported_together(self):
        fields = _failed_fields(_payload(first_name="", email="nope"))
        assert fields == ["email", "first_name"]

    def test_non_object_payload_rejected(self):
        assert _failed_fields(["Man", "Turtle"]) == ["payload"]

    def test_error_keeps_pydantic_cause(self):
        with pytest.raises(InvalidCustomer) as excinfo:
            CustomerInputDTO.from_payload({})
        assert isinstance(excinfo.value.__cause__, ValidationError)


class TestFrozen:
    def test_is_immutable(self):
        dto = CustomerInputDTO.from_payload(_payload())
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"

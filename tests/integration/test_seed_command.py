"""Integration tests for the ``seed_customers`` management command."""

from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from modules.customers.management.commands.seed_customers import SEED_CUSTOMERS
from modules.customers.models import Customer

pytestmark = pytest.mark.integration

User = get_user_model()


def _seed(*args) -> str:
    out = StringIO()
    call_command("seed_customers", *args, stdout=out)
    return out.getvalue()


class TestSeedCustomers:
    def test_seeds_users_and_customers(self):
        output = _seed()

        assert Customer.objects.count() == len(SEED_CUSTOMERS)
        assert User.objects.filter(username="admin", is_superuser=True).exists()
        assert User.objects.filter(username="user", is_superuser=False).exists()
        assert f"users=2, customers={len(SEED_CUSTOMERS)}, skipped=0" in output

    def test_second_run_skips_existing(self):
        _seed()
        output = _seed()

        assert Customer.objects.count() == len(SEED_CUSTOMERS)
        assert f"users=0, customers=0, skipped={len(SEED_CUSTOMERS)}" in output

    def test_no_users_flag(self):
        output = _seed("--no-users")

        assert not User.objects.exists()
        assert "users=0" in output

    def test_seeded_customers_have_timestamps(self):
        _seed("--no-users")

        customer = Customer.objects.get(email="man@turtle.sea")
        assert customer.created_at == customer.modified_at

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer_payload():
    return {"first_name": "Man", "last_name": "Turtle", "email": "man@turtle.sea"}


@pytest.fixture()
def sample_customer():
    """A persisted Customer instance."""
    from modules.customers.models import Customer

    customer = Customer(first_name="Ada", last_name="Lovelace", email="ada@analytical.engine")
    customer.save()
    return customer

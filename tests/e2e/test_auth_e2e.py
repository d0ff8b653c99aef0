"""E2E tests for JWT token issuance and use with the seeded accounts."""

from __future__ import annotations

import pytest

pytestmark = [pytest.mark.e2e]


def test_seeded_user_obtains_token_pair(api_request_context, seeded_credentials):
    username, password = seeded_credentials

    response = api_request_context.post(
        "/api/auth/token/",
        data={"username": username, "password": password},
    )

    assert response.status == 200
    assert {"access", "refresh"} <= set(response.json())


def test_wrong_password_answers_in_envelope(api_request_context, seeded_credentials):
    username, _ = seeded_credentials

    response = api_request_context.post(
        "/api/auth/token/",
        data={"username": username, "password": "wrong-password"},
    )

    assert response.status == 401
    assert response.json()["success"] is False


def test_bearer_token_accepted_by_customer_api(api_request_context, bearer_headers):
    response = api_request_context.get("/api/customers/999999999", headers=bearer_headers)

    # Authenticated but absent: the lookup itself answers, not the auth layer.
    assert response.status == 404
    assert response.json() == {"success": False, "message": "Customer not found"}

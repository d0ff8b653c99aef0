"""E2E fixtures for Playwright.

The tests talk to a running server over HTTP:

    python src/manage.py runserver
    pytest -m e2e --base-url http://localhost:8000

Accounts come from the ``seed_customers`` command, run once per session
against the same database as the server.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Generator

import pytest
from playwright.sync_api import APIRequestContext, Playwright

MANAGE_PY = Path(__file__).resolve().parents[2] / "src" / "manage.py"

SEEDED_USER = ("user", "password")


@pytest.fixture(scope="session")
def base_url(request) -> str:
    return request.config.getoption("base_url") or "http://localhost:8000"


@pytest.fixture(autouse=True)
def _use_db() -> None:
    """Replace the root ``_use_db``: these tests never touch the test database."""


@pytest.fixture(scope="session")
def api_request_context(
    playwright: Playwright, base_url: str
) -> Generator[APIRequestContext, None, None]:
    context = playwright.request.new_context(base_url=base_url)
    yield context
    context.dispose()


@pytest.fixture(scope="session")
def seeded_credentials() -> tuple[str, str]:
    """Run ``seed_customers`` and return the regular user's credentials."""
    subprocess.run(
        [sys.executable, str(MANAGE_PY), "seed_customers"],
        check=True,
        capture_output=True,
        text=True,
    )
    return SEEDED_USER


@pytest.fixture()
def bearer_headers(api_request_context, seeded_credentials) -> dict[str, str]:
    username, password = seeded_credentials
    response = api_request_context.post(
        "/api/auth/token/",
        data={"username": username, "password": password},
    )
    assert response.status == 200
    return {"Authorization": f"Bearer {response.json()['access']}"}

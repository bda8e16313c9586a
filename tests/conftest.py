"""
Pytest configuration and fixtures for simplefin-cli tests.
"""

from pathlib import Path
from typing import Callable, List

import httpx
import pytest

from simplefin_cli.models import Account, Organization

FIXTURES = Path(__file__).parent / "fixtures"

# Minimal body from the aggregation endpoint, with capitalized keys
TEST_ORG_BODY = (
    b'{"Accounts": [{"Org": {"Name": "TestOrg"}, "Name": "TestAccount", '
    b'"Balance": "1000", "Currency": "USD"}]}'
)


@pytest.fixture(scope="session")
def sample_payload() -> bytes:
    """Realistic /accounts body with errors, extras and holdings."""
    return (FIXTURES / "accounts.json").read_bytes()


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Factory for accounts with an organization name and account name."""

    def _make(org: str, name: str, balance: str = "0.00", currency: str = "USD") -> Account:
        return Account(
            org=Organization(name=org),
            id=f"{org}-{name}",
            name=name,
            balance=balance,
            currency=currency,
        )

    return _make


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """
    Build an httpx transport answering every request with a fixed response.

    Requests are recorded on the returned transport's ``requests`` list.
    """

    def _make(status_code: int = 200, content: bytes = TEST_ORG_BODY) -> httpx.MockTransport:
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, content=content)

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _make

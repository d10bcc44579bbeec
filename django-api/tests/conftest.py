"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_account(db):
    from accounts.models import UserAccount

    def make(email: str, *roles: str, **fields):
        return UserAccount.objects.create(
            email=email,
            first_name=fields.pop("first_name", email.split("@")[0].title()),
            last_name=fields.pop("last_name", "Tester"),
            roles=list(roles or ["ATTENDEE"]),
            **fields,
        )

    return make


@pytest.fixture
def organizer(make_account):
    return make_account("olive@example.com", "ORGANIZER")


@pytest.fixture
def attendee(make_account):
    return make_account("ada@example.com", "ATTENDEE")


@pytest.fixture
def admin_account(make_account):
    return make_account("root@example.com", "ADMIN")


@pytest.fixture
def client_for():
    """Return an APIClient that sends the gateway user header for ``account``."""

    def make(account) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_X_USER_ID=str(account.id))
        return client

    return make

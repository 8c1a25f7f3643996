from __future__ import annotations

from datetime import datetime

import pytest

from fakes import JWT_SECRET, FakeStore

from src.laundry_zone.laundry_zone.auth.model import Principal
from src.laundry_zone.laundry_zone.auth.tokens import TokenIssuer
from src.laundry_zone.laundry_zone.core.enums import Role
from src.laundry_zone.laundry_zone.main import create_app

FIXED_NOW = datetime(2026, 3, 15, 10, 30)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store(fixed_now) -> FakeStore:
    return FakeStore(clock=lambda: fixed_now)


@pytest.fixture
def app(store):
    app = create_app(
        settings_override={"SECRET_KEY": "test-secret", "API_PREFIX": "/api", "LOG_LEVEL": "WARNING"},
        container=store.container,
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _bearer(user) -> dict:
    token = TokenIssuer(JWT_SECRET).issue(Principal(id=user.id, username=user.username, role=user.role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(store):
    return store.users.add(username="admin", password="admin123", role=Role.ADMIN, name="Admin")


@pytest.fixture
def customer(store):
    return store.users.add(username="pelanggan", password="123456", name="Budi", phone="081299990000")


@pytest.fixture
def admin_headers(store, admin) -> dict:
    return _bearer(admin)


@pytest.fixture
def customer_headers(store, customer) -> dict:
    return _bearer(customer)

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["VISITOR_TRACKING_ENABLED"] = "true"

from src.api.deps import get_current_principal, get_optional_principal
from src.main import app
from src.rbac.roles import UserRole
from src.schemas.access import Principal


@pytest.fixture(scope="function")
def client():
    """Create a test client, running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(client):
    """Return a helper that authenticates the test client as a given role.

    Stands in for the upstream authentication layer by overriding the
    principal dependencies, the same way the database session is overridden
    elsewhere.
    """

    def _login(role: UserRole | str, user_id: str = "user-1") -> TestClient:
        principal = Principal(id=user_id, role=role)
        app.dependency_overrides[get_current_principal] = lambda: principal
        app.dependency_overrides[get_optional_principal] = lambda: principal
        return client

    return _login


@pytest.fixture
def admin_client(login_as) -> TestClient:
    """Create a client authenticated as an admin."""
    return login_as(UserRole.ADMIN, user_id="admin-1")


@pytest.fixture
def client_role_client(login_as) -> TestClient:
    """Create a client authenticated as a portal customer."""
    return login_as(UserRole.CLIENT, user_id="client-1")

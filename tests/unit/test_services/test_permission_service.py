# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission_service."""

import asyncio
import itertools

import pytest

from src.main import app, lifespan
from src.rbac.permissions import Capability
from src.rbac.roles import ROLE_PERMISSIONS, UserRole
from src.rbac.routes import DEFAULT_ROUTES, ROUTE_PERMISSIONS
from src.services import permission_service
from src.services.permission_service import (
    ConfigurationError,
    UnknownCapabilityError,
    UnknownRoleError,
)

ALL_ROLES = list(UserRole)


class TestHasPermission:
    """Tests for has_permission."""

    def test_total_over_catalog(self):
        """Test that every role/capability pair yields a boolean."""
        for role, capability in itertools.product(UserRole, Capability):
            assert isinstance(permission_service.has_permission(role, capability), bool)

    def test_client_projects(self):
        assert permission_service.has_permission("client", "viewAllProjects") is False
        assert permission_service.has_permission("client", "viewOwnProjects") is True

    def test_manage_system(self):
        assert permission_service.has_permission("admin", "manageSystem") is True
        assert permission_service.has_permission("manager", "manageSystem") is False

    def test_accepts_enum_members(self):
        assert permission_service.has_permission(
            UserRole.SALES, Capability.MANAGE_LEADS
        ) is True

    def test_unknown_role_raises(self):
        """Test that an unknown role fails loudly instead of defaulting."""
        with pytest.raises(UnknownRoleError):
            permission_service.has_permission("superuser", "viewLeads")

    def test_unknown_capability_raises(self):
        """Test that an unknown capability fails loudly instead of defaulting."""
        with pytest.raises(UnknownCapabilityError):
            permission_service.has_permission("admin", "launchRockets")

    def test_lookup_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            permission_service.has_permission(None, "viewLeads")


class TestProfiles:
    """Tests for get_profile and get_granted_capabilities."""

    def test_profile_is_read_only(self):
        profile = permission_service.get_profile(UserRole.CLIENT)
        with pytest.raises(TypeError):
            profile[Capability.MANAGE_SYSTEM] = True
        assert ROLE_PERMISSIONS[UserRole.CLIENT][Capability.MANAGE_SYSTEM] is False

    def test_missing_profile_is_configuration_error(self, monkeypatch):
        monkeypatch.delitem(ROLE_PERMISSIONS, UserRole.SALES)
        with pytest.raises(ConfigurationError):
            permission_service.get_profile(UserRole.SALES)

    def test_granted_capabilities(self):
        granted = permission_service.get_granted_capabilities("employee")
        assert Capability.VIEW_OWN_TASKS in granted
        assert Capability.VIEW_ALL_TASKS not in granted


class TestCanAccessRoute:
    """Tests for can_access_route."""

    @pytest.mark.parametrize("role", [*ALL_ROLES, None])
    @pytest.mark.parametrize("path", ["/", "/home"])
    def test_public_routes(self, role, path):
        """Test that public routes are open to everyone, anonymous included."""
        assert permission_service.can_access_route(role, path) is True

    @pytest.mark.parametrize("role", ALL_ROLES)
    @pytest.mark.parametrize(
        "path",
        [
            "/nowhere",
            "/portal",
            "/portal/",
            "/portal/admin/",
            "/PORTAL/ADMIN",
            "",
            "/admin/users",
        ],
    )
    def test_unknown_routes_denied(self, role, path):
        """Test that unmapped paths are denied, admin included."""
        assert permission_service.can_access_route(role, path) is False

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_dashboard_open_to_authenticated(self, role):
        assert permission_service.can_access_route(role, "/dashboard") is True

    def test_anonymous_only_reaches_public_routes(self):
        assert permission_service.can_access_route(None, "/dashboard") is False
        assert permission_service.can_access_route(None, "/portal/client") is False

    def test_sales_portal(self):
        assert permission_service.can_access_route("sales", "/portal/sales") is True
        assert permission_service.can_access_route("client", "/portal/sales") is False

    def test_admin_portal_reserved_for_admin(self):
        allowed = {
            role
            for role in UserRole
            if permission_service.can_access_route(role, "/portal/admin")
        }
        assert allowed == {UserRole.ADMIN}

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_routes_follow_required_capability(self, role):
        """Test that every protected route delegates to has_permission."""
        for path, capability in ROUTE_PERMISSIONS.items():
            assert permission_service.can_access_route(
                role, path
            ) is permission_service.has_permission(role, capability)

    def test_legacy_routes(self):
        assert permission_service.can_access_route("client", "/requests") is True
        assert permission_service.can_access_route("employee", "/service-requests") is False
        assert permission_service.can_access_route("employee", "/tasks") is True
        assert permission_service.can_access_route("sales", "/analytics") is True
        assert permission_service.can_access_route("project_manager", "/analytics") is False
        assert permission_service.can_access_route("manager", "/employees") is True
        assert permission_service.can_access_route("manager", "/settings") is False

    @pytest.mark.parametrize("path", ["/", "/dashboard", "/nowhere"])
    def test_invalid_role_raises(self, path):
        """Test that a bad role is reported even where access would be granted."""
        with pytest.raises(UnknownRoleError):
            permission_service.can_access_route("guest", path)


class TestDefaultRoute:
    """Tests for get_default_route."""

    @pytest.mark.parametrize(
        ("role", "expected"),
        [
            ("client", "/portal/client"),
            ("employee", "/portal/employee"),
            ("sales", "/portal/sales"),
            ("project_manager", "/portal/project-manager"),
            ("manager", "/portal/manager"),
            ("admin", "/portal/admin"),
        ],
    )
    def test_role_specific_landing_page(self, role, expected):
        assert permission_service.get_default_route(role) == expected

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_default_route_is_accessible(self, role):
        """Test that no role is redirected to a page it cannot open."""
        route = permission_service.get_default_route(role)
        assert permission_service.can_access_route(role, route) is True

    def test_anonymous_lands_on_home(self):
        assert permission_service.get_default_route(None) == "/"

    def test_invalid_role_raises(self):
        with pytest.raises(UnknownRoleError):
            permission_service.get_default_route("guest")


class TestHasMinimumRole:
    """Tests for has_minimum_role."""

    def test_examples(self):
        assert permission_service.has_minimum_role("manager", "employee") is True
        assert permission_service.has_minimum_role("employee", "manager") is False
        assert permission_service.has_minimum_role("sales", "employee") is True

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_reflexive(self, role):
        assert permission_service.has_minimum_role(role, role) is True

    def test_transitive(self):
        """Test that rank comparison is transitive over every role triple."""
        for a, b, c in itertools.product(UserRole, repeat=3):
            if permission_service.has_minimum_role(
                a, b
            ) and permission_service.has_minimum_role(b, c):
                assert permission_service.has_minimum_role(a, c)

    def test_admin_outranks_everyone(self):
        for role in UserRole:
            assert permission_service.has_minimum_role("admin", role)

    def test_unknown_role_raises(self):
        with pytest.raises(UnknownRoleError):
            permission_service.has_minimum_role("admin", "root")


class TestValidateCatalog:
    """Tests for validate_catalog."""

    def test_shipped_catalog_is_valid(self):
        permission_service.validate_catalog()

    def test_missing_role_row(self, monkeypatch):
        monkeypatch.delitem(ROLE_PERMISSIONS, UserRole.PROJECT_MANAGER)
        with pytest.raises(ConfigurationError, match="project_manager"):
            permission_service.validate_catalog()

    def test_partial_profile(self, monkeypatch):
        monkeypatch.delitem(ROLE_PERMISSIONS[UserRole.SALES], Capability.VIEW_LEADS)
        with pytest.raises(ConfigurationError, match="viewLeads"):
            permission_service.validate_catalog()

    def test_unknown_route_capability(self, monkeypatch):
        monkeypatch.setitem(ROUTE_PERMISSIONS, "/inventory", "viewStock")
        with pytest.raises(ConfigurationError, match="/inventory"):
            permission_service.validate_catalog()

    def test_unreachable_default_route(self, monkeypatch):
        monkeypatch.setitem(DEFAULT_ROUTES, UserRole.CLIENT, "/portal/admin")
        with pytest.raises(ConfigurationError, match="default route"):
            permission_service.validate_catalog()

    def test_lifespan_refuses_broken_catalog(self, monkeypatch):
        """Test that the application does not start with a broken catalog."""
        monkeypatch.delitem(ROLE_PERMISSIONS, UserRole.ADMIN)

        async def start():
            async with lifespan(app):
                pass

        with pytest.raises(ConfigurationError):
            asyncio.run(start())


class TestAccessibleScopes:
    """Tests for the data scope helpers."""

    def test_requests_scope(self):
        assert permission_service.get_accessible_requests("u1", "client") == {
            "client_id": "u1"
        }
        assert permission_service.get_accessible_requests("u1", "employee") == {
            "assigned_to": "u1"
        }
        assert permission_service.get_accessible_requests("u1", "manager") == {}
        assert permission_service.get_accessible_requests("u1", "admin") == {}

    def test_requests_scope_without_view_all(self):
        """Test that roles lacking viewAllRequests only see assigned requests."""
        for role in (UserRole.SALES, UserRole.PROJECT_MANAGER):
            assert permission_service.get_accessible_requests("u1", role) == {
                "assigned_to": "u1"
            }

    def test_projects_scope(self):
        assert permission_service.get_accessible_projects("u1", "client") == {
            "client_id": "u1"
        }
        assert permission_service.get_accessible_projects("u1", "employee") == {
            "assigned_technician_id": "u1"
        }
        for role in ("sales", "project_manager", "manager", "admin"):
            assert permission_service.get_accessible_projects("u1", role) == {}

    def test_scope_rejects_unknown_role(self):
        with pytest.raises(UnknownRoleError):
            permission_service.get_accessible_projects("u1", "visitor")


def test_filter_by_role_drops_rejected_items():
    items = [
        {"id": 1, "amount": 100},
        {"id": 2, "amount": 250},
        {"id": 3, "amount": 50},
    ]

    def hide_amounts(item, role):
        if permission_service.has_permission(role, Capability.VIEW_FINANCIAL):
            return item
        if item["amount"] > 200:
            return None
        return {"id": item["id"]}

    assert permission_service.filter_by_role(items, "admin", hide_amounts) == items
    assert permission_service.filter_by_role(items, "sales", hide_amounts) == [
        {"id": 1},
        {"id": 3},
    ]


def test_filter_by_role_empty():
    assert permission_service.filter_by_role([], "client", lambda item, role: item) == []

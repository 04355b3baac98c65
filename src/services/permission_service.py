# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission evaluation against the static role catalog.

All functions are pure lookups over module-level tables that never change
after import, so they are safe to call from any number of threads.

``has_minimum_role`` is a coarse seniority check. Ranks tie across roles
with different grants, so whenever a specific capability is what an action
needs, call ``has_permission`` instead.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from src.rbac.permissions import Capability
from src.rbac.roles import ROLE_HIERARCHY, ROLE_PERMISSIONS, UserRole
from src.rbac.routes import (
    ANONYMOUS_ROUTE,
    AUTHENTICATED_ROUTES,
    DEFAULT_ROUTES,
    PUBLIC_ROUTES,
    ROUTE_PERMISSIONS,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PermissionServiceError(Exception):
    """Base exception for permission service errors."""


class ConfigurationError(PermissionServiceError):
    """The role catalog is incomplete or inconsistent."""


class UnknownRoleError(PermissionServiceError, ValueError):
    """A value that is not a known role was supplied."""


class UnknownCapabilityError(PermissionServiceError, ValueError):
    """A value that is not a known capability was supplied."""


def parse_role(role: UserRole | str) -> UserRole:
    """Coerce a role value, rejecting anything outside the role enum."""
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError as e:
        raise UnknownRoleError(f"Unknown role: {role!r}") from e


def parse_capability(capability: Capability | str) -> Capability:
    """Coerce a capability value, rejecting anything outside the catalog."""
    if isinstance(capability, Capability):
        return capability
    try:
        return Capability(capability)
    except ValueError as e:
        raise UnknownCapabilityError(f"Unknown capability: {capability!r}") from e


def get_profile(role: UserRole | str) -> Mapping[Capability, bool]:
    """Return the read-only permission profile of a role."""
    role = parse_role(role)
    try:
        return MappingProxyType(ROLE_PERMISSIONS[role])
    except KeyError as e:
        raise ConfigurationError(f"No permission profile for role {role.value}") from e


def get_granted_capabilities(role: UserRole | str) -> set[Capability]:
    """Return the capabilities a role holds."""
    return {cap for cap, granted in get_profile(role).items() if granted}


def has_permission(role: UserRole | str, capability: Capability | str) -> bool:
    """Check whether a role holds a capability."""
    capability = parse_capability(capability)
    profile = get_profile(role)
    try:
        return profile[capability]
    except KeyError as e:
        raise ConfigurationError(
            f"Profile of role {parse_role(role).value} lacks {capability.value}"
        ) from e


def can_access_route(role: UserRole | str | None, route: str) -> bool:
    """Check whether a role may open a front-end route.

    ``role`` is None for callers without a session; they only reach public
    routes. Routes not listed in the policy are denied for every role.
    """
    if role is not None:
        role = parse_role(role)

    if route in PUBLIC_ROUTES:
        return True
    if role is None:
        return False
    if route in AUTHENTICATED_ROUTES:
        return True

    required = ROUTE_PERMISSIONS.get(route)
    if required is None:
        return False
    return has_permission(role, required)


def get_default_route(role: UserRole | str | None) -> str:
    """Return the landing page for a role right after login."""
    if role is None:
        return ANONYMOUS_ROUTE
    role = parse_role(role)
    try:
        return DEFAULT_ROUTES[role]
    except KeyError as e:
        raise ConfigurationError(f"No default route for role {role.value}") from e


def get_role_rank(role: UserRole | str) -> int:
    """Return the seniority rank of a role."""
    role = parse_role(role)
    try:
        return ROLE_HIERARCHY[role]
    except KeyError as e:
        raise ConfigurationError(f"No rank for role {role.value}") from e


def has_minimum_role(role: UserRole | str, required_role: UserRole | str) -> bool:
    """Check whether a role ranks at least as high as another."""
    return get_role_rank(role) >= get_role_rank(required_role)


def validate_catalog() -> None:
    """Verify the role catalog is complete and consistent.

    Run once at startup, before any request is served.

    Raises:
        ConfigurationError: If any role, capability, rank, route requirement
            or default route is missing or inconsistent.
    """
    all_capabilities = set(Capability)
    problems: list[str] = []

    for role in UserRole:
        row = ROLE_PERMISSIONS.get(role)
        if row is None:
            problems.append(f"role {role.value} has no permission profile")
            continue
        missing = all_capabilities - row.keys()
        if missing:
            names = ", ".join(sorted(c.value for c in missing))
            problems.append(f"role {role.value} is missing {names}")
        extra = set(row.keys()) - all_capabilities
        if extra:
            problems.append(f"role {role.value} has unknown capabilities {extra}")
        if not all(isinstance(value, bool) for value in row.values()):
            problems.append(f"role {role.value} has non-boolean grants")
        if role not in ROLE_HIERARCHY:
            problems.append(f"role {role.value} has no rank")
        if role not in DEFAULT_ROUTES:
            problems.append(f"role {role.value} has no default route")

    for route, capability in ROUTE_PERMISSIONS.items():
        if not isinstance(capability, Capability):
            problems.append(f"route {route} requires unknown capability {capability!r}")

    if problems:
        raise ConfigurationError("; ".join(problems))

    for role, route in DEFAULT_ROUTES.items():
        if not can_access_route(role, route):
            problems.append(f"role {role.value} cannot open its default route {route}")

    if problems:
        raise ConfigurationError("; ".join(problems))

    logger.info(
        f"Permission catalog validated: {len(UserRole)} roles, "
        f"{len(all_capabilities)} capabilities, {len(ROUTE_PERMISSIONS)} routes"
    )


def get_accessible_requests(user_id: str, role: UserRole | str) -> dict[str, str]:
    """Return the service request filter for a user.

    An empty dict means no restriction.
    """
    role = parse_role(role)
    if has_permission(role, Capability.VIEW_ALL_REQUESTS):
        return {}
    if role == UserRole.CLIENT:
        return {"client_id": user_id}
    return {"assigned_to": user_id}


def get_accessible_projects(user_id: str, role: UserRole | str) -> dict[str, str]:
    """Return the project filter for a user.

    An empty dict means no restriction.
    """
    role = parse_role(role)
    if has_permission(role, Capability.VIEW_ALL_PROJECTS):
        return {}
    if role == UserRole.CLIENT:
        return {"client_id": user_id}
    return {"assigned_technician_id": user_id}


def filter_by_role(
    items: Iterable[T],
    role: UserRole | str,
    filter_fn: Callable[[T, UserRole], Any | None],
) -> list[Any]:
    """Map items through filter_fn and drop the ones it rejects with None."""
    role = parse_role(role)
    result = []
    for item in items:
        filtered = filter_fn(item, role)
        if filtered is not None:
            result.append(filtered)
    return result

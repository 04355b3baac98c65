# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Front-end route access policy.

Paths are matched literally. A path missing from every table below is
denied for every role.
"""

from .permissions import Capability
from .roles import UserRole

# Reachable without a session
PUBLIC_ROUTES = frozenset({"/", "/home"})

# Reachable by any authenticated role
AUTHENTICATED_ROUTES = frozenset({"/dashboard"})

ROUTE_PERMISSIONS: dict[str, Capability] = {
    # Role portals
    "/portal/client": Capability.CREATE_REQUESTS,
    "/portal/employee": Capability.VIEW_OWN_TASKS,
    "/portal/sales": Capability.VIEW_LEADS,
    "/portal/project-manager": Capability.MANAGE_INVENTORY,
    "/portal/manager": Capability.VIEW_USERS,
    "/portal/admin": Capability.MANAGE_SYSTEM,
    # Legacy pages
    "/requests": Capability.VIEW_OWN_REQUESTS,
    "/service-requests": Capability.VIEW_OWN_REQUESTS,
    "/projects": Capability.VIEW_OWN_PROJECTS,
    "/tasks": Capability.VIEW_OWN_TASKS,
    "/reports": Capability.VIEW_OWN_REPORTS,
    "/analytics": Capability.VIEW_VISITORS,
    "/users": Capability.VIEW_USERS,
    "/employees": Capability.VIEW_USERS,
    "/settings": Capability.MANAGE_SYSTEM,
    "/admin": Capability.MANAGE_SYSTEM,
}

DEFAULT_ROUTES: dict[UserRole, str] = {
    UserRole.CLIENT: "/portal/client",
    UserRole.EMPLOYEE: "/portal/employee",
    UserRole.SALES: "/portal/sales",
    UserRole.PROJECT_MANAGER: "/portal/project-manager",
    UserRole.MANAGER: "/portal/manager",
    UserRole.ADMIN: "/portal/admin",
}

# Landing page when no role is known
ANONYMOUS_ROUTE = "/"

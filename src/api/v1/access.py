# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control API endpoints used by the portal front end."""

from fastapi import APIRouter, Depends, Query

from src.api.deps import (
    get_current_principal,
    get_optional_principal,
    require_permission,
)
from src.rbac.permissions import CORE_PERMISSIONS, Capability
from src.rbac.roles import UserRole
from src.schemas.access import (
    CapabilitySchema,
    Principal,
    PrincipalAccessResponse,
    RoleProfileResponse,
    RouteAccessResponse,
)
from src.services import permission_service

router = APIRouter()


@router.get(
    "/me",
    response_model=PrincipalAccessResponse,
    summary="Get the current principal's access",
)
def get_my_access(
    principal: Principal = Depends(get_current_principal),
) -> PrincipalAccessResponse:
    """Return the role, rank, landing page and granted capabilities of the caller."""
    granted = permission_service.get_granted_capabilities(principal.role)
    return PrincipalAccessResponse(
        id=principal.id,
        role=principal.role,
        rank=permission_service.get_role_rank(principal.role),
        default_route=permission_service.get_default_route(principal.role),
        permissions=[cap for cap in Capability if cap in granted],
    )


@router.get(
    "/routes",
    response_model=RouteAccessResponse,
    summary="Check access to a front-end route",
)
def check_route(
    path: str = Query(..., min_length=1),
    principal: Principal | None = Depends(get_optional_principal),
) -> RouteAccessResponse:
    """Check whether the caller may open a front-end route.

    Anonymous callers are allowed here and only reach public routes.
    """
    role = principal.role if principal else None
    return RouteAccessResponse(
        path=path, allowed=permission_service.can_access_route(role, path)
    )


@router.get(
    "/roles",
    response_model=list[RoleProfileResponse],
    summary="List every role with its permission profile",
)
def list_role_profiles(
    principal: Principal = Depends(require_permission(Capability.VIEW_USERS)),
) -> list[RoleProfileResponse]:
    """Requires viewUsers permission."""
    return [
        RoleProfileResponse(
            role=role,
            rank=permission_service.get_role_rank(role),
            default_route=permission_service.get_default_route(role),
            permissions=dict(permission_service.get_profile(role)),
        )
        for role in UserRole
    ]


@router.get(
    "/permissions",
    response_model=list[CapabilitySchema],
    summary="List all capabilities",
)
def list_capabilities(
    principal: Principal = Depends(require_permission(Capability.VIEW_USERS)),
) -> list[CapabilitySchema]:
    """Requires viewUsers permission."""
    return [CapabilitySchema(**entry) for entry in CORE_PERMISSIONS]

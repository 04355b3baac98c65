# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for authorization."""

import logging
from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from src.rbac.permissions import Capability
from src.rbac.roles import UserRole
from src.schemas.access import Principal
from src.services import permission_service

logger = logging.getLogger(__name__)


def _principal_from_state(request: Request) -> Principal | None:
    """Read the principal the authentication layer attached to the request."""
    raw = getattr(request.state, "principal", None)
    if raw is None:
        return None
    if isinstance(raw, Principal):
        return raw
    try:
        return Principal.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Rejected malformed principal: {e.errors()}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid principal",
        ) from e


def get_optional_principal(request: Request) -> Principal | None:
    """Get the current principal if authenticated, otherwise return None."""
    return _principal_from_state(request)


def get_current_principal(request: Request) -> Principal:
    """Get the current authenticated principal."""
    principal = _principal_from_state(request)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return principal


def require_permission(capability: Capability | str) -> Callable[..., Principal]:
    """Dependency for capability-based authorization."""
    capability = permission_service.parse_capability(capability)

    def dependency(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if not permission_service.has_permission(principal.role, capability):
            logger.debug(
                f"Denied {capability.value} to {principal.id} ({principal.role.value})"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required permission: {capability.value}",
            )
        return principal

    return dependency


def require_role(minimum_role: UserRole | str) -> Callable[..., Principal]:
    """Dependency for coarse role-rank authorization.

    Prefer require_permission whenever a specific capability is what the
    endpoint needs: roles of equal rank hold different capabilities.
    """
    minimum_role = permission_service.parse_role(minimum_role)

    def dependency(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if not permission_service.has_minimum_role(principal.role, minimum_role):
            logger.debug(f"Denied role {minimum_role.value} to {principal.id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {minimum_role.value} or higher",
            )
        return principal

    return dependency


def require_ownership(
    get_resource_user_id: Callable[[Request], str | None],
) -> Callable[..., Principal]:
    """Dependency restricting access to the owner of a resource.

    Admins and principals allowed to view users bypass the ownership check.
    """

    def dependency(
        request: Request,
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if principal.role == UserRole.ADMIN:
            return principal
        if permission_service.has_permission(principal.role, Capability.VIEW_USERS):
            return principal

        resource_user_id = get_resource_user_id(request)
        if not resource_user_id:
            logger.debug(f"Denied {principal.id}: resource owner not found")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Resource owner not found",
            )
        if resource_user_id != principal.id:
            logger.debug(
                f"Denied {principal.id} access to data owned by {resource_user_id}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied. You can only access your own data",
            )
        return principal

    return dependency

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access control schemas."""

from pydantic import BaseModel, ConfigDict

from src.rbac.permissions import Capability
from src.rbac.roles import UserRole


class Principal(BaseModel):
    """An authenticated caller as resolved by the authentication layer."""

    model_config = ConfigDict(frozen=True)

    id: str
    role: UserRole


class PrincipalAccessResponse(BaseModel):
    """What the current principal may do."""

    id: str
    role: UserRole
    rank: int
    default_route: str
    permissions: list[Capability]


class RouteAccessResponse(BaseModel):
    """Whether the caller may open a front-end route."""

    path: str
    allowed: bool


class RoleProfileResponse(BaseModel):
    """Full permission profile of a role."""

    role: UserRole
    rank: int
    default_route: str
    permissions: dict[Capability, bool]


class CapabilitySchema(BaseModel):
    """Catalog entry for a capability."""

    code: Capability
    module: str
    description: str

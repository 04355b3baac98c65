"""Pydantic schemas package."""
from src.schemas.access import (
    CapabilitySchema,
    Principal,
    PrincipalAccessResponse,
    RoleProfileResponse,
    RouteAccessResponse,
)
from src.schemas.common import (
    HealthResponse,
)

__all__ = [
    # Access
    "CapabilitySchema",
    "Principal",
    "PrincipalAccessResponse",
    "RoleProfileResponse",
    "RouteAccessResponse",
    # Common
    "HealthResponse",
]

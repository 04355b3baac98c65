"""Services package."""
from src.services import permission_service, visitor_service

__all__ = [
    "permission_service",
    "visitor_service",
]

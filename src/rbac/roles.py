# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Portal roles, their permission profiles and seniority ranks.

Every row of ROLE_PERMISSIONS is authored on its own and lists every
capability explicitly. Rows must never be derived from ROLE_HIERARCHY or
from another role's row: ranks and grants are not correlated (sales and
project_manager sit in neighbouring tiers with mostly different grants).
"""

from enum import Enum

from .permissions import Capability


class UserRole(str, Enum):
    """Role assigned to an authenticated principal."""

    CLIENT = "client"
    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"
    SALES = "sales"
    PROJECT_MANAGER = "project_manager"


ROLE_PERMISSIONS: dict[UserRole, dict[Capability, bool]] = {
    UserRole.CLIENT: {
        Capability.VIEW_OWN_REQUESTS: True,
        Capability.VIEW_ALL_REQUESTS: False,
        Capability.CREATE_REQUESTS: True,
        Capability.EDIT_OWN_REQUESTS: True,
        Capability.EDIT_ALL_REQUESTS: False,
        Capability.DELETE_REQUESTS: False,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: False,
        Capability.MANAGE_OWN_PROJECTS: False,
        Capability.MANAGE_ALL_PROJECTS: False,
        Capability.ASSIGN_PROJECTS: False,
        Capability.VIEW_OWN_TASKS: False,
        Capability.VIEW_ALL_TASKS: False,
        Capability.MANAGE_OWN_TASKS: False,
        Capability.MANAGE_ALL_TASKS: False,
        Capability.VIEW_OWN_REPORTS: False,
        Capability.VIEW_ALL_REPORTS: False,
        Capability.MANAGE_OWN_REPORTS: False,
        Capability.MANAGE_ALL_REPORTS: False,
        Capability.APPROVE_REPORTS: False,
        Capability.VIEW_INVENTORY: False,
        Capability.MANAGE_INVENTORY: False,
        Capability.VIEW_SUPPLIERS: False,
        Capability.MANAGE_SUPPLIERS: False,
        Capability.VIEW_OWN_MESSAGES: True,
        Capability.VIEW_ALL_MESSAGES: False,
        Capability.MANAGE_MESSAGES: False,
        Capability.VIEW_CLIENTS: False,
        Capability.MANAGE_CLIENTS: False,
        Capability.VIEW_LEADS: False,
        Capability.MANAGE_LEADS: False,
        Capability.VIEW_VISITORS: False,
        Capability.VIEW_FINANCIAL: False,
        Capability.MANAGE_FINANCIAL: False,
        Capability.VIEW_USERS: False,
        Capability.MANAGE_USERS: False,
        Capability.VIEW_USER_DETAILS: False,
        Capability.MANAGE_SYSTEM: False,
        Capability.VIEW_SYSTEM_REPORTS: False,
        Capability.MANAGE_SETTINGS: False,
        Capability.VIEW_ACTIVITIES: False,
    },
    UserRole.EMPLOYEE: {
        Capability.VIEW_OWN_REQUESTS: False,
        Capability.VIEW_ALL_REQUESTS: False,
        Capability.CREATE_REQUESTS: False,
        Capability.EDIT_OWN_REQUESTS: False,
        Capability.EDIT_ALL_REQUESTS: False,
        Capability.DELETE_REQUESTS: False,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: False,
        Capability.MANAGE_OWN_PROJECTS: True,
        Capability.MANAGE_ALL_PROJECTS: False,
        Capability.ASSIGN_PROJECTS: False,
        Capability.VIEW_OWN_TASKS: True,
        Capability.VIEW_ALL_TASKS: False,
        Capability.MANAGE_OWN_TASKS: True,
        Capability.MANAGE_ALL_TASKS: False,
        Capability.VIEW_OWN_REPORTS: True,
        Capability.VIEW_ALL_REPORTS: False,
        Capability.MANAGE_OWN_REPORTS: True,
        Capability.MANAGE_ALL_REPORTS: False,
        Capability.APPROVE_REPORTS: False,
        Capability.VIEW_INVENTORY: False,
        Capability.MANAGE_INVENTORY: False,
        Capability.VIEW_SUPPLIERS: False,
        Capability.MANAGE_SUPPLIERS: False,
        Capability.VIEW_OWN_MESSAGES: False,
        Capability.VIEW_ALL_MESSAGES: False,
        Capability.MANAGE_MESSAGES: False,
        Capability.VIEW_CLIENTS: False,
        Capability.MANAGE_CLIENTS: False,
        Capability.VIEW_LEADS: False,
        Capability.MANAGE_LEADS: False,
        Capability.VIEW_VISITORS: False,
        Capability.VIEW_FINANCIAL: False,
        Capability.MANAGE_FINANCIAL: False,
        Capability.VIEW_USERS: False,
        Capability.MANAGE_USERS: False,
        Capability.VIEW_USER_DETAILS: False,
        Capability.MANAGE_SYSTEM: False,
        Capability.VIEW_SYSTEM_REPORTS: False,
        Capability.MANAGE_SETTINGS: False,
        Capability.VIEW_ACTIVITIES: False,
    },
    UserRole.SALES: {
        Capability.VIEW_OWN_REQUESTS: False,
        Capability.VIEW_ALL_REQUESTS: False,
        Capability.CREATE_REQUESTS: False,
        Capability.EDIT_OWN_REQUESTS: False,
        Capability.EDIT_ALL_REQUESTS: False,
        Capability.DELETE_REQUESTS: False,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: True,
        Capability.MANAGE_OWN_PROJECTS: True,
        Capability.MANAGE_ALL_PROJECTS: True,
        Capability.ASSIGN_PROJECTS: True,
        Capability.VIEW_OWN_TASKS: True,
        Capability.VIEW_ALL_TASKS: True,
        Capability.MANAGE_OWN_TASKS: True,
        Capability.MANAGE_ALL_TASKS: True,
        Capability.VIEW_OWN_REPORTS: True,
        Capability.VIEW_ALL_REPORTS: True,
        Capability.MANAGE_OWN_REPORTS: True,
        Capability.MANAGE_ALL_REPORTS: True,
        Capability.APPROVE_REPORTS: False,
        Capability.VIEW_INVENTORY: False,
        Capability.MANAGE_INVENTORY: False,
        Capability.VIEW_SUPPLIERS: True,
        Capability.MANAGE_SUPPLIERS: True,
        Capability.VIEW_OWN_MESSAGES: True,
        Capability.VIEW_ALL_MESSAGES: True,
        Capability.MANAGE_MESSAGES: True,
        Capability.VIEW_CLIENTS: True,
        Capability.MANAGE_CLIENTS: True,
        Capability.VIEW_LEADS: True,
        Capability.MANAGE_LEADS: True,
        Capability.VIEW_VISITORS: True,
        Capability.VIEW_FINANCIAL: False,
        Capability.MANAGE_FINANCIAL: False,
        Capability.VIEW_USERS: False,
        Capability.MANAGE_USERS: False,
        Capability.VIEW_USER_DETAILS: False,
        Capability.MANAGE_SYSTEM: False,
        Capability.VIEW_SYSTEM_REPORTS: False,
        Capability.MANAGE_SETTINGS: False,
        Capability.VIEW_ACTIVITIES: False,
    },
    UserRole.PROJECT_MANAGER: {
        Capability.VIEW_OWN_REQUESTS: False,
        Capability.VIEW_ALL_REQUESTS: False,
        Capability.CREATE_REQUESTS: False,
        Capability.EDIT_OWN_REQUESTS: False,
        Capability.EDIT_ALL_REQUESTS: False,
        Capability.DELETE_REQUESTS: False,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: True,
        Capability.MANAGE_OWN_PROJECTS: True,
        Capability.MANAGE_ALL_PROJECTS: True,
        Capability.ASSIGN_PROJECTS: True,
        Capability.VIEW_OWN_TASKS: True,
        Capability.VIEW_ALL_TASKS: True,
        Capability.MANAGE_OWN_TASKS: True,
        Capability.MANAGE_ALL_TASKS: True,
        Capability.VIEW_OWN_REPORTS: True,
        Capability.VIEW_ALL_REPORTS: True,
        Capability.MANAGE_OWN_REPORTS: True,
        Capability.MANAGE_ALL_REPORTS: True,
        Capability.APPROVE_REPORTS: True,
        Capability.VIEW_INVENTORY: True,
        Capability.MANAGE_INVENTORY: True,
        Capability.VIEW_SUPPLIERS: True,
        Capability.MANAGE_SUPPLIERS: True,
        Capability.VIEW_OWN_MESSAGES: False,
        Capability.VIEW_ALL_MESSAGES: False,
        Capability.MANAGE_MESSAGES: False,
        Capability.VIEW_CLIENTS: True,
        Capability.MANAGE_CLIENTS: True,
        Capability.VIEW_LEADS: False,
        Capability.MANAGE_LEADS: False,
        Capability.VIEW_VISITORS: False,
        Capability.VIEW_FINANCIAL: False,
        Capability.MANAGE_FINANCIAL: False,
        Capability.VIEW_USERS: False,
        Capability.MANAGE_USERS: False,
        Capability.VIEW_USER_DETAILS: False,
        Capability.MANAGE_SYSTEM: False,
        Capability.VIEW_SYSTEM_REPORTS: False,
        Capability.MANAGE_SETTINGS: False,
        Capability.VIEW_ACTIVITIES: False,
    },
    UserRole.MANAGER: {
        Capability.VIEW_OWN_REQUESTS: True,
        Capability.VIEW_ALL_REQUESTS: True,
        Capability.CREATE_REQUESTS: True,
        Capability.EDIT_OWN_REQUESTS: True,
        Capability.EDIT_ALL_REQUESTS: True,
        Capability.DELETE_REQUESTS: True,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: True,
        Capability.MANAGE_OWN_PROJECTS: True,
        Capability.MANAGE_ALL_PROJECTS: True,
        Capability.ASSIGN_PROJECTS: True,
        Capability.VIEW_OWN_TASKS: True,
        Capability.VIEW_ALL_TASKS: True,
        Capability.MANAGE_OWN_TASKS: True,
        Capability.MANAGE_ALL_TASKS: True,
        Capability.VIEW_OWN_REPORTS: True,
        Capability.VIEW_ALL_REPORTS: True,
        Capability.MANAGE_OWN_REPORTS: True,
        Capability.MANAGE_ALL_REPORTS: True,
        Capability.APPROVE_REPORTS: True,
        Capability.VIEW_INVENTORY: True,
        Capability.MANAGE_INVENTORY: True,
        Capability.VIEW_SUPPLIERS: True,
        Capability.MANAGE_SUPPLIERS: True,
        Capability.VIEW_OWN_MESSAGES: True,
        Capability.VIEW_ALL_MESSAGES: True,
        Capability.MANAGE_MESSAGES: True,
        Capability.VIEW_CLIENTS: True,
        Capability.MANAGE_CLIENTS: True,
        Capability.VIEW_LEADS: True,
        Capability.MANAGE_LEADS: True,
        Capability.VIEW_VISITORS: True,
        Capability.VIEW_FINANCIAL: True,
        Capability.MANAGE_FINANCIAL: True,
        Capability.VIEW_USERS: True,
        Capability.MANAGE_USERS: True,
        Capability.VIEW_USER_DETAILS: True,
        Capability.MANAGE_SYSTEM: False,
        Capability.VIEW_SYSTEM_REPORTS: True,
        Capability.MANAGE_SETTINGS: True,
        Capability.VIEW_ACTIVITIES: True,
    },
    UserRole.ADMIN: {
        Capability.VIEW_OWN_REQUESTS: True,
        Capability.VIEW_ALL_REQUESTS: True,
        Capability.CREATE_REQUESTS: True,
        Capability.EDIT_OWN_REQUESTS: True,
        Capability.EDIT_ALL_REQUESTS: True,
        Capability.DELETE_REQUESTS: True,
        Capability.VIEW_OWN_PROJECTS: True,
        Capability.VIEW_ALL_PROJECTS: True,
        Capability.MANAGE_OWN_PROJECTS: True,
        Capability.MANAGE_ALL_PROJECTS: True,
        Capability.ASSIGN_PROJECTS: True,
        Capability.VIEW_OWN_TASKS: True,
        Capability.VIEW_ALL_TASKS: True,
        Capability.MANAGE_OWN_TASKS: True,
        Capability.MANAGE_ALL_TASKS: True,
        Capability.VIEW_OWN_REPORTS: True,
        Capability.VIEW_ALL_REPORTS: True,
        Capability.MANAGE_OWN_REPORTS: True,
        Capability.MANAGE_ALL_REPORTS: True,
        Capability.APPROVE_REPORTS: True,
        Capability.VIEW_INVENTORY: True,
        Capability.MANAGE_INVENTORY: True,
        Capability.VIEW_SUPPLIERS: True,
        Capability.MANAGE_SUPPLIERS: True,
        Capability.VIEW_OWN_MESSAGES: True,
        Capability.VIEW_ALL_MESSAGES: True,
        Capability.MANAGE_MESSAGES: True,
        Capability.VIEW_CLIENTS: True,
        Capability.MANAGE_CLIENTS: True,
        Capability.VIEW_LEADS: True,
        Capability.MANAGE_LEADS: True,
        Capability.VIEW_VISITORS: True,
        Capability.VIEW_FINANCIAL: True,
        Capability.MANAGE_FINANCIAL: True,
        Capability.VIEW_USERS: True,
        Capability.MANAGE_USERS: True,
        Capability.VIEW_USER_DETAILS: True,
        Capability.MANAGE_SYSTEM: True,
        Capability.VIEW_SYSTEM_REPORTS: True,
        Capability.MANAGE_SETTINGS: True,
        Capability.VIEW_ACTIVITIES: True,
    },
}

# Coarse seniority, used only by has_minimum_role
ROLE_HIERARCHY: dict[UserRole, int] = {
    UserRole.CLIENT: 1,
    UserRole.EMPLOYEE: 2,
    UserRole.SALES: 2,
    UserRole.PROJECT_MANAGER: 3,
    UserRole.MANAGER: 3,
    UserRole.ADMIN: 4,
}

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Capability catalog for the portal."""

from enum import Enum


class Capability(str, Enum):
    """Fine-grained capability flags a role may hold."""

    # Service requests
    VIEW_OWN_REQUESTS = "viewOwnRequests"
    VIEW_ALL_REQUESTS = "viewAllRequests"
    CREATE_REQUESTS = "createRequests"
    EDIT_OWN_REQUESTS = "editOwnRequests"
    EDIT_ALL_REQUESTS = "editAllRequests"
    DELETE_REQUESTS = "deleteRequests"

    # Projects
    VIEW_OWN_PROJECTS = "viewOwnProjects"
    VIEW_ALL_PROJECTS = "viewAllProjects"
    MANAGE_OWN_PROJECTS = "manageOwnProjects"
    MANAGE_ALL_PROJECTS = "manageAllProjects"
    ASSIGN_PROJECTS = "assignProjects"

    # Tasks
    VIEW_OWN_TASKS = "viewOwnTasks"
    VIEW_ALL_TASKS = "viewAllTasks"
    MANAGE_OWN_TASKS = "manageOwnTasks"
    MANAGE_ALL_TASKS = "manageAllTasks"

    # Reports
    VIEW_OWN_REPORTS = "viewOwnReports"
    VIEW_ALL_REPORTS = "viewAllReports"
    MANAGE_OWN_REPORTS = "manageOwnReports"
    MANAGE_ALL_REPORTS = "manageAllReports"
    APPROVE_REPORTS = "approveReports"

    # Inventory
    VIEW_INVENTORY = "viewInventory"
    MANAGE_INVENTORY = "manageInventory"

    # Suppliers
    VIEW_SUPPLIERS = "viewSuppliers"
    MANAGE_SUPPLIERS = "manageSuppliers"

    # Messages
    VIEW_OWN_MESSAGES = "viewOwnMessages"
    VIEW_ALL_MESSAGES = "viewAllMessages"
    MANAGE_MESSAGES = "manageMessages"

    # Clients
    VIEW_CLIENTS = "viewClients"
    MANAGE_CLIENTS = "manageClients"

    # Leads
    VIEW_LEADS = "viewLeads"
    MANAGE_LEADS = "manageLeads"

    # Visitors
    VIEW_VISITORS = "viewVisitors"

    # Financial
    VIEW_FINANCIAL = "viewFinancial"
    MANAGE_FINANCIAL = "manageFinancial"

    # Users / employees
    VIEW_USERS = "viewUsers"
    MANAGE_USERS = "manageUsers"
    VIEW_USER_DETAILS = "viewUserDetails"

    # System administration
    MANAGE_SYSTEM = "manageSystem"
    VIEW_SYSTEM_REPORTS = "viewSystemReports"
    MANAGE_SETTINGS = "manageSettings"
    VIEW_ACTIVITIES = "viewActivities"


CORE_PERMISSIONS = [
    # Service requests
    {
        "code": Capability.VIEW_OWN_REQUESTS,
        "module": "requests",
        "description": "View own service requests",
    },
    {
        "code": Capability.VIEW_ALL_REQUESTS,
        "module": "requests",
        "description": "View every service request",
    },
    {
        "code": Capability.CREATE_REQUESTS,
        "module": "requests",
        "description": "Submit new service requests",
    },
    {
        "code": Capability.EDIT_OWN_REQUESTS,
        "module": "requests",
        "description": "Edit own service requests",
    },
    {
        "code": Capability.EDIT_ALL_REQUESTS,
        "module": "requests",
        "description": "Edit any service request",
    },
    {
        "code": Capability.DELETE_REQUESTS,
        "module": "requests",
        "description": "Delete service requests",
    },
    # Projects
    {
        "code": Capability.VIEW_OWN_PROJECTS,
        "module": "projects",
        "description": "View linked projects",
    },
    {
        "code": Capability.VIEW_ALL_PROJECTS,
        "module": "projects",
        "description": "View every project",
    },
    {
        "code": Capability.MANAGE_OWN_PROJECTS,
        "module": "projects",
        "description": "Update linked projects",
    },
    {
        "code": Capability.MANAGE_ALL_PROJECTS,
        "module": "projects",
        "description": "Create, update and delete any project",
    },
    {
        "code": Capability.ASSIGN_PROJECTS,
        "module": "projects",
        "description": "Assign technicians to projects",
    },
    # Tasks
    {
        "code": Capability.VIEW_OWN_TASKS,
        "module": "tasks",
        "description": "View own tasks",
    },
    {
        "code": Capability.VIEW_ALL_TASKS,
        "module": "tasks",
        "description": "View every task",
    },
    {
        "code": Capability.MANAGE_OWN_TASKS,
        "module": "tasks",
        "description": "Update own tasks",
    },
    {
        "code": Capability.MANAGE_ALL_TASKS,
        "module": "tasks",
        "description": "Create, assign and delete any task",
    },
    # Reports
    {
        "code": Capability.VIEW_OWN_REPORTS,
        "module": "reports",
        "description": "View own field reports",
    },
    {
        "code": Capability.VIEW_ALL_REPORTS,
        "module": "reports",
        "description": "View every field report",
    },
    {
        "code": Capability.MANAGE_OWN_REPORTS,
        "module": "reports",
        "description": "Submit and edit own field reports",
    },
    {
        "code": Capability.MANAGE_ALL_REPORTS,
        "module": "reports",
        "description": "Edit and delete any field report",
    },
    {
        "code": Capability.APPROVE_REPORTS,
        "module": "reports",
        "description": "Approve submitted field reports",
    },
    # Inventory
    {
        "code": Capability.VIEW_INVENTORY,
        "module": "inventory",
        "description": "View inventory and stock levels",
    },
    {
        "code": Capability.MANAGE_INVENTORY,
        "module": "inventory",
        "description": "Manage inventory items and stock",
    },
    # Suppliers
    {
        "code": Capability.VIEW_SUPPLIERS,
        "module": "suppliers",
        "description": "View suppliers",
    },
    {
        "code": Capability.MANAGE_SUPPLIERS,
        "module": "suppliers",
        "description": "Create and manage suppliers",
    },
    # Messages
    {
        "code": Capability.VIEW_OWN_MESSAGES,
        "module": "messages",
        "description": "View own messages",
    },
    {
        "code": Capability.VIEW_ALL_MESSAGES,
        "module": "messages",
        "description": "View every contact message",
    },
    {
        "code": Capability.MANAGE_MESSAGES,
        "module": "messages",
        "description": "Answer and archive contact messages",
    },
    # Clients
    {
        "code": Capability.VIEW_CLIENTS,
        "module": "clients",
        "description": "View clients",
    },
    {
        "code": Capability.MANAGE_CLIENTS,
        "module": "clients",
        "description": "Create and manage clients",
    },
    # Leads
    {"code": Capability.VIEW_LEADS, "module": "leads", "description": "View leads"},
    {
        "code": Capability.MANAGE_LEADS,
        "module": "leads",
        "description": "Create, convert and manage leads",
    },
    # Visitors
    {
        "code": Capability.VIEW_VISITORS,
        "module": "visitors",
        "description": "View website visitor analytics",
    },
    # Financial
    {
        "code": Capability.VIEW_FINANCIAL,
        "module": "financial",
        "description": "View revenue, expenses and financial logs",
    },
    {
        "code": Capability.MANAGE_FINANCIAL,
        "module": "financial",
        "description": "Record and edit financial entries",
    },
    # Users
    {"code": Capability.VIEW_USERS, "module": "users", "description": "View users"},
    {
        "code": Capability.MANAGE_USERS,
        "module": "users",
        "description": "Create, deactivate and change roles of users",
    },
    {
        "code": Capability.VIEW_USER_DETAILS,
        "module": "users",
        "description": "View detailed user profiles",
    },
    # System
    {
        "code": Capability.MANAGE_SYSTEM,
        "module": "system",
        "description": "Full system administration",
    },
    {
        "code": Capability.VIEW_SYSTEM_REPORTS,
        "module": "system",
        "description": "View system-wide reports",
    },
    {
        "code": Capability.MANAGE_SETTINGS,
        "module": "system",
        "description": "Change application settings",
    },
    {
        "code": Capability.VIEW_ACTIVITIES,
        "module": "system",
        "description": "View the activity log",
    },
]

"""
Role hierarchy and permission matrix.

Permission sets are a total function of role: every staff member with a
given role holds exactly that role's permissions, with no per-user
overrides. The tables are read-only.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class StaffRole(str, Enum):
    """Staff roles, highest rank first."""
    ADMIN = "admin"
    BRAND_OWNER = "brand_owner"
    BRANCH_MANAGER = "branch_manager"
    STAFF = "staff"


class StaffStatus(str, Enum):
    """Employment status of a staff profile."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"


class Permission(str, Enum):
    """Capability strings gating an action on an entity type."""
    PRODUCTS_VIEW = "products.view"
    PRODUCTS_CREATE = "products.create"
    PRODUCTS_EDIT = "products.edit"
    PRODUCTS_DELETE = "products.delete"
    CATEGORIES_VIEW = "categories.view"
    CATEGORIES_CREATE = "categories.create"
    CATEGORIES_EDIT = "categories.edit"
    CATEGORIES_DELETE = "categories.delete"
    ORDERS_VIEW = "orders.view"
    ORDERS_CREATE = "orders.create"
    ORDERS_EDIT = "orders.edit"
    ORDERS_DELETE = "orders.delete"
    STAFF_VIEW = "staff.view"
    STAFF_CREATE = "staff.create"
    STAFF_EDIT = "staff.edit"
    STAFF_DELETE = "staff.delete"
    BRANCHES_VIEW = "branches.view"
    BRANCHES_CREATE = "branches.create"
    BRANCHES_EDIT = "branches.edit"
    BRANCHES_DELETE = "branches.delete"
    BRAND_VIEW = "brand.view"
    BRAND_EDIT = "brand.edit"
    REPORTS_VIEW = "reports.view"
    REPORTS_EXPORT = "reports.export"
    SETTINGS_VIEW = "settings.view"
    SETTINGS_EDIT = "settings.edit"


ALL_PERMISSIONS: frozenset[Permission] = frozenset(Permission)

ROLE_HIERARCHY: Mapping[StaffRole, int] = MappingProxyType({
    StaffRole.ADMIN: 4,
    StaffRole.BRAND_OWNER: 3,
    StaffRole.BRANCH_MANAGER: 2,
    StaffRole.STAFF: 1,
})

ROLE_PERMISSIONS: Mapping[StaffRole, frozenset[Permission]] = MappingProxyType({
    StaffRole.ADMIN: ALL_PERMISSIONS,
    StaffRole.BRAND_OWNER: ALL_PERMISSIONS,
    StaffRole.BRANCH_MANAGER: frozenset({
        Permission.PRODUCTS_VIEW, Permission.PRODUCTS_CREATE, Permission.PRODUCTS_EDIT,
        Permission.CATEGORIES_VIEW,
        Permission.ORDERS_VIEW, Permission.ORDERS_CREATE, Permission.ORDERS_EDIT, Permission.ORDERS_DELETE,
        Permission.STAFF_VIEW, Permission.STAFF_CREATE, Permission.STAFF_EDIT,
        Permission.BRANCHES_VIEW,
        Permission.REPORTS_VIEW,
        Permission.SETTINGS_VIEW,
    }),
    StaffRole.STAFF: frozenset({
        Permission.PRODUCTS_VIEW,
        Permission.CATEGORIES_VIEW,
        Permission.ORDERS_VIEW, Permission.ORDERS_CREATE, Permission.ORDERS_EDIT,
        Permission.REPORTS_VIEW,
    }),
})

ROLE_DISPLAY_NAMES: Mapping[StaffRole, str] = MappingProxyType({
    StaffRole.ADMIN: "Administrator",
    StaffRole.BRAND_OWNER: "Brand Owner",
    StaffRole.BRANCH_MANAGER: "Branch Manager",
    StaffRole.STAFF: "Staff Member",
})

STATUS_DISPLAY_NAMES: Mapping[StaffStatus, str] = MappingProxyType({
    StaffStatus.ACTIVE: "Active",
    StaffStatus.INACTIVE: "Inactive",
    StaffStatus.PENDING: "Pending",
    StaffStatus.SUSPENDED: "Suspended",
})


def permissions_for(role: StaffRole) -> frozenset[Permission]:
    """Return the fixed permission set of a role."""
    return ROLE_PERMISSIONS[StaffRole(role)]


def has_permission(role: StaffRole, permission: Permission) -> bool:
    return Permission(permission) in permissions_for(role)


def role_rank(role: StaffRole) -> int:
    return ROLE_HIERARCHY[StaffRole(role)]


def can_manage(actor_role: StaffRole, target_role: StaffRole) -> bool:
    """
    Whether an actor may assign or administer the target role.

    Strictly greater rank: a role never manages its peers, itself included.
    """
    return role_rank(actor_role) > role_rank(target_role)


def assignable_roles(actor_role: StaffRole) -> list[StaffRole]:
    """Roles the actor may assign when creating or inviting staff, highest first."""
    return [role for role in StaffRole if can_manage(actor_role, role)]


def sorted_permissions(role: StaffRole) -> list[Permission]:
    """Permissions of a role in declaration order, for materialising onto profiles."""
    granted = permissions_for(role)
    return [permission for permission in Permission if permission in granted]


def role_display_name(role: StaffRole) -> str:
    return ROLE_DISPLAY_NAMES[StaffRole(role)]


def status_display_name(status: StaffStatus) -> str:
    return STATUS_DISPLAY_NAMES[StaffStatus(status)]

"""Core application modules."""
from localstyle.core.config import settings, Settings
from localstyle.core.roles import (
    StaffRole,
    StaffStatus,
    Permission,
    can_manage,
    permissions_for,
)

__all__ = [
    "settings",
    "Settings",
    "StaffRole",
    "StaffStatus",
    "Permission",
    "can_manage",
    "permissions_for",
]

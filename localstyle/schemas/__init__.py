"""
Pydantic schemas for request/response validation.
"""
from localstyle.schemas.common import Page, MessageResponse, HealthCheck, paginate
from localstyle.schemas.auth import (
    TokenData, AuthTokens, TokenRefresh, LoginRequest, AuthResponse, TokenResponse, RoleInfo
)
from localstyle.schemas.category import CategoryCreate, CategoryUpdate
from localstyle.schemas.product import ProductBase, ProductCreate, ProductUpdate
from localstyle.schemas.staff import (
    StaffCreate, StaffUpdate, AddressUpdate, EmergencyContactUpdate, StaffFilters,
    StaffInviteCreate, InviteRespond, StaffStatsResponse
)

__all__ = [
    # Common
    "Page", "MessageResponse", "HealthCheck", "paginate",

    # Auth schemas
    "TokenData", "AuthTokens", "TokenRefresh", "LoginRequest", "AuthResponse",
    "TokenResponse", "RoleInfo",

    # Category schemas
    "CategoryCreate", "CategoryUpdate",

    # Product schemas
    "ProductBase", "ProductCreate", "ProductUpdate",

    # Staff schemas
    "StaffCreate", "StaffUpdate", "AddressUpdate", "EmergencyContactUpdate", "StaffFilters",
    "StaffInviteCreate", "InviteRespond", "StaffStatsResponse",
]

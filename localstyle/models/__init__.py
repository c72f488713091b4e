"""
Entity models for the LocalStyle admin application.
"""
from localstyle.models.base import Base, Entity, utcnow
from localstyle.models.category import Category, CategoryWithChildren, CategoryTreeNode
from localstyle.models.product import Product, ProductStatus, MAX_PRODUCT_IMAGES
from localstyle.models.staff import (
    Address,
    EmergencyContact,
    ManagerRef,
    StaffProfile,
    StaffInvite,
    InviteStatus,
)
from localstyle.models.user import AuthUser, Brand, ContactInfo

__all__ = [
    "Base",
    "Entity",
    "utcnow",
    "Category",
    "CategoryWithChildren",
    "CategoryTreeNode",
    "Product",
    "ProductStatus",
    "MAX_PRODUCT_IMAGES",
    "Address",
    "EmergencyContact",
    "ManagerRef",
    "StaffProfile",
    "StaffInvite",
    "InviteStatus",
    "AuthUser",
    "Brand",
    "ContactInfo",
]

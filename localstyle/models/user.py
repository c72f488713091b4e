"""
Authenticated user and brand profile models.
"""
from pydantic import EmailStr

from localstyle.core.roles import StaffRole
from localstyle.models.base import Base


class AuthUser(Base):
    """Identity carried by an auth session."""
    id: str
    email: EmailStr
    name: str
    role: StaffRole

    def __repr__(self) -> str:
        return f"<AuthUser(id={self.id}, email={self.email}, role={self.role.value})>"


class ContactInfo(Base):
    email: str
    phone: str
    website: str


class Brand(Base):
    """Static brand profile shown on the dashboard."""
    id: str
    name: str
    logo_url: str
    bio: str
    contact_info: ContactInfo

"""
Staff profile and staff invite models.
"""
from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import EmailStr, Field, computed_field

from localstyle.core.roles import Permission, StaffRole, StaffStatus
from localstyle.models.base import Base, Entity, UtcDatetime, utcnow


class Address(Base):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class EmergencyContact(Base):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    relationship: Optional[str] = None


class ManagerRef(Base):
    """Manager reference. ``name`` is resolved by the caller, not stored by the directory."""
    id: Optional[str] = None
    name: Optional[str] = None


class StaffProfile(Entity):
    """One employee of the brand."""

    email: EmailStr
    name: str
    first_name: str
    last_name: str
    role: StaffRole
    phone_number: Optional[str] = None
    avatar: Optional[str] = None
    date_of_birth: Optional[str] = None
    address: Address = Field(default_factory=Address)
    emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
    status: StaffStatus = StaffStatus.PENDING
    department: Optional[str] = None
    position: Optional[str] = None
    branch_id: Optional[str] = None
    branch_name: Optional[str] = None
    manager: ManagerRef = Field(default_factory=ManagerRef)
    employee_id: Optional[str] = None
    hire_date: UtcDatetime
    termination_date: Optional[UtcDatetime] = None
    salary: Optional[float] = Field(None, ge=0)
    is_email_verified: bool = False
    is_phone_verified: bool = False
    last_login: Optional[UtcDatetime] = None
    # Snapshot of ROLE_PERMISSIONS[role], refreshed whenever the role changes
    permissions: list[Permission] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: UtcDatetime
    created_by: str
    updated_by: str

    def __repr__(self) -> str:
        return f"<StaffProfile(id={self.id}, email={self.email}, role={self.role.value}, status={self.status.value})>"


class InviteStatus(str, Enum):
    """Stored invite status. Expiry is derived from ``expires_at``."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class StaffInvite(Entity):
    """Time-boxed onboarding offer for a prospective staff member."""

    email: EmailStr
    first_name: str
    last_name: str
    role: StaffRole
    branch_id: Optional[str] = None
    branch_name: Optional[str] = None
    manager_id: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    invited_by: str
    message: Optional[str] = None
    status: InviteStatus = InviteStatus.PENDING
    sent_at: UtcDatetime
    expires_at: UtcDatetime
    created_at: UtcDatetime
    accepted_at: Optional[UtcDatetime] = None

    def expired_at(self, now: datetime) -> bool:
        return now > self.expires_at

    @computed_field(alias="isExpired")
    @property
    def is_expired(self) -> bool:
        """Derived on every read, never stored."""
        return self.expired_at(utcnow())

    def is_live_pending(self, now: datetime) -> bool:
        return self.status == InviteStatus.PENDING and not self.expired_at(now)

    def __repr__(self) -> str:
        return f"<StaffInvite(id={self.id}, email={self.email}, status={self.status.value})>"

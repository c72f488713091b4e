"""
Pydantic schemas for staff profiles, invites and statistics.
"""
from typing import Literal, Optional
from pydantic import EmailStr, Field

from localstyle.core.roles import StaffRole, StaffStatus
from localstyle.models.base import Base, UtcDatetime


class StaffCreate(Base):
    """
    Schema for creating a staff member.

    Permissions are not accepted here: they always come from the role.
    """
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: StaffRole
    phone_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    branch_id: Optional[str] = None
    manager_id: Optional[str] = None
    employee_id: Optional[str] = None
    hire_date: UtcDatetime
    salary: Optional[float] = Field(None, ge=0)
    send_invite_email: bool = False


class AddressUpdate(Base):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class EmergencyContactUpdate(Base):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    relationship: Optional[str] = None


class StaffUpdate(Base):
    """Partial staff update. Nested address and emergency contact merge field by field."""
    id: Optional[str] = None
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[StaffRole] = None
    status: Optional[StaffStatus] = None
    phone_number: Optional[str] = None
    avatar: Optional[str] = None
    date_of_birth: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    branch_id: Optional[str] = None
    manager_id: Optional[str] = None
    employee_id: Optional[str] = None
    hire_date: Optional[UtcDatetime] = None
    termination_date: Optional[UtcDatetime] = None
    salary: Optional[float] = Field(None, ge=0)
    address: Optional[AddressUpdate] = None
    emergency_contact: Optional[EmergencyContactUpdate] = None


class StaffFilters(Base):
    role: Optional[StaffRole] = None
    status: Optional[StaffStatus] = None
    branch_id: Optional[str] = None
    department: Optional[str] = None
    search: Optional[str] = None


class StaffInviteCreate(Base):
    """Schema for inviting a prospective staff member."""
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: StaffRole
    branch_id: Optional[str] = None
    manager_id: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    message: Optional[str] = Field(None, max_length=2000)


class InviteRespond(Base):
    """Outcome recorded against a pending invite."""
    status: Literal["accepted", "cancelled"]


class StaffStatsResponse(Base):
    total_staff: int
    active_staff: int
    pending_invites: int
    by_role: dict[StaffRole, int]
    by_status: dict[StaffStatus, int]
    by_branch: dict[str, int]
    recent_hires: int

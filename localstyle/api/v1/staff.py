"""
Staff directory API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from localstyle.api.deps import PageParams, get_staff_service
from localstyle.core.roles import StaffRole, StaffStatus
from localstyle.core.security import get_optional_user
from localstyle.models.staff import StaffProfile
from localstyle.models.user import AuthUser
from localstyle.schemas.common import MessageResponse, Page
from localstyle.schemas.staff import StaffCreate, StaffFilters, StaffStatsResponse, StaffUpdate
from localstyle.services.result import unwrap
from localstyle.services.staff import StaffService

router = APIRouter(prefix="/staff", tags=["Staff"])


@router.get("", response_model=Page[StaffProfile])
async def list_staff(
    role: Optional[StaffRole] = None,
    status: Optional[StaffStatus] = None,
    branch_id: Optional[str] = Query(None, alias="branchId"),
    department: Optional[str] = None,
    search: Optional[str] = None,
    paging: PageParams = Depends(),
    service: StaffService = Depends(get_staff_service)
):
    """
    List staff members with filtering and pagination.

    - **role** / **status** / **branchId**: Exact matches
    - **department**: Case-insensitive partial match
    - **search**: Name, email, employee ID or position
    """
    filters = StaffFilters(
        role=role,
        status=status,
        branch_id=branch_id,
        department=department,
        search=search
    )
    return service.list_staff(filters, page=paging.page, limit=paging.limit)


@router.post("", response_model=StaffProfile, status_code=status.HTTP_201_CREATED)
async def create_staff(
    staff_data: StaffCreate,
    current_user: Optional[AuthUser] = Depends(get_optional_user),
    service: StaffService = Depends(get_staff_service)
):
    """
    Create a staff member in pending status.

    - **email**, **firstName**, **lastName**, **role**, **hireDate**: Required
    - **sendInviteEmail**: Log a welcome email to the new member

    Permissions are always those of the role. An authenticated caller must
    outrank the role being assigned.
    """
    return unwrap(service.create(staff_data, actor=current_user))


@router.get("/stats", response_model=StaffStatsResponse)
async def get_staff_stats(service: StaffService = Depends(get_staff_service)):
    """Headcount by role, status and branch, live pending invites and recent hires."""
    return service.stats()


@router.get("/{staff_id}", response_model=StaffProfile)
async def get_staff(
    staff_id: str,
    service: StaffService = Depends(get_staff_service)
):
    """Get a specific staff member by ID."""
    return unwrap(service.get(staff_id))


@router.put("/{staff_id}", response_model=StaffProfile)
async def update_staff(
    staff_id: str,
    staff_data: StaffUpdate,
    current_user: Optional[AuthUser] = Depends(get_optional_user),
    service: StaffService = Depends(get_staff_service)
):
    """
    Update a staff member.

    Address and emergency contact are merged field by field. A role change
    replaces the member's permissions with those of the new role.
    """
    return unwrap(service.update(staff_id, staff_data, actor=current_user))


@router.delete("/{staff_id}", response_model=MessageResponse)
async def delete_staff(
    staff_id: str,
    service: StaffService = Depends(get_staff_service)
):
    """Delete a staff member. Active members must be deactivated first."""
    unwrap(service.delete(staff_id))
    return MessageResponse(message="Staff member deleted successfully")

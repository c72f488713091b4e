"""
Staff invitation API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from localstyle.api.deps import get_staff_service
from localstyle.core.security import get_optional_user
from localstyle.models.staff import InviteStatus, StaffInvite
from localstyle.models.user import AuthUser
from localstyle.schemas.common import MessageResponse
from localstyle.schemas.staff import InviteRespond, StaffInviteCreate
from localstyle.services.result import unwrap
from localstyle.services.staff import StaffService

router = APIRouter(prefix="/staff/invites", tags=["Staff Invites"])


@router.get("", response_model=list[StaffInvite])
async def list_invites(
    status: Optional[InviteStatus] = None,
    email: Optional[str] = None,
    service: StaffService = Depends(get_staff_service)
):
    """
    List invites.

    - **status**: Stored status (pending, accepted, expired, cancelled)
    - **email**: Case-insensitive partial match
    """
    return service.list_invites(status=status, email=email)


@router.post("", response_model=StaffInvite, status_code=status.HTTP_201_CREATED)
async def create_invite(
    invite_data: StaffInviteCreate,
    current_user: Optional[AuthUser] = Depends(get_optional_user),
    service: StaffService = Depends(get_staff_service)
):
    """
    Invite someone to join the staff. The invite expires after 7 days.

    Fails with 409 while another live pending invite exists for the same email.
    """
    return unwrap(service.invite(invite_data, actor=current_user))


@router.get("/{invite_id}", response_model=StaffInvite)
async def get_invite(
    invite_id: str,
    service: StaffService = Depends(get_staff_service)
):
    """Get a specific invite by ID."""
    return unwrap(service.get_invite(invite_id))


@router.put("/{invite_id}", response_model=StaffInvite)
async def respond_to_invite(
    invite_id: str,
    response: InviteRespond,
    service: StaffService = Depends(get_staff_service)
):
    """
    Accept or cancel a pending invite.

    Returns 410 once the invite has expired and 409 if it is no longer pending.
    """
    return unwrap(service.respond(invite_id, InviteStatus(response.status)))


@router.delete("/{invite_id}", response_model=MessageResponse)
async def cancel_invite(
    invite_id: str,
    service: StaffService = Depends(get_staff_service)
):
    """Remove an invite."""
    unwrap(service.cancel(invite_id))
    return MessageResponse(message="Invite cancelled successfully")

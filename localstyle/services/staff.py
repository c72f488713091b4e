"""
Staff directory: profiles, invitations and aggregate statistics.

Permissions on a profile are a snapshot of the role's permission set taken at
creation and refreshed on every role change. Branch and manager names belong
to collaborators outside this service and are left unresolved.
"""
from datetime import datetime, timedelta
from typing import Optional

from localstyle.core.config import settings
from localstyle.core.roles import StaffRole, StaffStatus, can_manage, sorted_permissions
from localstyle.error_handlers import (
    ConflictError,
    InviteExpiredError,
    PermissionDeniedError,
    ResourceNotFoundError,
)
from localstyle.logging_config import get_logger
from localstyle.models.base import utcnow
from localstyle.models.staff import (
    Address,
    EmergencyContact,
    InviteStatus,
    ManagerRef,
    StaffInvite,
    StaffProfile,
)
from localstyle.models.user import AuthUser
from localstyle.repositories import Repository
from localstyle.schemas.common import Page, paginate
from localstyle.schemas.staff import (
    StaffCreate,
    StaffFilters,
    StaffInviteCreate,
    StaffStatsResponse,
    StaffUpdate,
)
from localstyle.services.notifications import EmailNotifier
from localstyle.services.result import Err, Ok, Result

logger = get_logger("staff")

SYSTEM_ACTOR = "system"
NO_BRANCH = "none"

# Fields that cannot be cleared by sending null
_REQUIRED_FIELDS = {"email", "first_name", "last_name", "role", "status", "hire_date"}


def full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def filter_staff(
    staff: list[StaffProfile],
    role: Optional[StaffRole] = None,
    status: Optional[StaffStatus] = None,
    branch_id: Optional[str] = None,
    department: Optional[str] = None,
    search: Optional[str] = None
) -> list[StaffProfile]:
    """
    Apply the directory filters, AND-combined.

    ``department`` and ``search`` are case-insensitive substring matches;
    ``search`` looks at name, email, employee id and position.
    """
    result = staff
    if role:
        result = [s for s in result if s.role == role]
    if status:
        result = [s for s in result if s.status == status]
    if branch_id:
        result = [s for s in result if s.branch_id == branch_id]
    if department:
        needle = department.lower()
        result = [s for s in result if s.department and needle in s.department.lower()]
    if search:
        needle = search.lower()
        result = [
            s for s in result
            if any(
                needle in value.lower()
                for value in (s.name, s.email, s.employee_id, s.position)
                if value
            )
        ]
    return result


def compute_stats(
    staff: list[StaffProfile],
    invites: list[StaffInvite],
    now: datetime,
    recent_hire_days: int = 30
) -> StaffStatsResponse:
    """Aggregate counts for the staff dashboard. Every role and status key is present."""
    by_role = {role: 0 for role in StaffRole}
    by_status = {status: 0 for status in StaffStatus}
    by_branch: dict[str, int] = {}
    window_start = now - timedelta(days=recent_hire_days)
    recent_hires = 0

    for member in staff:
        by_role[member.role] += 1
        by_status[member.status] += 1
        branch = member.branch_id or NO_BRANCH
        by_branch[branch] = by_branch.get(branch, 0) + 1
        if window_start <= member.hire_date <= now:
            recent_hires += 1

    return StaffStatsResponse(
        total_staff=len(staff),
        active_staff=by_status[StaffStatus.ACTIVE],
        pending_invites=sum(1 for invite in invites if invite.is_live_pending(now)),
        by_role=by_role,
        by_status=by_status,
        by_branch=by_branch,
        recent_hires=recent_hires,
    )


class StaffService:
    """Staff profile and invite lifecycle over two repositories."""

    def __init__(
        self,
        staff_repository: Repository[StaffProfile],
        invite_repository: Repository[StaffInvite],
        notifier: Optional[EmailNotifier] = None,
        invite_expiry_days: Optional[int] = None,
        recent_hire_days: Optional[int] = None
    ):
        self.staff = staff_repository
        self.invites = invite_repository
        self.notifier = notifier or EmailNotifier()
        self.invite_expiry_days = invite_expiry_days or settings.invite_expiry_days
        self.recent_hire_days = recent_hire_days or settings.recent_hire_days

    @staticmethod
    def _check_can_manage(actor: Optional[AuthUser], target_role: StaffRole) -> Optional[Err]:
        """Only authenticated callers are checked."""
        if actor is not None and not can_manage(actor.role, target_role):
            logger.warning(f"{actor.id} ({actor.role.value}) may not manage role {target_role.value}")
            return Err(PermissionDeniedError(actor.role.value, target_role.value))
        return None

    # Profiles

    def list_staff(self, filters: StaffFilters, page: int = 1, limit: int = 10) -> Page:
        matches = filter_staff(self.staff.find_all(), **filters.model_dump())
        items, total = paginate(matches, page, limit)
        return Page(items=items, total=total, page=page, limit=limit)

    def get(self, staff_id: str) -> Result[StaffProfile]:
        member = self.staff.find_by_id(staff_id)
        if member is None:
            return Err(ResourceNotFoundError("Staff member", staff_id))
        return Ok(member)

    def create(self, request: StaffCreate, actor: Optional[AuthUser] = None) -> Result[StaffProfile]:
        """
        Create a staff profile in ``pending`` status.

        Permissions are copied from the role; audit fields record the actor id
        or ``"system"`` for anonymous calls.
        """
        denied = self._check_can_manage(actor, request.role)
        if denied:
            return denied

        now = utcnow()
        actor_id = actor.id if actor else SYSTEM_ACTOR
        member = StaffProfile(
            id=self.staff.next_id(),
            email=request.email,
            name=full_name(request.first_name, request.last_name),
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
            phone_number=request.phone_number,
            status=StaffStatus.PENDING,
            department=request.department,
            position=request.position,
            branch_id=request.branch_id,
            manager=ManagerRef(id=request.manager_id),
            employee_id=request.employee_id,
            hire_date=request.hire_date,
            salary=request.salary,
            is_email_verified=False,
            is_phone_verified=False,
            permissions=sorted_permissions(request.role),
            created_at=now,
            updated_at=now,
            created_by=actor_id,
            updated_by=actor_id,
        )
        self.staff.insert(member)
        logger.info(f"Created staff member {member.id} <{member.email}> as {member.role.value}")

        if request.send_invite_email:
            self.notifier.send_staff_welcome(member, inviter=actor.name if actor else None)

        return Ok(member)

    def update(
        self,
        staff_id: str,
        request: StaffUpdate,
        actor: Optional[AuthUser] = None
    ) -> Result[StaffProfile]:
        """
        Merge a partial update into a profile.

        Address and emergency contact merge field by field, the display name
        follows first/last name, and a role change refreshes permissions.
        """
        existing = self.staff.find_by_id(staff_id)
        if existing is None:
            return Err(ResourceNotFoundError("Staff member", staff_id))

        changes = request.model_dump(
            exclude_unset=True,
            exclude={"id", "address", "emergency_contact", "manager_id"}
        )
        changes = {k: v for k, v in changes.items() if v is not None or k not in _REQUIRED_FIELDS}

        new_role = changes.get("role")
        if new_role is not None and new_role != existing.role:
            denied = self._check_can_manage(actor, existing.role) or self._check_can_manage(actor, new_role)
            if denied:
                return denied
            changes["permissions"] = sorted_permissions(new_role)
            logger.info(f"Staff member {staff_id} role {existing.role.value} -> {new_role.value}")

        if request.address is not None:
            changes["address"] = Address(**{
                **existing.address.model_dump(),
                **request.address.model_dump(exclude_unset=True),
            })
        if request.emergency_contact is not None:
            changes["emergency_contact"] = EmergencyContact(**{
                **existing.emergency_contact.model_dump(),
                **request.emergency_contact.model_dump(exclude_unset=True),
            })
        if "manager_id" in request.model_fields_set and request.manager_id != existing.manager.id:
            changes["manager"] = ManagerRef(id=request.manager_id)

        if "first_name" in changes or "last_name" in changes:
            changes["name"] = full_name(
                changes.get("first_name", existing.first_name),
                changes.get("last_name", existing.last_name)
            )

        changes["updated_at"] = utcnow()
        changes["updated_by"] = actor.id if actor else SYSTEM_ACTOR
        updated = existing.model_copy(update=changes)
        self.staff.update(updated)
        logger.info(f"Updated staff member {staff_id}: {sorted(changes)}")
        return Ok(updated)

    def delete(self, staff_id: str) -> Result[StaffProfile]:
        """Remove a profile. Active staff must be deactivated first."""
        existing = self.staff.find_by_id(staff_id)
        if existing is None:
            return Err(ResourceNotFoundError("Staff member", staff_id))
        if existing.status == StaffStatus.ACTIVE:
            logger.warning(f"Rejected delete of active staff member {staff_id}")
            return Err(ConflictError(
                "Cannot delete active staff member. Please deactivate first.",
                reason="staff_active",
                details={"id": staff_id}
            ))
        self.staff.delete(staff_id)
        logger.info(f"Deleted staff member {staff_id}")
        return Ok(existing)

    def stats(self, now: Optional[datetime] = None) -> StaffStatsResponse:
        return compute_stats(
            self.staff.find_all(),
            self.invites.find_all(),
            now or utcnow(),
            self.recent_hire_days
        )

    # Invites

    def list_invites(self, status: Optional[InviteStatus] = None, email: Optional[str] = None) -> list[StaffInvite]:
        invites = self.invites.find_all()
        if status:
            invites = [i for i in invites if i.status == status]
        if email:
            needle = email.lower()
            invites = [i for i in invites if needle in i.email.lower()]
        return invites

    def get_invite(self, invite_id: str) -> Result[StaffInvite]:
        invite = self.invites.find_by_id(invite_id)
        if invite is None:
            return Err(ResourceNotFoundError("Invite", invite_id))
        return Ok(invite)

    def invite(self, request: StaffInviteCreate, actor: Optional[AuthUser] = None) -> Result[StaffInvite]:
        """
        Issue an invite valid for ``invite_expiry_days``.

        At most one live pending invite may exist per email address; expired,
        accepted or cancelled invites do not block a new one.
        """
        denied = self._check_can_manage(actor, request.role)
        if denied:
            return denied

        now = utcnow()
        email = request.email.lower()
        if self.invites.find_all(lambda i: i.email.lower() == email and i.is_live_pending(now)):
            logger.warning(f"Rejected invite for {request.email}: a pending invite already exists")
            return Err(ConflictError(
                "Pending invite already exists for this email",
                reason="invite_pending",
                details={"email": request.email}
            ))

        invite = StaffInvite(
            id=self.invites.next_id(),
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
            branch_id=request.branch_id,
            manager_id=request.manager_id,
            position=request.position,
            department=request.department,
            invited_by=actor.name if actor else SYSTEM_ACTOR,
            message=request.message,
            status=InviteStatus.PENDING,
            sent_at=now,
            expires_at=now + timedelta(days=self.invite_expiry_days),
            created_at=now,
        )
        self.invites.insert(invite)
        logger.info(f"Invited {invite.email} as {invite.role.value} ({invite.id}), expires {invite.expires_at.isoformat()}")
        self.notifier.send_staff_invite(invite)
        return Ok(invite)

    def respond(self, invite_id: str, status: InviteStatus) -> Result[StaffInvite]:
        """
        Record the outcome of a pending invite.

        Expiry is checked first and wins regardless of the requested status.
        """
        invite = self.invites.find_by_id(invite_id)
        if invite is None:
            return Err(ResourceNotFoundError("Invite", invite_id))

        now = utcnow()
        if invite.expired_at(now):
            logger.warning(f"Rejected response to expired invite {invite_id}")
            return Err(InviteExpiredError(invite_id, invite.expires_at.isoformat()))
        if invite.status != InviteStatus.PENDING:
            logger.warning(f"Rejected response to invite {invite_id} in status {invite.status.value}")
            return Err(ConflictError(
                f"Invite is already {invite.status.value}",
                reason="invite_not_pending",
                details={"id": invite_id, "status": invite.status.value}
            ))

        changes = {"status": InviteStatus(status)}
        if changes["status"] == InviteStatus.ACCEPTED:
            changes["accepted_at"] = now
        updated = invite.model_copy(update=changes)
        self.invites.update(updated)
        logger.info(f"Invite {invite_id} marked {updated.status.value}")
        return Ok(updated)

    def cancel(self, invite_id: str) -> Result[StaffInvite]:
        """Remove an invite outright."""
        invite = self.invites.find_by_id(invite_id)
        if invite is None:
            return Err(ResourceNotFoundError("Invite", invite_id))
        self.invites.delete(invite_id)
        logger.info(f"Cancelled invite {invite_id}")
        return Ok(invite)

"""
Mock email notifier for staff invitations and welcome messages.

Nothing is delivered: every message is logged and kept in an in-memory
outbox so the dashboard (and tests) can see what would have been sent.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from localstyle.core.config import settings
from localstyle.core.roles import role_display_name
from localstyle.logging_config import get_logger
from localstyle.models.base import utcnow
from localstyle.models.staff import StaffInvite, StaffProfile

logger = get_logger("notifications")


@dataclass
class OutgoingEmail:
    to_emails: List[str]
    subject: str
    text_body: str
    queued_at: datetime = field(default_factory=utcnow)


class EmailNotifier:
    """Logs invite and welcome emails instead of sending them."""

    def __init__(self, enabled: bool = None, from_email: str = None, from_name: str = None):
        self.enabled = settings.email_enabled if enabled is None else enabled
        self.from_email = from_email or settings.email_from
        self.from_name = from_name or settings.email_from_name
        self.outbox: List[OutgoingEmail] = []
        if not self.enabled:
            logger.info("Email notifier is DISABLED. Set EMAIL_ENABLED=true to log outgoing messages.")

    def send_email(self, to_emails: List[str], subject: str, text_body: str) -> bool:
        """Record an email. Always succeeds: there is no transport."""
        message = OutgoingEmail(to_emails=list(to_emails), subject=subject, text_body=text_body)
        self.outbox.append(message)
        if self.enabled:
            logger.info(f"[EMAIL] {self.from_name} <{self.from_email}> -> {to_emails}: {subject}")
        else:
            logger.debug(f"[EMAIL DISABLED] Would send: {subject} to {to_emails}")
        return True

    def send_staff_invite(self, invite: StaffInvite) -> bool:
        """Invitation with the inviter's optional welcome message."""
        subject = f"You're invited to join LocalStyle as {role_display_name(invite.role)}"
        lines = [
            f"Hi {invite.first_name},",
            "",
            f"{invite.invited_by} has invited you to join the LocalStyle team.",
        ]
        if invite.position:
            lines.append(f"Position: {invite.position}")
        if invite.department:
            lines.append(f"Department: {invite.department}")
        if invite.message:
            lines.extend(["", invite.message])
        lines.extend(["", f"This invitation expires on {invite.expires_at:%Y-%m-%d %H:%M} UTC."])
        return self.send_email([invite.email], subject, "\n".join(lines))

    def send_staff_welcome(self, staff: StaffProfile, inviter: Optional[str] = None) -> bool:
        subject = "Welcome to LocalStyle"
        text_body = (
            f"Hi {staff.first_name},\n\n"
            f"An account was created for you as {role_display_name(staff.role)}"
            f"{' by ' + inviter if inviter else ''}.\n"
            "Sign in to the dashboard to complete your profile."
        )
        return self.send_email([staff.email], subject, text_body)

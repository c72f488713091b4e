"""
Role catalogue endpoint.
"""
from fastapi import APIRouter

from localstyle.core.roles import (
    StaffRole,
    assignable_roles,
    role_display_name,
    role_rank,
    sorted_permissions,
)
from localstyle.schemas.auth import RoleInfo

router = APIRouter(prefix="/roles", tags=["Roles"])


def role_catalogue() -> list[RoleInfo]:
    return [
        RoleInfo(
            role=role,
            rank=role_rank(role),
            display_name=role_display_name(role),
            permissions=sorted_permissions(role),
            assignable_roles=assignable_roles(role),
        )
        for role in StaffRole
    ]


@router.get("", response_model=list[RoleInfo])
async def list_roles():
    """
    List every role, highest rank first, with its fixed permission set
    and the roles it may assign.
    """
    return role_catalogue()

"""
Authorization guard for workspace-scoped resources.

The caller's role in the owning workspace is the only authorization signal.
Reads are allowed for members or when the target is public and degrade to
empty results otherwise. Writes require a membership whose role satisfies a
predicate and raise PermissionDeniedError when it does not.
"""

import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import PermissionDeniedError, UnauthenticatedError
from ...shared.utils.types import UserId, WorkspaceId
from ..repository.entities import WorkspaceRole
from ..repository.interfaces import IWorkspaceMemberRepository

log = logging.getLogger(__name__)

RolePredicate = Callable[[Optional[WorkspaceRole]], bool]


def can_edit(role: Optional[WorkspaceRole]) -> bool:
    """Project, model, material and version writes: any role except viewer."""
    return role is not None and role != WorkspaceRole.VIEWER


def can_administer(role: Optional[WorkspaceRole]) -> bool:
    """Workspace settings and membership management: owner or admin."""
    return role in (WorkspaceRole.OWNER, WorkspaceRole.ADMIN)


def require_user(user_id: Optional[UserId]) -> UserId:
    if not user_id:
        raise UnauthenticatedError()
    return user_id


class AuthorizationService:
    """Resolves membership roles and applies read/write policies."""

    def __init__(self, member_repository: IWorkspaceMemberRepository):
        self.member_repository = member_repository

    def resolve_role(
        self, db: DBSession, workspace_id: WorkspaceId, user_id: Optional[UserId]
    ) -> Optional[WorkspaceRole]:
        if not user_id:
            return None
        membership = self.member_repository.find_membership(db, workspace_id, user_id)
        return membership.role if membership else None

    def can_read(
        self,
        db: DBSession,
        workspace_id: WorkspaceId,
        user_id: Optional[UserId],
        is_public: bool,
    ) -> bool:
        """Member of the workspace, or the target resource is public. Anonymous callers read nothing."""
        if not user_id:
            return False
        if is_public:
            return True
        return self.resolve_role(db, workspace_id, user_id) is not None

    def authorize(
        self,
        db: DBSession,
        workspace_id: WorkspaceId,
        user_id: UserId,
        predicate: RolePredicate = can_edit,
        action: str = "modify this resource",
    ) -> WorkspaceRole:
        """
        Return the caller's role when the predicate allows it.

        Raises:
            PermissionDeniedError: No membership, or the role fails the predicate.
        """
        role = self.resolve_role(db, workspace_id, user_id)
        if not predicate(role):
            required = "owner or admin" if predicate is can_administer else "editor"
            log.warning(
                f"User {user_id} with role {role.value if role else None} "
                f"denied permission to {action} in workspace {workspace_id}"
            )
            raise PermissionDeniedError(
                f"Insufficient permissions to {action}",
                workspace_id=workspace_id,
                required=required,
            )
        return role

"""
Business service for workspace and membership operations.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import ConflictError, EntityNotFoundError, ValidationError
from ...shared.utils.types import UserId, WorkspaceId
from ..repository.entities import (
    Workspace,
    WorkspaceMember,
    WorkspaceMemberWithUser,
    WorkspaceRole,
    WorkspaceSettings,
    WorkspaceWithRole,
)
from ..repository.interfaces import IWorkspaceMemberRepository, IWorkspaceRepository
from ..repository.user_repository import UserRepository
from .authorization_service import AuthorizationService, can_administer, require_user

log = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "is_public", "settings")


class WorkspaceService:
    """Service layer for workspace business logic."""

    def __init__(
        self,
        workspace_repository: IWorkspaceRepository,
        member_repository: IWorkspaceMemberRepository,
        user_repository: UserRepository,
        authorization: AuthorizationService,
    ):
        self.workspace_repository = workspace_repository
        self.member_repository = member_repository
        self.user_repository = user_repository
        self.authorization = authorization

    def create(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        name: str,
        description: Optional[str] = None,
        is_public: bool = False,
        settings: Optional[WorkspaceSettings] = None,
    ) -> Workspace:
        """
        Create a workspace owned by the calling user.

        The workspace row and the owner membership are written in the same
        transaction, so a workspace never exists without its owner.

        Raises:
            UnauthenticatedError: No user identity.
            ValidationError: Blank name.
        """
        user_id = require_user(user_id)
        if not name or not name.strip():
            raise ValidationError("Workspace name cannot be empty", entity_type="workspace")

        workspace = self.workspace_repository.create(
            db,
            name=name.strip(),
            owner_id=user_id,
            description=description.strip() if description else None,
            is_public=is_public,
            settings=settings,
        )
        self.member_repository.add(db, workspace.id, user_id, WorkspaceRole.OWNER)

        log.info(f"Created workspace {workspace.id} '{workspace.name}' owned by user {user_id}")
        return workspace

    def list_for_user(self, db: DBSession, user_id: Optional[UserId]) -> list[WorkspaceWithRole]:
        """Workspaces the user belongs to, each paired with the user's role."""
        if not user_id:
            return []

        memberships = self.member_repository.find_by_user(db, user_id)
        workspaces = self.workspace_repository.find_by_ids(
            db, [m.workspace_id for m in memberships]
        )

        result = []
        for membership in memberships:
            workspace = workspaces.get(membership.workspace_id)
            if workspace is None:
                log.debug(
                    f"Skipping membership {membership.id}: workspace {membership.workspace_id} missing"
                )
                continue
            result.append(WorkspaceWithRole(**workspace.model_dump(), role=membership.role))
        return result

    def get_by_id(
        self, db: DBSession, user_id: Optional[UserId], workspace_id: WorkspaceId
    ) -> Optional[WorkspaceWithRole]:
        """
        Return the workspace with the caller's role, or None when the caller
        may not see it. Non-members of a public workspace get the viewer role.
        """
        if not user_id:
            return None

        workspace = self.workspace_repository.find_by_id(db, workspace_id)
        if workspace is None:
            return None

        role = self.authorization.resolve_role(db, workspace_id, user_id)
        if role is None:
            if not workspace.is_public:
                log.debug(f"User {user_id} cannot read private workspace {workspace_id}")
                return None
            role = WorkspaceRole.VIEWER
        return WorkspaceWithRole(**workspace.model_dump(), role=role)

    def list_members(
        self, db: DBSession, user_id: Optional[UserId], workspace_id: WorkspaceId
    ) -> list[WorkspaceMemberWithUser]:
        """
        Members joined with their user profile. Requires membership; there is
        no public fallback. Members without a profile row are left out.
        """
        if not user_id or self.authorization.resolve_role(db, workspace_id, user_id) is None:
            return []

        members = self.member_repository.find_by_workspace(db, workspace_id)
        users = self.user_repository.find_by_ids(db, [m.user_id for m in members])
        return [
            WorkspaceMemberWithUser(**member.model_dump(), user=users[member.user_id])
            for member in members
            if member.user_id in users
        ]

    def update(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        patch: dict,
    ) -> Workspace:
        """
        Apply a partial update. Only keys present in patch are changed.

        Raises:
            UnauthenticatedError, EntityNotFoundError, PermissionDeniedError,
            ValidationError
        """
        user_id = require_user(user_id)
        self._require_workspace(db, workspace_id)
        self.authorization.authorize(
            db, workspace_id, user_id, can_administer, "update workspace settings"
        )

        update_data = {k: v for k, v in patch.items() if k in UPDATABLE_FIELDS}
        if "name" in update_data:
            name = update_data["name"]
            if not name or not name.strip():
                raise ValidationError("Workspace name cannot be empty", entity_type="workspace")
            update_data["name"] = name.strip()

        workspace = self.workspace_repository.update(db, workspace_id, update_data)
        log.info(f"User {user_id} updated workspace {workspace_id}: {sorted(update_data)}")
        return workspace

    def add_member(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        member_user_id: UserId,
        role: WorkspaceRole,
    ) -> WorkspaceMember:
        """
        Invite a user into the workspace.

        Raises:
            ValidationError: Attempt to grant the owner role.
            ConflictError: The user is already a member.
        """
        user_id = require_user(user_id)
        self._require_workspace(db, workspace_id)
        self.authorization.authorize(
            db, workspace_id, user_id, can_administer, "manage workspace members"
        )

        role = WorkspaceRole(role)
        if role == WorkspaceRole.OWNER:
            raise ValidationError("The owner role cannot be granted", entity_type="workspace_member")
        if self.member_repository.find_membership(db, workspace_id, member_user_id):
            raise ConflictError(f"User {member_user_id} is already a member of this workspace")

        member = self.member_repository.add(
            db, workspace_id, member_user_id, role, invited_by=user_id
        )
        log.info(
            f"User {user_id} added {member_user_id} to workspace {workspace_id} as {role.value}"
        )
        return member

    def update_member_role(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        member_user_id: UserId,
        role: WorkspaceRole,
    ) -> WorkspaceMember:
        user_id = require_user(user_id)
        workspace = self._require_workspace(db, workspace_id)
        self.authorization.authorize(
            db, workspace_id, user_id, can_administer, "manage workspace members"
        )

        role = WorkspaceRole(role)
        if member_user_id == workspace.owner_id:
            raise ValidationError(
                "The workspace owner's role cannot be changed", entity_type="workspace_member"
            )
        if role == WorkspaceRole.OWNER:
            raise ValidationError("The owner role cannot be granted", entity_type="workspace_member")

        member = self.member_repository.update_role(db, workspace_id, member_user_id, role)
        if member is None:
            raise EntityNotFoundError("workspace_member", member_user_id, "Member not found")

        log.info(
            f"User {user_id} changed role of {member_user_id} in workspace {workspace_id} to {role.value}"
        )
        return member

    def remove_member(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        member_user_id: UserId,
    ) -> None:
        user_id = require_user(user_id)
        workspace = self._require_workspace(db, workspace_id)
        self.authorization.authorize(
            db, workspace_id, user_id, can_administer, "manage workspace members"
        )

        if member_user_id == workspace.owner_id:
            raise ValidationError(
                "The workspace owner cannot be removed", entity_type="workspace_member"
            )
        if not self.member_repository.remove(db, workspace_id, member_user_id):
            raise EntityNotFoundError("workspace_member", member_user_id, "Member not found")

        log.info(f"User {user_id} removed {member_user_id} from workspace {workspace_id}")

    def _require_workspace(self, db: DBSession, workspace_id: WorkspaceId) -> Workspace:
        workspace = self.workspace_repository.find_by_id(db, workspace_id)
        if workspace is None:
            raise EntityNotFoundError("workspace", workspace_id)
        return workspace

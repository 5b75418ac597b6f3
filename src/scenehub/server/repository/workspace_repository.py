"""
Repository implementations for workspaces and workspace membership.
"""

import uuid
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from .entities import Workspace, WorkspaceMember, WorkspaceRole, WorkspaceSettings
from .interfaces import IWorkspaceMemberRepository, IWorkspaceRepository
from .models import WorkspaceMemberModel, WorkspaceModel


class WorkspaceRepository(IWorkspaceRepository):
    """SQLAlchemy implementation of workspace repository."""

    def create(
        self,
        db: DBSession,
        name: str,
        owner_id: str,
        description: Optional[str] = None,
        is_public: bool = False,
        settings: Optional[WorkspaceSettings] = None,
    ) -> Workspace:
        model = WorkspaceModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            owner_id=owner_id,
            is_public=is_public,
            settings=settings.model_dump(mode="json") if settings else None,
            created_at=now_epoch_ms(),
        )
        db.add(model)
        db.flush()
        return Workspace.model_validate(model)

    def find_by_id(self, db: DBSession, workspace_id: str) -> Optional[Workspace]:
        model = db.get(WorkspaceModel, workspace_id)
        return Workspace.model_validate(model) if model else None

    def find_by_ids(self, db: DBSession, workspace_ids: list[str]) -> dict[str, Workspace]:
        if not workspace_ids:
            return {}
        models = db.query(WorkspaceModel).filter(WorkspaceModel.id.in_(workspace_ids)).all()
        return {model.id: Workspace.model_validate(model) for model in models}

    def update(self, db: DBSession, workspace_id: str, update_data: dict) -> Optional[Workspace]:
        model = db.get(WorkspaceModel, workspace_id)
        if not model:
            return None

        for field, value in update_data.items():
            if field == "settings" and value is not None:
                value = WorkspaceSettings.model_validate(value).model_dump(mode="json")
            if hasattr(model, field):
                setattr(model, field, value)

        model.updated_at = now_epoch_ms()
        db.flush()
        return Workspace.model_validate(model)


class WorkspaceMemberRepository(IWorkspaceMemberRepository):
    """SQLAlchemy implementation of workspace membership repository."""

    def find_membership(
        self, db: DBSession, workspace_id: str, user_id: str
    ) -> Optional[WorkspaceMember]:
        model = (
            db.query(WorkspaceMemberModel)
            .filter(
                WorkspaceMemberModel.workspace_id == workspace_id,
                WorkspaceMemberModel.user_id == user_id,
            )
            .one_or_none()
        )
        return WorkspaceMember.model_validate(model) if model else None

    def find_by_user(self, db: DBSession, user_id: str) -> list[WorkspaceMember]:
        models = (
            db.query(WorkspaceMemberModel)
            .filter(WorkspaceMemberModel.user_id == user_id)
            .order_by(WorkspaceMemberModel.joined_at)
            .all()
        )
        return [WorkspaceMember.model_validate(m) for m in models]

    def find_by_workspace(self, db: DBSession, workspace_id: str) -> list[WorkspaceMember]:
        models = (
            db.query(WorkspaceMemberModel)
            .filter(WorkspaceMemberModel.workspace_id == workspace_id)
            .order_by(WorkspaceMemberModel.joined_at)
            .all()
        )
        return [WorkspaceMember.model_validate(m) for m in models]

    def add(
        self,
        db: DBSession,
        workspace_id: str,
        user_id: str,
        role: WorkspaceRole,
        invited_by: Optional[str] = None,
    ) -> WorkspaceMember:
        model = WorkspaceMemberModel(
            id=str(uuid.uuid4()),
            workspace_id=workspace_id,
            user_id=user_id,
            role=WorkspaceRole(role).value,
            invited_by=invited_by,
            joined_at=now_epoch_ms(),
        )
        db.add(model)
        db.flush()
        return WorkspaceMember.model_validate(model)

    def update_role(
        self, db: DBSession, workspace_id: str, user_id: str, role: WorkspaceRole
    ) -> Optional[WorkspaceMember]:
        model = (
            db.query(WorkspaceMemberModel)
            .filter(
                WorkspaceMemberModel.workspace_id == workspace_id,
                WorkspaceMemberModel.user_id == user_id,
            )
            .one_or_none()
        )
        if not model:
            return None
        model.role = WorkspaceRole(role).value
        db.flush()
        return WorkspaceMember.model_validate(model)

    def remove(self, db: DBSession, workspace_id: str, user_id: str) -> bool:
        result = (
            db.query(WorkspaceMemberModel)
            .filter(
                WorkspaceMemberModel.workspace_id == workspace_id,
                WorkspaceMemberModel.user_id == user_id,
            )
            .delete()
        )
        db.flush()
        return result > 0

"""
Business service for the workspace material library.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError, ValidationError
from ...shared.utils.types import UserId, WorkspaceId
from ..repository.entities import Material, MaterialLibraryEntry
from ..repository.interfaces import IWorkspaceRepository
from ..repository.material_repository import MaterialRepository
from .authorization_service import AuthorizationService, can_edit, require_user

log = logging.getLogger(__name__)


class MaterialService:
    """
    Named, reusable materials scoped to a workspace.

    Members see every entry of their workspace; other authenticated users see
    only entries flagged public. Writes require a non-viewer role.
    """

    def __init__(
        self,
        material_repository: MaterialRepository,
        workspace_repository: IWorkspaceRepository,
        authorization: AuthorizationService,
    ):
        self.material_repository = material_repository
        self.workspace_repository = workspace_repository
        self.authorization = authorization

    def create(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        name: str,
        material: Material,
        is_public: bool = False,
    ) -> MaterialLibraryEntry:
        user_id = require_user(user_id)
        if self.workspace_repository.find_by_id(db, workspace_id) is None:
            raise EntityNotFoundError("workspace", workspace_id)
        self.authorization.authorize(db, workspace_id, user_id, can_edit, "create materials")
        self._validate_name(name)

        entry = self.material_repository.create(
            db,
            name=name.strip(),
            workspace_id=workspace_id,
            material=material,
            created_by=user_id,
            is_public=is_public,
        )
        log.info(f"User {user_id} created {material.type} material {entry.id} in workspace {workspace_id}")
        return entry

    def list_for_workspace(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        workspace_id: WorkspaceId,
        search: Optional[str] = None,
    ) -> list[MaterialLibraryEntry]:
        if not user_id:
            return []
        is_member = self.authorization.resolve_role(db, workspace_id, user_id) is not None

        if search and search.strip():
            entries = self.material_repository.search(db, workspace_id, search.strip())
            return entries if is_member else [e for e in entries if e.is_public]
        return self.material_repository.find_by_workspace(
            db, workspace_id, public_only=not is_member
        )

    def get_by_id(
        self, db: DBSession, user_id: Optional[UserId], material_id: str
    ) -> Optional[MaterialLibraryEntry]:
        entry = self.material_repository.find_by_id(db, material_id)
        if entry is None or not self.authorization.can_read(
            db, entry.workspace_id, user_id, entry.is_public
        ):
            return None
        return entry

    def update(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        material_id: str,
        patch: dict,
    ) -> MaterialLibraryEntry:
        user_id, _ = self._authorize_write(db, user_id, material_id, "update materials")

        update_data = {
            k: v
            for k, v in patch.items()
            if k in ("name", "material", "is_public") and v is not None
        }
        if "name" in update_data:
            self._validate_name(update_data["name"])
            update_data["name"] = update_data["name"].strip()

        updated = self.material_repository.update(db, material_id, update_data)
        log.info(f"User {user_id} updated material {material_id}")
        return updated

    def delete(self, db: DBSession, user_id: Optional[UserId], material_id: str) -> None:
        user_id, entry = self._authorize_write(db, user_id, material_id, "delete materials")
        self.material_repository.delete(db, material_id)
        log.info(f"User {user_id} deleted material {material_id} from workspace {entry.workspace_id}")

    def _authorize_write(
        self, db: DBSession, user_id: Optional[UserId], material_id: str, action: str
    ) -> tuple[UserId, MaterialLibraryEntry]:
        user_id = require_user(user_id)
        entry = self.material_repository.find_by_id(db, material_id)
        if entry is None:
            raise EntityNotFoundError("material", material_id)
        self.authorization.authorize(db, entry.workspace_id, user_id, can_edit, action)
        return user_id, entry

    @staticmethod
    def _validate_name(name: Optional[str]) -> None:
        if not name or not name.strip():
            raise ValidationError("Material name cannot be empty", entity_type="material")

"""
Business service for immutable project version snapshots.
"""

import json
import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.exceptions import EntityNotFoundError, ValidationError
from ...shared.utils.types import ProjectId, UserId
from ..repository.entities import ProjectVersion
from ..repository.interfaces import IProjectRepository, ISceneObjectRepository
from ..repository.project_version_repository import ProjectVersionRepository
from .authorization_service import AuthorizationService, can_edit, require_user

log = logging.getLogger(__name__)


class VersionService:
    """Creates and reads numbered snapshots of a project and its models."""

    def __init__(
        self,
        version_repository: ProjectVersionRepository,
        project_repository: IProjectRepository,
        scene_object_repository: ISceneObjectRepository,
        authorization: AuthorizationService,
    ):
        self.version_repository = version_repository
        self.project_repository = project_repository
        self.scene_object_repository = scene_object_repository
        self.authorization = authorization

    def create_snapshot(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        project_id: ProjectId,
        name: str,
        description: Optional[str] = None,
    ) -> ProjectVersion:
        """
        Serialize the project and all of its models into a new version.

        Version numbers start at 1 and increase by one per project.
        """
        user_id = require_user(user_id)
        project = self.project_repository.find_by_id(db, project_id)
        if project is None:
            raise EntityNotFoundError("project", project_id)
        self.authorization.authorize(
            db, project.workspace_id, user_id, can_edit, "create project versions"
        )
        if not name or not name.strip():
            raise ValidationError("Version name cannot be empty", entity_type="project_version")

        models = self.scene_object_repository.find_by_project(db, project_id)
        data = json.dumps(
            {
                "project": project.model_dump(mode="json"),
                "models": [m.model_dump(mode="json") for m in models],
            },
            sort_keys=True,
        )

        version = self.version_repository.create(
            db,
            project_id=project_id,
            name=name.strip(),
            data=data,
            created_by=user_id,
            description=description,
            thumbnail=project.thumbnail,
        )
        log.info(
            f"User {user_id} created version {version.version_number} of project {project_id}"
        )
        return version

    def list_versions(
        self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId
    ) -> list[ProjectVersion]:
        if not self._can_read_project(db, user_id, project_id):
            return []
        return self.version_repository.find_by_project(db, project_id)

    def get_version(
        self, db: DBSession, user_id: Optional[UserId], version_id: str
    ) -> Optional[ProjectVersion]:
        version = self.version_repository.find_by_id(db, version_id)
        if version is None or not self._can_read_project(db, user_id, version.project_id):
            return None
        return version

    def _can_read_project(
        self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId
    ) -> bool:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None:
            return False
        return self.authorization.can_read(db, project.workspace_id, user_id, project.is_public)

"""
Business service for project-related operations.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from ...shared.exceptions import EntityNotFoundError, ValidationError
from ...shared.utils.types import ProjectId, UserId, WorkspaceId
from ..repository.entities import (
    GridSettings,
    Project,
    ProjectSettings,
    RenderSettings,
    SceneObject,
    Transform,
)
from ..repository.interfaces import (
    IProjectRepository,
    ISceneObjectRepository,
    IWorkspaceRepository,
)
from .authorization_service import AuthorizationService, can_edit, require_user

log = logging.getLogger(__name__)

# (name, type, position, rotation) of the objects every new scene starts with
DEFAULT_SCENE_OBJECTS = (
    ("Camera", "camera", [0.0, 5.0, 10.0], [-0.3, 0.0, 0.0]),
    ("Light", "light", [5.0, 10.0, 5.0], [0.0, 0.0, 0.0]),
)

UPDATABLE_FIELDS = ("name", "description", "is_public", "thumbnail")


def _settings_group(model_cls, data: Optional[dict], group: str):
    """Validate a complete settings group; a group with missing fields is rejected."""
    if not data:
        return None
    missing = sorted(set(model_cls.model_fields) - set(data))
    if missing:
        raise ValidationError(
            f"Incomplete {group}",
            validation_details={f"settings.{group}.{name}": ["Field required"] for name in missing},
            entity_type="project",
        )
    return model_cls.model_validate(data)


class ProjectService:
    """Service layer for project business logic."""

    def __init__(
        self,
        project_repository: IProjectRepository,
        scene_object_repository: ISceneObjectRepository,
        workspace_repository: IWorkspaceRepository,
        authorization: AuthorizationService,
    ):
        self.project_repository = project_repository
        self.scene_object_repository = scene_object_repository
        self.workspace_repository = workspace_repository
        self.authorization = authorization

    def create(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        name: str,
        workspace_id: WorkspaceId,
        description: Optional[str] = None,
        is_public: bool = False,
    ) -> ProjectId:
        """
        Create a project with default settings and a seeded camera and light.

        Args:
            db: Database session
            user_id: The calling user
            name: Project name
            workspace_id: Owning workspace
            description: Optional project description
            is_public: Whether non-members may read the project

        Returns:
            The new project's id

        Raises:
            UnauthenticatedError: No user identity.
            EntityNotFoundError: The workspace does not exist.
            PermissionDeniedError: The caller is not an editor of the workspace.
            ValidationError: Blank project name.
        """
        user_id = require_user(user_id)
        if self.workspace_repository.find_by_id(db, workspace_id) is None:
            raise EntityNotFoundError("workspace", workspace_id)
        self.authorization.authorize(db, workspace_id, user_id, can_edit, "create projects")

        if not name or not name.strip():
            raise ValidationError("Project name cannot be empty", entity_type="project")

        timestamp = now_epoch_ms()
        project = self.project_repository.create(
            db,
            name=name.strip(),
            workspace_id=workspace_id,
            created_by=user_id,
            settings=ProjectSettings(),
            timestamp=timestamp,
            description=description.strip() if description else None,
            is_public=is_public,
        )

        for object_name, object_type, position, rotation in DEFAULT_SCENE_OBJECTS:
            self.scene_object_repository.create(
                db,
                project_id=project.id,
                name=object_name,
                object_type=object_type,
                transform=Transform(position=position, rotation=rotation),
                created_by=user_id,
                timestamp=timestamp,
            )

        log.info(f"Created project {project.id} '{project.name}' in workspace {workspace_id}")
        return project.id

    def get_by_workspace(
        self, db: DBSession, user_id: Optional[UserId], workspace_id: WorkspaceId
    ) -> list[Project]:
        """
        Projects of a workspace, most recently created first.

        Requires membership. Unlike get_by_id, public workspaces and projects
        are not listed for non-members.
        """
        if not user_id or self.authorization.resolve_role(db, workspace_id, user_id) is None:
            log.debug(f"User {user_id} is not a member of workspace {workspace_id}")
            return []
        return self.project_repository.find_by_workspace(db, workspace_id)

    def get_by_id(
        self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId
    ) -> Optional[Project]:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None or not self.authorization.can_read(
            db, project.workspace_id, user_id, project.is_public
        ):
            return None
        return project

    def get_models(
        self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId
    ) -> list[SceneObject]:
        """All scene objects of a readable project, in no particular order."""
        if self.get_by_id(db, user_id, project_id) is None:
            return []
        return self.scene_object_repository.find_by_project(db, project_id)

    def update(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        project_id: ProjectId,
        patch: dict,
    ) -> Project:
        """
        Apply a partial update and stamp last_modified.

        ``patch["settings"]`` may carry ``render_settings`` and/or
        ``grid_settings``; a provided group replaces the stored group as a
        whole and an omitted group is kept.
        """
        user_id = require_user(user_id)
        project = self._require_project(db, project_id)
        self.authorization.authorize(
            db, project.workspace_id, user_id, can_edit, "update projects"
        )

        update_data = {k: v for k, v in patch.items() if k in UPDATABLE_FIELDS}
        if "name" in update_data:
            name = update_data["name"]
            if not name or not name.strip():
                raise ValidationError("Project name cannot be empty", entity_type="project")
            update_data["name"] = name.strip()

        settings_patch = patch.get("settings")
        if settings_patch:
            render = settings_patch.get("render_settings")
            grid = settings_patch.get("grid_settings")
            update_data["settings"] = project.settings.merged_with(
                render_settings=_settings_group(RenderSettings, render, "render_settings"),
                grid_settings=_settings_group(GridSettings, grid, "grid_settings"),
            )

        update_data["last_modified"] = now_epoch_ms()
        update_data["last_modified_by"] = user_id

        updated = self.project_repository.update(db, project_id, update_data)
        log.info(f"User {user_id} updated project {project_id}")
        return updated

    def _require_project(self, db: DBSession, project_id: ProjectId) -> Project:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None:
            raise EntityNotFoundError("project", project_id)
        return project

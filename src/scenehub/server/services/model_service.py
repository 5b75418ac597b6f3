"""
Business service for scene objects ("models") within a project.

Every mutation stamps the owning project's last_modified/last_modified_by in
the same transaction as the model write.
"""

import logging
from typing import Optional, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from ...shared.exceptions import EntityNotFoundError, ValidationError
from ...shared.utils.types import ModelId, ProjectId, UserId
from ..repository.entities import (
    Project,
    SceneObject,
    Transform,
    parse_geometry,
    parse_material,
)
from ..repository.interfaces import IProjectRepository, ISceneObjectRepository
from .authorization_service import AuthorizationService, can_edit, require_user

log = logging.getLogger(__name__)


def _to_payload(value: Union[BaseModel, dict, None], parser, entity_type: str) -> Optional[dict]:
    """Validate a geometry/material given as a model or a plain dict and return its JSON form."""
    if value is None:
        return None
    if isinstance(value, dict):
        try:
            value = parser(value)
        except PydanticValidationError as e:
            details = {
                ".".join(str(p) for p in err["loc"]) or entity_type: [err["msg"]]
                for err in e.errors()
            }
            raise ValidationError(
                f"Invalid {entity_type}", validation_details=details, entity_type=entity_type
            ) from e
    return value.model_dump(mode="json", exclude_none=True)


class ModelService:
    """Service layer for scene object business logic."""

    def __init__(
        self,
        scene_object_repository: ISceneObjectRepository,
        project_repository: IProjectRepository,
        authorization: AuthorizationService,
    ):
        self.scene_object_repository = scene_object_repository
        self.project_repository = project_repository
        self.authorization = authorization

    def create(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        project_id: ProjectId,
        name: str,
        object_type: str,
        transform: Optional[Transform] = None,
        geometry=None,
        parent_id: Optional[ModelId] = None,
        material=None,
    ) -> SceneObject:
        """
        Add a scene object to a project.

        The identity transform is used when none is given. A parent, when
        given, must be an existing object of the same project.

        Raises:
            UnauthenticatedError: No user identity.
            EntityNotFoundError: The project does not exist.
            PermissionDeniedError: The caller is not an editor.
            ValidationError: Bad name, geometry, material or parent.
        """
        user_id = require_user(user_id)
        project = self._require_project(db, project_id)
        self.authorization.authorize(
            db, project.workspace_id, user_id, can_edit, "create models"
        )

        if not name or not name.strip():
            raise ValidationError("Model name cannot be empty", entity_type="model")
        if not object_type or not object_type.strip():
            raise ValidationError("Model type cannot be empty", entity_type="model")

        if parent_id is not None:
            parent = self.scene_object_repository.find_by_id(db, parent_id)
            if parent is None or parent.project_id != project_id:
                raise ValidationError(
                    "Parent model must exist in the same project",
                    validation_details={"parent_id": [f"Unknown parent {parent_id}"]},
                    entity_type="model",
                )

        timestamp = now_epoch_ms()
        scene_object = self.scene_object_repository.create(
            db,
            project_id=project_id,
            name=name.strip(),
            object_type=object_type.strip(),
            transform=transform or Transform(),
            created_by=user_id,
            timestamp=timestamp,
            geometry=_to_payload(geometry, parse_geometry, "geometry"),
            material=_to_payload(material, parse_material, "material"),
            parent_id=parent_id,
        )
        self.project_repository.touch(db, project_id, user_id, timestamp)

        log.info(
            f"User {user_id} created {scene_object.type} model {scene_object.id} in project {project_id}"
        )
        return scene_object

    def update_transform(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        model_id: ModelId,
        transform: Transform,
    ) -> SceneObject:
        """Replace position, rotation and scale together."""
        user_id, scene_object = self._authorize_model_write(db, user_id, model_id, "move models")
        return self._apply(db, user_id, scene_object, {"transform": transform})

    def set_visibility(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        model_id: ModelId,
        visible: bool,
    ) -> SceneObject:
        user_id, scene_object = self._authorize_model_write(
            db, user_id, model_id, "change model visibility"
        )
        return self._apply(db, user_id, scene_object, {"visible": bool(visible)})

    def remove(self, db: DBSession, user_id: Optional[UserId], model_id: ModelId) -> None:
        """
        Delete a single model. Children are left in place and keep their
        parent_id, which then points at a missing model.
        """
        user_id, scene_object = self._authorize_model_write(db, user_id, model_id, "delete models")

        self.scene_object_repository.delete(db, model_id)
        self.project_repository.touch(db, scene_object.project_id, user_id, now_epoch_ms())
        log.info(f"User {user_id} deleted model {model_id} from project {scene_object.project_id}")

    def get_children(
        self, db: DBSession, user_id: Optional[UserId], model_id: ModelId
    ) -> list[SceneObject]:
        """Direct children of a model, or [] when the model is not readable."""
        scene_object = self.scene_object_repository.find_by_id(db, model_id)
        if scene_object is None:
            return []
        project = self.project_repository.find_by_id(db, scene_object.project_id)
        if project is None or not self.authorization.can_read(
            db, project.workspace_id, user_id, project.is_public
        ):
            return []
        return self.scene_object_repository.find_children(db, model_id)

    def _authorize_model_write(
        self, db: DBSession, user_id: Optional[UserId], model_id: ModelId, action: str
    ) -> tuple[UserId, SceneObject]:
        user_id = require_user(user_id)
        scene_object = self.scene_object_repository.find_by_id(db, model_id)
        if scene_object is None:
            raise EntityNotFoundError("model", model_id)
        project = self._require_project(db, scene_object.project_id)
        self.authorization.authorize(db, project.workspace_id, user_id, can_edit, action)
        return user_id, scene_object

    def _apply(
        self, db: DBSession, user_id: UserId, scene_object: SceneObject, changes: dict
    ) -> SceneObject:
        timestamp = now_epoch_ms()
        changes = {**changes, "last_modified": timestamp, "last_modified_by": user_id}
        updated = self.scene_object_repository.update(db, scene_object.id, changes)
        self.project_repository.touch(db, scene_object.project_id, user_id, timestamp)
        log.info(f"User {user_id} updated model {scene_object.id}: {sorted(changes)}")
        return updated

    def _require_project(self, db: DBSession, project_id: ProjectId) -> Project:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None:
            raise EntityNotFoundError("project", project_id)
        return project

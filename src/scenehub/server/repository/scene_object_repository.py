"""
Repository implementation for scene object data access operations.
"""

import uuid
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from .entities import SceneObject, Transform
from .interfaces import ISceneObjectRepository
from .models import SceneObjectModel


class SceneObjectRepository(ISceneObjectRepository):
    """SQLAlchemy implementation of scene object repository."""

    def create(
        self,
        db: DBSession,
        project_id: str,
        name: str,
        object_type: str,
        transform: Transform,
        created_by: str,
        timestamp: int,
        geometry: Optional[dict] = None,
        material: Optional[dict] = None,
        parent_id: Optional[str] = None,
    ) -> SceneObject:
        model = SceneObjectModel(
            id=str(uuid.uuid4()),
            project_id=project_id,
            name=name,
            type=object_type,
            transform=transform.model_dump(mode="json"),
            geometry=geometry,
            material=material,
            parent_id=parent_id,
            visible=True,
            locked=False,
            created_by=created_by,
            last_modified=timestamp,
            last_modified_by=created_by,
            created_at=timestamp,
        )
        db.add(model)
        db.flush()
        return SceneObject.model_validate(model)

    def find_by_id(self, db: DBSession, model_id: str) -> Optional[SceneObject]:
        model = db.get(SceneObjectModel, model_id)
        return SceneObject.model_validate(model) if model else None

    def find_by_project(self, db: DBSession, project_id: str) -> list[SceneObject]:
        models = (
            db.query(SceneObjectModel)
            .filter(SceneObjectModel.project_id == project_id)
            .all()
        )
        return [SceneObject.model_validate(m) for m in models]

    def find_children(self, db: DBSession, parent_id: str) -> list[SceneObject]:
        models = (
            db.query(SceneObjectModel)
            .filter(SceneObjectModel.parent_id == parent_id)
            .all()
        )
        return [SceneObject.model_validate(m) for m in models]

    def update(self, db: DBSession, model_id: str, update_data: dict) -> Optional[SceneObject]:
        model = db.get(SceneObjectModel, model_id)
        if not model:
            return None

        for field, value in update_data.items():
            if isinstance(value, Transform):
                value = value.model_dump(mode="json")
            if hasattr(model, field):
                setattr(model, field, value)

        db.flush()
        return SceneObject.model_validate(model)

    def delete(self, db: DBSession, model_id: str) -> bool:
        result = db.query(SceneObjectModel).filter(SceneObjectModel.id == model_id).delete()
        db.flush()
        return result > 0

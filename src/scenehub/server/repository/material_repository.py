"""
Repository for the workspace material library.
"""

import uuid
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from .entities import MaterialLibraryEntry, parse_material
from .entities.material import Material
from .models import MaterialModel


class MaterialRepository:
    """Repository for material library entries."""

    def create(
        self,
        db: DBSession,
        name: str,
        workspace_id: str,
        material: Material,
        created_by: str,
        is_public: bool = False,
    ) -> MaterialLibraryEntry:
        model = MaterialModel(
            id=str(uuid.uuid4()),
            name=name,
            workspace_id=workspace_id,
            created_by=created_by,
            is_public=is_public,
            created_at=now_epoch_ms(),
        )
        self._apply_material(model, material)
        db.add(model)
        db.flush()
        return self._model_to_entity(model)

    def find_by_id(self, db: DBSession, material_id: str) -> Optional[MaterialLibraryEntry]:
        model = db.get(MaterialModel, material_id)
        return self._model_to_entity(model) if model else None

    def find_by_workspace(
        self, db: DBSession, workspace_id: str, public_only: bool = False
    ) -> list[MaterialLibraryEntry]:
        query = db.query(MaterialModel).filter(MaterialModel.workspace_id == workspace_id)
        if public_only:
            query = query.filter(MaterialModel.is_public.is_(True))
        models = query.order_by(MaterialModel.name).all()
        return [self._model_to_entity(m) for m in models]

    def search(
        self, db: DBSession, workspace_id: str, text: str
    ) -> list[MaterialLibraryEntry]:
        """Case-insensitive name or type match within a workspace."""
        escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        models = (
            db.query(MaterialModel)
            .filter(
                MaterialModel.workspace_id == workspace_id,
                or_(
                    MaterialModel.name.ilike(pattern, escape="\\"),
                    MaterialModel.material_type.ilike(pattern, escape="\\"),
                ),
            )
            .order_by(MaterialModel.name)
            .all()
        )
        return [self._model_to_entity(m) for m in models]

    def update(
        self, db: DBSession, material_id: str, update_data: dict
    ) -> Optional[MaterialLibraryEntry]:
        model = db.get(MaterialModel, material_id)
        if not model:
            return None

        for field, value in update_data.items():
            if field == "material":
                self._apply_material(model, value)
            elif hasattr(model, field):
                setattr(model, field, value)

        model.updated_at = now_epoch_ms()
        db.flush()
        return self._model_to_entity(model)

    def delete(self, db: DBSession, material_id: str) -> bool:
        result = db.query(MaterialModel).filter(MaterialModel.id == material_id).delete()
        db.flush()
        return result > 0

    @staticmethod
    def _apply_material(model: MaterialModel, material: Material) -> None:
        model.material_type = material.type
        model.properties = material.properties.model_dump(mode="json")
        model.textures = dict(material.textures) if material.textures else None

    def _model_to_entity(self, model: MaterialModel) -> MaterialLibraryEntry:
        """Convert SQLAlchemy model to domain entity."""
        material = parse_material(
            {
                "type": model.material_type,
                "properties": model.properties or {},
                "textures": model.textures,
            }
        )
        return MaterialLibraryEntry(
            id=model.id,
            name=model.name,
            workspace_id=model.workspace_id,
            material=material,
            created_by=model.created_by,
            is_public=model.is_public,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

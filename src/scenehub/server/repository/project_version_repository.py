"""
Repository for project version snapshots.
"""

import uuid
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from .entities import ProjectVersion
from .models import ProjectVersionModel


class ProjectVersionRepository:
    """Append-only repository; versions are never updated or deleted."""

    def next_version_number(self, db: DBSession, project_id: str) -> int:
        current = (
            db.query(func.max(ProjectVersionModel.version_number))
            .filter(ProjectVersionModel.project_id == project_id)
            .scalar()
        )
        return (current or 0) + 1

    def create(
        self,
        db: DBSession,
        project_id: str,
        name: str,
        data: str,
        created_by: str,
        description: Optional[str] = None,
        thumbnail: Optional[str] = None,
    ) -> ProjectVersion:
        model = ProjectVersionModel(
            id=str(uuid.uuid4()),
            project_id=project_id,
            version_number=self.next_version_number(db, project_id),
            name=name,
            description=description,
            data=data,
            created_by=created_by,
            thumbnail=thumbnail,
            created_at=now_epoch_ms(),
        )
        db.add(model)
        db.flush()
        return ProjectVersion.model_validate(model)

    def find_by_id(self, db: DBSession, version_id: str) -> Optional[ProjectVersion]:
        model = db.get(ProjectVersionModel, version_id)
        return ProjectVersion.model_validate(model) if model else None

    def find_by_project(self, db: DBSession, project_id: str) -> list[ProjectVersion]:
        """Versions of a project, newest first."""
        models = (
            db.query(ProjectVersionModel)
            .filter(ProjectVersionModel.project_id == project_id)
            .order_by(ProjectVersionModel.version_number.desc())
            .all()
        )
        return [ProjectVersion.model_validate(m) for m in models]

"""
Repository implementation for project data access operations.
"""

import uuid
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session as DBSession

from .entities import Project, ProjectSettings
from .interfaces import IProjectRepository
from .models import ProjectModel


class ProjectRepository(IProjectRepository):
    """SQLAlchemy implementation of project repository."""

    def create(
        self,
        db: DBSession,
        name: str,
        workspace_id: str,
        created_by: str,
        settings: ProjectSettings,
        timestamp: int,
        description: Optional[str] = None,
        is_public: bool = False,
    ) -> Project:
        """Create a project; it becomes the newest entry of its workspace."""
        last_order = (
            db.query(func.max(ProjectModel.insertion_order))
            .filter(ProjectModel.workspace_id == workspace_id)
            .scalar()
        )
        model = ProjectModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            workspace_id=workspace_id,
            created_by=created_by,
            is_public=is_public,
            settings=settings.model_dump(mode="json"),
            last_modified=timestamp,
            last_modified_by=created_by,
            created_at=timestamp,
            insertion_order=(last_order or 0) + 1,
        )
        db.add(model)
        db.flush()
        return Project.model_validate(model)

    def find_by_id(self, db: DBSession, project_id: str) -> Optional[Project]:
        model = db.get(ProjectModel, project_id)
        return Project.model_validate(model) if model else None

    def find_by_workspace(self, db: DBSession, workspace_id: str) -> list[Project]:
        models = (
            db.query(ProjectModel)
            .filter(ProjectModel.workspace_id == workspace_id)
            .order_by(ProjectModel.insertion_order.desc())
            .all()
        )
        return [Project.model_validate(m) for m in models]

    def update(self, db: DBSession, project_id: str, update_data: dict) -> Optional[Project]:
        """Update a project with the given data; settings must already be merged."""
        model = db.get(ProjectModel, project_id)
        if not model:
            return None

        for field, value in update_data.items():
            if isinstance(value, ProjectSettings):
                value = value.model_dump(mode="json")
            if hasattr(model, field):
                setattr(model, field, value)

        db.flush()
        return Project.model_validate(model)

    def touch(self, db: DBSession, project_id: str, user_id: str, timestamp: int) -> bool:
        result = (
            db.query(ProjectModel)
            .filter(ProjectModel.id == project_id)
            .update(
                {"last_modified": timestamp, "last_modified_by": user_id},
                synchronize_session="fetch",
            )
        )
        return result > 0

"""
Repository for collaboration presence rows.
"""

import uuid
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from .entities import CollaborationSession, Cursor
from .models import CollaborationSessionModel


class CollaborationRepository:
    """Repository for per-(project, user) presence records."""

    def _find_model(
        self, db: DBSession, project_id: str, user_id: str
    ) -> Optional[CollaborationSessionModel]:
        return (
            db.query(CollaborationSessionModel)
            .filter(
                CollaborationSessionModel.project_id == project_id,
                CollaborationSessionModel.user_id == user_id,
            )
            .one_or_none()
        )

    def find(self, db: DBSession, project_id: str, user_id: str) -> Optional[CollaborationSession]:
        model = self._find_model(db, project_id, user_id)
        return CollaborationSession.model_validate(model) if model else None

    def upsert(
        self,
        db: DBSession,
        project_id: str,
        user_id: str,
        timestamp: int,
        cursor: Optional[Cursor] = None,
        is_active: bool = True,
    ) -> CollaborationSession:
        """Create or refresh a presence row. A None cursor keeps the stored one."""
        model = self._find_model(db, project_id, user_id)
        if model is None:
            model = CollaborationSessionModel(
                id=str(uuid.uuid4()),
                project_id=project_id,
                user_id=user_id,
            )
            db.add(model)
        if cursor is not None:
            model.cursor = cursor.model_dump(mode="json")
        model.is_active = is_active
        model.last_seen = timestamp
        db.flush()
        return CollaborationSession.model_validate(model)

    def find_active(self, db: DBSession, project_id: str, seen_since: int) -> list[CollaborationSession]:
        models = (
            db.query(CollaborationSessionModel)
            .filter(
                CollaborationSessionModel.project_id == project_id,
                CollaborationSessionModel.is_active.is_(True),
                CollaborationSessionModel.last_seen >= seen_since,
            )
            .order_by(CollaborationSessionModel.last_seen.desc())
            .all()
        )
        return [CollaborationSession.model_validate(m) for m in models]

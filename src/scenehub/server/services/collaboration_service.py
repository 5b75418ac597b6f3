"""
Presence tracking for users viewing or editing a project.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from ...shared.exceptions import EntityNotFoundError, PermissionDeniedError
from ...shared.utils.types import ProjectId, UserId
from ..repository.collaboration_repository import CollaborationRepository
from ..repository.entities import CollaborationSession, Cursor, Project
from ..repository.interfaces import IProjectRepository
from .authorization_service import AuthorizationService, require_user

log = logging.getLogger(__name__)

DEFAULT_PRESENCE_TIMEOUT_SECONDS = 30


class CollaborationService:
    """
    Heartbeat-based presence. A session counts as active while it is flagged
    active and its last heartbeat is within the presence timeout.
    """

    def __init__(
        self,
        collaboration_repository: CollaborationRepository,
        project_repository: IProjectRepository,
        authorization: AuthorizationService,
        presence_timeout_seconds: int = DEFAULT_PRESENCE_TIMEOUT_SECONDS,
    ):
        self.collaboration_repository = collaboration_repository
        self.project_repository = project_repository
        self.authorization = authorization
        self.presence_timeout_ms = presence_timeout_seconds * 1000

    def heartbeat(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        project_id: ProjectId,
        cursor: Optional[Cursor] = None,
    ) -> CollaborationSession:
        """Mark the caller present in a project they can read."""
        user_id = require_user(user_id)
        self._require_readable_project(db, user_id, project_id)
        session = self.collaboration_repository.upsert(
            db, project_id, user_id, now_epoch_ms(), cursor=cursor, is_active=True
        )
        log.debug(f"Heartbeat from user {user_id} in project {project_id}")
        return session

    def leave(self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId) -> None:
        user_id = require_user(user_id)
        self._require_readable_project(db, user_id, project_id)
        if self.collaboration_repository.find(db, project_id, user_id) is None:
            return
        self.collaboration_repository.upsert(
            db, project_id, user_id, now_epoch_ms(), is_active=False
        )
        log.info(f"User {user_id} left project {project_id}")

    def list_active(
        self, db: DBSession, user_id: Optional[UserId], project_id: ProjectId
    ) -> list[CollaborationSession]:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None or not self.authorization.can_read(
            db, project.workspace_id, user_id, project.is_public
        ):
            return []
        seen_since = now_epoch_ms() - self.presence_timeout_ms
        return self.collaboration_repository.find_active(db, project_id, seen_since)

    def _require_readable_project(
        self, db: DBSession, user_id: UserId, project_id: ProjectId
    ) -> Project:
        project = self.project_repository.find_by_id(db, project_id)
        if project is None:
            raise EntityNotFoundError("project", project_id)
        if not self.authorization.can_read(db, project.workspace_id, user_id, project.is_public):
            raise PermissionDeniedError(
                "Insufficient permissions to join this project",
                workspace_id=project.workspace_id,
            )
        return project

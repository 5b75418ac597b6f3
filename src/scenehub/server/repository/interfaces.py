"""
Repository interfaces defining contracts for data access.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.utils.types import ModelId, ProjectId, UserId, WorkspaceId
from .entities import (
    Project,
    ProjectSettings,
    SceneObject,
    Transform,
    Workspace,
    WorkspaceMember,
    WorkspaceRole,
    WorkspaceSettings,
)


class IWorkspaceRepository(ABC):
    """Interface for workspace data access operations."""

    @abstractmethod
    def create(
        self,
        db: DBSession,
        name: str,
        owner_id: UserId,
        description: Optional[str] = None,
        is_public: bool = False,
        settings: Optional[WorkspaceSettings] = None,
    ) -> Workspace:
        """Insert a workspace row."""
        pass

    @abstractmethod
    def find_by_id(self, db: DBSession, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by its ID."""
        pass

    @abstractmethod
    def find_by_ids(self, db: DBSession, workspace_ids: list[WorkspaceId]) -> dict[str, Workspace]:
        """Resolve several workspaces at once, keyed by ID. Missing IDs are omitted."""
        pass

    @abstractmethod
    def update(
        self, db: DBSession, workspace_id: WorkspaceId, update_data: dict
    ) -> Optional[Workspace]:
        """Apply a partial update; only keys present in update_data change."""
        pass


class IWorkspaceMemberRepository(ABC):
    """Interface for workspace membership data access operations."""

    @abstractmethod
    def find_membership(
        self, db: DBSession, workspace_id: WorkspaceId, user_id: UserId
    ) -> Optional[WorkspaceMember]:
        """Find the unique membership row for a (workspace, user) pair."""
        pass

    @abstractmethod
    def find_by_user(self, db: DBSession, user_id: UserId) -> list[WorkspaceMember]:
        """Find all memberships of a user."""
        pass

    @abstractmethod
    def find_by_workspace(self, db: DBSession, workspace_id: WorkspaceId) -> list[WorkspaceMember]:
        """Find all memberships of a workspace."""
        pass

    @abstractmethod
    def add(
        self,
        db: DBSession,
        workspace_id: WorkspaceId,
        user_id: UserId,
        role: WorkspaceRole,
        invited_by: Optional[UserId] = None,
    ) -> WorkspaceMember:
        """Insert a membership row. Callers must not insert duplicates."""
        pass

    @abstractmethod
    def update_role(
        self, db: DBSession, workspace_id: WorkspaceId, user_id: UserId, role: WorkspaceRole
    ) -> Optional[WorkspaceMember]:
        """Change the role of an existing membership."""
        pass

    @abstractmethod
    def remove(self, db: DBSession, workspace_id: WorkspaceId, user_id: UserId) -> bool:
        """Delete a membership row."""
        pass


class IProjectRepository(ABC):
    """Interface for project data access operations."""

    @abstractmethod
    def create(
        self,
        db: DBSession,
        name: str,
        workspace_id: WorkspaceId,
        created_by: UserId,
        settings: ProjectSettings,
        timestamp: int,
        description: Optional[str] = None,
        is_public: bool = False,
    ) -> Project:
        """Insert a project row stamped with timestamp."""
        pass

    @abstractmethod
    def find_by_id(self, db: DBSession, project_id: ProjectId) -> Optional[Project]:
        """Find a project by its ID."""
        pass

    @abstractmethod
    def find_by_workspace(self, db: DBSession, workspace_id: WorkspaceId) -> list[Project]:
        """Find a workspace's projects, most recently inserted first."""
        pass

    @abstractmethod
    def update(self, db: DBSession, project_id: ProjectId, update_data: dict) -> Optional[Project]:
        """Apply a partial update."""
        pass

    @abstractmethod
    def touch(self, db: DBSession, project_id: ProjectId, user_id: UserId, timestamp: int) -> bool:
        """Stamp last_modified / last_modified_by."""
        pass


class ISceneObjectRepository(ABC):
    """Interface for scene object data access operations."""

    @abstractmethod
    def create(
        self,
        db: DBSession,
        project_id: ProjectId,
        name: str,
        object_type: str,
        transform: Transform,
        created_by: UserId,
        timestamp: int,
        geometry: Optional[dict] = None,
        material: Optional[dict] = None,
        parent_id: Optional[ModelId] = None,
    ) -> SceneObject:
        """Insert a visible, unlocked scene object."""
        pass

    @abstractmethod
    def find_by_id(self, db: DBSession, model_id: ModelId) -> Optional[SceneObject]:
        """Find a scene object by its ID."""
        pass

    @abstractmethod
    def find_by_project(self, db: DBSession, project_id: ProjectId) -> list[SceneObject]:
        """Find all scene objects of a project."""
        pass

    @abstractmethod
    def find_children(self, db: DBSession, parent_id: ModelId) -> list[SceneObject]:
        """Find scene objects whose parent_id equals parent_id."""
        pass

    @abstractmethod
    def update(self, db: DBSession, model_id: ModelId, update_data: dict) -> Optional[SceneObject]:
        """Apply a partial update."""
        pass

    @abstractmethod
    def delete(self, db: DBSession, model_id: ModelId) -> bool:
        """Delete a single scene object row without touching its children."""
        pass

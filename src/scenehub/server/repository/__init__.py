"""
Repository layer containing all data access logic organized by entity type.
"""

from .collaboration_repository import CollaborationRepository
from .interfaces import (
    IProjectRepository,
    ISceneObjectRepository,
    IWorkspaceMemberRepository,
    IWorkspaceRepository,
)
from .material_repository import MaterialRepository
from .models.base import Base
from .project_repository import ProjectRepository
from .project_version_repository import ProjectVersionRepository
from .scene_object_repository import SceneObjectRepository
from .user_repository import UserRepository
from .workspace_repository import WorkspaceMemberRepository, WorkspaceRepository

__all__ = [
    # Interfaces
    "IProjectRepository",
    "ISceneObjectRepository",
    "IWorkspaceMemberRepository",
    "IWorkspaceRepository",
    # Implementations
    "CollaborationRepository",
    "MaterialRepository",
    "ProjectRepository",
    "ProjectVersionRepository",
    "SceneObjectRepository",
    "UserRepository",
    "WorkspaceMemberRepository",
    "WorkspaceRepository",
    # Models
    "Base",
]

"""
SQLAlchemy models for database persistence.
"""

from .base import Base
from .collaboration_session_model import CollaborationSessionModel
from .material_model import MaterialModel
from .project_model import ProjectModel
from .project_version_model import ProjectVersionModel
from .scene_object_model import SceneObjectModel
from .user_model import UserModel
from .workspace_model import WorkspaceMemberModel, WorkspaceModel

__all__ = [
    "Base",
    "CollaborationSessionModel",
    "MaterialModel",
    "ProjectModel",
    "ProjectVersionModel",
    "SceneObjectModel",
    "UserModel",
    "WorkspaceMemberModel",
    "WorkspaceModel",
]

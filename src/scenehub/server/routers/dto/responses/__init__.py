"""
Response DTOs for API endpoints.
"""

from .collaboration_responses import PresenceResponse
from .material_responses import MaterialResponse
from .model_responses import ModelResponse
from .project_responses import ProjectCreatedResponse, ProjectResponse
from .user_responses import UserResponse
from .version_responses import VersionResponse, VersionSummaryResponse
from .workspace_responses import WorkspaceMemberResponse, WorkspaceResponse

__all__ = [
    "MaterialResponse",
    "ModelResponse",
    "PresenceResponse",
    "ProjectCreatedResponse",
    "ProjectResponse",
    "UserResponse",
    "VersionResponse",
    "VersionSummaryResponse",
    "WorkspaceMemberResponse",
    "WorkspaceResponse",
]

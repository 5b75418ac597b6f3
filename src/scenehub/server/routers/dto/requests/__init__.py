"""
Request DTOs for API endpoints.
"""

from .collaboration_requests import HeartbeatRequest
from .material_requests import CreateMaterialRequest, UpdateMaterialRequest
from .model_requests import CreateModelRequest, SetVisibilityRequest, UpdateTransformRequest
from .project_requests import CreateProjectRequest, ProjectSettingsPatch, UpdateProjectRequest
from .user_requests import UpdateProfileRequest
from .version_requests import CreateVersionRequest
from .workspace_requests import (
    AddMemberRequest,
    CreateWorkspaceRequest,
    UpdateMemberRoleRequest,
    UpdateWorkspaceRequest,
)

__all__ = [
    "AddMemberRequest",
    "CreateMaterialRequest",
    "CreateModelRequest",
    "CreateProjectRequest",
    "CreateVersionRequest",
    "CreateWorkspaceRequest",
    "HeartbeatRequest",
    "ProjectSettingsPatch",
    "SetVisibilityRequest",
    "UpdateMaterialRequest",
    "UpdateMemberRoleRequest",
    "UpdateProfileRequest",
    "UpdateProjectRequest",
    "UpdateTransformRequest",
    "UpdateWorkspaceRequest",
]

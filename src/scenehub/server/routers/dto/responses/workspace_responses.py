"""
Workspace and membership response DTOs.
"""

from typing import Optional

from pydantic import Field

from ....repository.entities import WorkspaceRole, WorkspaceSettings
from .base_responses import EntityResponse
from .user_responses import UserResponse


class WorkspaceResponse(EntityResponse):
    """Response DTO for a workspace; role is the caller's role when known."""

    id: str
    name: str
    description: Optional[str] = None
    owner_id: str = Field(alias="ownerId")
    is_public: bool = Field(alias="isPublic")
    settings: Optional[WorkspaceSettings] = None
    role: Optional[WorkspaceRole] = None
    created_at: int = Field(alias="createdAt")
    updated_at: Optional[int] = Field(default=None, alias="updatedAt")


class WorkspaceMemberResponse(EntityResponse):
    id: str
    workspace_id: str = Field(alias="workspaceId")
    user_id: str = Field(alias="userId")
    role: WorkspaceRole
    invited_by: Optional[str] = Field(default=None, alias="invitedBy")
    joined_at: int = Field(alias="joinedAt")
    user: Optional[UserResponse] = None

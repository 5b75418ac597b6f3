"""
Request DTOs for workspace and membership endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....repository.entities import WorkspaceRole, WorkspaceSettings


class CreateWorkspaceRequest(BaseModel):
    """Request to create a new workspace."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, description="Workspace name")
    description: Optional[str] = Field(None, max_length=1000)
    is_public: bool = Field(default=False, alias="isPublic")
    settings: Optional[WorkspaceSettings] = None


class UpdateWorkspaceRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    is_public: Optional[bool] = Field(None, alias="isPublic")
    settings: Optional[WorkspaceSettings] = None


class AddMemberRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., min_length=1, alias="userId")
    role: WorkspaceRole = WorkspaceRole.EDITOR


class UpdateMemberRoleRequest(BaseModel):
    role: WorkspaceRole

"""
Workspace and membership domain entities.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .user import User


class WorkspaceRole(str, Enum):
    """Membership role; the sole authorization signal for workspace resources."""

    OWNER = "owner"
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class DefaultProjectSettings(BaseModel):
    render_quality: str = "medium"
    auto_save: bool = True
    collaboration_mode: str = "realtime"


class WorkspaceSettings(BaseModel):
    default_project_settings: Optional[DefaultProjectSettings] = None


class Workspace(BaseModel):
    """Tenant boundary owning projects, materials and members."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    owner_id: str
    is_public: bool = False
    settings: Optional[WorkspaceSettings] = None
    created_at: int
    updated_at: Optional[int] = None


class WorkspaceWithRole(Workspace):
    """A workspace annotated with the calling user's role."""

    role: WorkspaceRole


class WorkspaceMember(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    workspace_id: str
    user_id: str
    role: WorkspaceRole
    invited_by: Optional[str] = None
    joined_at: int


class WorkspaceMemberWithUser(WorkspaceMember):
    user: User

"""
Project-related response DTOs.
"""

from typing import Optional

from pydantic import Field

from ....repository.entities import GridSettings, RenderSettings
from .base_responses import EntityResponse


class ProjectSettingsResponse(EntityResponse):
    render_settings: RenderSettings = Field(alias="renderSettings")
    grid_settings: GridSettings = Field(alias="gridSettings")


class ProjectResponse(EntityResponse):
    """Response DTO for a project."""

    id: str
    name: str
    description: Optional[str] = None
    workspace_id: str = Field(alias="workspaceId")
    created_by: str = Field(alias="createdBy")
    thumbnail: Optional[str] = None
    is_public: bool = Field(alias="isPublic")
    settings: ProjectSettingsResponse
    last_modified: int = Field(alias="lastModified")
    last_modified_by: str = Field(alias="lastModifiedBy")
    created_at: int = Field(alias="createdAt")


class ProjectCreatedResponse(EntityResponse):
    id: str

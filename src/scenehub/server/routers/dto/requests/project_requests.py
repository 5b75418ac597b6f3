"""
Request DTOs for project endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateProjectRequest(BaseModel):
    """Request to create a new project in a workspace."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    description: Optional[str] = Field(None, max_length=1000, description="Project description")
    workspace_id: str = Field(..., alias="workspaceId")
    is_public: bool = Field(default=False, alias="isPublic")


class RenderSettingsInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quality: str
    lighting: str
    shadows: bool


class GridSettingsInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    visible: bool
    size: float = Field(..., gt=0)
    divisions: int = Field(..., ge=1)


class ProjectSettingsPatch(BaseModel):
    """
    Each provided group replaces the stored group as a whole, so every field
    of a provided group is required.
    """

    model_config = ConfigDict(populate_by_name=True)

    render_settings: Optional[RenderSettingsInput] = Field(None, alias="renderSettings")
    grid_settings: Optional[GridSettingsInput] = Field(None, alias="gridSettings")


class UpdateProjectRequest(BaseModel):
    """Request to update an existing project."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    is_public: Optional[bool] = Field(None, alias="isPublic")
    thumbnail: Optional[str] = None
    settings: Optional[ProjectSettingsPatch] = None

"""
Project domain entity.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderSettings(BaseModel):
    quality: str = "medium"
    lighting: str = "studio"
    shadows: bool = True


class GridSettings(BaseModel):
    visible: bool = True
    size: float = 10
    divisions: int = 10


class ProjectSettings(BaseModel):
    render_settings: RenderSettings = Field(default_factory=RenderSettings)
    grid_settings: GridSettings = Field(default_factory=GridSettings)

    def merged_with(
        self,
        render_settings: Optional[RenderSettings] = None,
        grid_settings: Optional[GridSettings] = None,
    ) -> "ProjectSettings":
        """
        Shallow merge: a provided group replaces the stored group wholesale,
        an omitted group is kept.
        """
        return ProjectSettings(
            render_settings=render_settings or self.render_settings,
            grid_settings=grid_settings or self.grid_settings,
        )


class Project(BaseModel):
    """A single 3D scene scoped to one workspace."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    workspace_id: str
    created_by: str
    thumbnail: Optional[str] = None
    is_public: bool = False
    settings: ProjectSettings = Field(default_factory=ProjectSettings)
    last_modified: int
    last_modified_by: str
    created_at: int

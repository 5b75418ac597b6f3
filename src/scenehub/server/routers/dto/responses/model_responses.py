"""
Scene object ("model") response DTOs.
"""

from typing import Optional

from pydantic import Field

from ....repository.entities import Geometry, Material, Transform
from .base_responses import EntityResponse


class ModelResponse(EntityResponse):
    id: str
    project_id: str = Field(alias="projectId")
    name: str
    type: str
    transform: Transform
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    visible: bool
    locked: bool
    created_by: str = Field(alias="createdBy")
    last_modified: int = Field(alias="lastModified")
    last_modified_by: str = Field(alias="lastModifiedBy")
    created_at: int = Field(alias="createdAt")

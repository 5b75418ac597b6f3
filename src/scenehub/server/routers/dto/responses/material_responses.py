"""
Material library response DTOs.
"""

from typing import Optional

from pydantic import Field

from ....repository.entities import Material
from .base_responses import EntityResponse


class MaterialResponse(EntityResponse):
    id: str
    name: str
    workspace_id: str = Field(alias="workspaceId")
    material: Material
    created_by: str = Field(alias="createdBy")
    is_public: bool = Field(alias="isPublic")
    created_at: int = Field(alias="createdAt")
    updated_at: Optional[int] = Field(default=None, alias="updatedAt")

"""
Request DTOs for material library endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....repository.entities import Material


class CreateMaterialRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    material: Material
    is_public: bool = Field(default=False, alias="isPublic")


class UpdateMaterialRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    material: Optional[Material] = None
    is_public: Optional[bool] = Field(None, alias="isPublic")

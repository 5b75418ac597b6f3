"""
Request DTOs for scene object ("model") endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....repository.entities import Geometry, Material, Transform, Vector3


class CreateModelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_id: str = Field(..., alias="projectId")
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=64, description="mesh, light, camera, empty, ...")
    transform: Optional[Transform] = None
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None
    parent_id: Optional[str] = Field(None, alias="parentId")


class TransformInput(BaseModel):
    """Full transform as sent by clients; no vector falls back to a default."""

    model_config = ConfigDict(extra="forbid")

    position: Vector3
    rotation: Vector3
    scale: Vector3

    def to_transform(self) -> Transform:
        return Transform(position=self.position, rotation=self.rotation, scale=self.scale)


class UpdateTransformRequest(BaseModel):
    """All three vectors are required; partial transforms are rejected."""

    transform: TransformInput


class SetVisibilityRequest(BaseModel):
    visible: bool

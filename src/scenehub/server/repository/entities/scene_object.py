"""
Scene object ("model") domain entity.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .geometry import Geometry
from .material import Material
from .transform import Transform


class SceneObject(BaseModel):
    """
    A mesh, light, camera or empty within a project.

    ``type`` is an open string. ``parent_id`` is a back reference only: it is
    never followed for ownership and is left dangling when the parent is removed.
    ``visible`` and ``locked`` are independent flags; locking is advisory.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    name: str = Field(..., min_length=1, max_length=255)
    type: str
    transform: Transform = Field(default_factory=Transform)
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None
    parent_id: Optional[str] = None
    visible: bool = True
    locked: bool = False
    created_by: str
    last_modified: int
    last_modified_by: str
    created_at: int

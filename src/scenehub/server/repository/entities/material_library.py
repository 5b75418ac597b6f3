"""
Material library entry: a named, reusable material scoped to a workspace.

Entries are independent of the inline materials stored on scene objects;
assigning a library material to a model copies it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .material import Material


class MaterialLibraryEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str = Field(..., min_length=1, max_length=255)
    workspace_id: str
    material: Material
    created_by: str
    is_public: bool = False
    created_at: int
    updated_at: Optional[int] = None

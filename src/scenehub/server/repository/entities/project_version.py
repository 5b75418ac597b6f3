"""
Project version entity: an immutable snapshot of a project and its models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProjectVersion(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    project_id: str
    version_number: int
    name: str
    description: Optional[str] = None
    data: str
    created_by: str
    thumbnail: Optional[str] = None
    created_at: int

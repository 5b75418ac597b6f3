"""
Project version response DTOs.
"""

from typing import Optional

from pydantic import Field

from .base_responses import EntityResponse


class VersionSummaryResponse(EntityResponse):
    """Version metadata without the snapshot payload."""

    id: str
    project_id: str = Field(alias="projectId")
    version_number: int = Field(alias="versionNumber")
    name: str
    description: Optional[str] = None
    created_by: str = Field(alias="createdBy")
    thumbnail: Optional[str] = None
    created_at: int = Field(alias="createdAt")


class VersionResponse(VersionSummaryResponse):
    data: str

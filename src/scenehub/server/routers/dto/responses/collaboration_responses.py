"""
Presence response DTOs.
"""

from typing import Optional

from pydantic import Field

from ....repository.entities import Cursor
from .base_responses import EntityResponse


class PresenceResponse(EntityResponse):
    id: str
    project_id: str = Field(alias="projectId")
    user_id: str = Field(alias="userId")
    cursor: Optional[Cursor] = None
    is_active: bool = Field(alias="isActive")
    last_seen: int = Field(alias="lastSeen")

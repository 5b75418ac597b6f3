"""
Collaboration presence entity.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .transform import Vector3


class Cursor(BaseModel):
    position: Vector3
    target: Optional[str] = None


class CollaborationSession(BaseModel):
    """Per-user, per-project liveness record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    user_id: str
    cursor: Optional[Cursor] = None
    is_active: bool
    last_seen: int

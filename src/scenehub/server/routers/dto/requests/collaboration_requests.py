"""
Request DTOs for presence endpoints.
"""

from typing import Optional

from pydantic import BaseModel

from ....repository.entities import Cursor


class HeartbeatRequest(BaseModel):
    cursor: Optional[Cursor] = None

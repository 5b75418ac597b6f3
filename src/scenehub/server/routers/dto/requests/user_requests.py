"""
Request DTOs for user profile endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=320)

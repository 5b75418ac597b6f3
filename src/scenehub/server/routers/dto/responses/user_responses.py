"""
User profile response DTOs.
"""

from typing import Optional

from pydantic import Field

from .base_responses import EntityResponse


class UserResponse(EntityResponse):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    updated_at: Optional[int] = Field(default=None, alias="updatedAt")

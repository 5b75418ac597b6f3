"""
Request DTOs for project version endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CreateVersionRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Version label")
    description: Optional[str] = Field(None, max_length=1000)

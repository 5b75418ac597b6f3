"""
User profile entity. Identity itself comes from the upstream provider.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    created_at: int
    updated_at: int

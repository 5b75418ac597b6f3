"""
Base response class for DTOs built from domain entities.
"""

from pydantic import BaseModel, ConfigDict


class EntityResponse(BaseModel):
    """
    Responses are validated straight from entities by field name and
    serialized with their camelCase aliases.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

"""
Error response DTO returned by the exception handlers.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx response produced by SceneHub handlers."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    validation_details: Optional[Dict[str, List[str]]] = Field(
        default=None, alias="validationDetails"
    )

    @classmethod
    def create(
        cls, message: str, validation_details: Optional[Dict[str, List[str]]] = None
    ) -> "ErrorResponse":
        return cls(message=message, validation_details=validation_details or None)

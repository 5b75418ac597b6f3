"""
Transform value object: position, Euler rotation and scale of a scene object.
"""

from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

Vector3 = Annotated[List[float], Field(min_length=3, max_length=3)]


def _zeros() -> List[float]:
    return [0.0, 0.0, 0.0]


def _ones() -> List[float]:
    return [1.0, 1.0, 1.0]


class Transform(BaseModel):
    """
    Local transform of a scene object.

    Rotation is Euler angles in radians. Vectors are stored exactly as given;
    no reordering or unit conversion takes place.
    """

    model_config = ConfigDict(extra="forbid")

    position: Vector3 = Field(default_factory=_zeros)
    rotation: Vector3 = Field(default_factory=_zeros)
    scale: Vector3 = Field(default_factory=_ones)

"""
Geometry definitions for mesh scene objects.

Each known geometry ``type`` has its own parameter schema so malformed
parameters are rejected when a model is created, not when it is rendered.
The wire shape stays ``{"type": ..., "parameters": {...}}`` with the raw
buffers of custom meshes alongside.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveFloat,
    TypeAdapter,
    model_validator,
)


class _Parameters(BaseModel):
    model_config = ConfigDict(extra="forbid")


class BoxParameters(_Parameters):
    width: PositiveFloat = 1.0
    height: PositiveFloat = 1.0
    depth: PositiveFloat = 1.0


class SphereParameters(_Parameters):
    radius: PositiveFloat = 0.5
    width_segments: int = Field(default=32, ge=3)
    height_segments: int = Field(default=16, ge=2)


class CylinderParameters(_Parameters):
    radius_top: float = Field(default=0.5, ge=0)
    radius_bottom: float = Field(default=0.5, ge=0)
    height: PositiveFloat = 1.0
    radial_segments: int = Field(default=32, ge=3)

    @model_validator(mode="after")
    def _not_degenerate(self) -> "CylinderParameters":
        if self.radius_top == 0 and self.radius_bottom == 0:
            raise ValueError("radius_top and radius_bottom cannot both be zero")
        return self


class PlaneParameters(_Parameters):
    width: PositiveFloat = 1.0
    height: PositiveFloat = 1.0


class BoxGeometry(BaseModel):
    type: Literal["box"] = "box"
    parameters: BoxParameters = Field(default_factory=BoxParameters)


class SphereGeometry(BaseModel):
    type: Literal["sphere"] = "sphere"
    parameters: SphereParameters = Field(default_factory=SphereParameters)


class CylinderGeometry(BaseModel):
    type: Literal["cylinder"] = "cylinder"
    parameters: CylinderParameters = Field(default_factory=CylinderParameters)


class PlaneGeometry(BaseModel):
    type: Literal["plane"] = "plane"
    parameters: PlaneParameters = Field(default_factory=PlaneParameters)


class CustomGeometry(BaseModel):
    """Raw triangle mesh: flat xyz vertex list and vertex-index triples."""

    type: Literal["custom"] = "custom"
    parameters: Dict[str, Any] = Field(default_factory=dict)
    vertices: List[float]
    faces: List[NonNegativeInt]
    normals: Optional[List[float]] = None
    uvs: Optional[List[float]] = None

    @model_validator(mode="after")
    def _check_buffers(self) -> "CustomGeometry":
        if not self.vertices or len(self.vertices) % 3:
            raise ValueError("vertices must be a non-empty list of xyz triples")
        if len(self.faces) % 3:
            raise ValueError("faces must be a list of vertex index triples")

        vertex_count = len(self.vertices) // 3
        if self.faces and max(self.faces) >= vertex_count:
            raise ValueError("faces reference a vertex index out of range")
        if self.normals is not None and len(self.normals) != len(self.vertices):
            raise ValueError("normals must provide one xyz triple per vertex")
        if self.uvs is not None and len(self.uvs) != vertex_count * 2:
            raise ValueError("uvs must provide one uv pair per vertex")
        return self


Geometry = Annotated[
    Union[BoxGeometry, SphereGeometry, CylinderGeometry, PlaneGeometry, CustomGeometry],
    Field(discriminator="type"),
]

GEOMETRY_ADAPTER: TypeAdapter = TypeAdapter(Geometry)


def parse_geometry(data: Optional[dict]) -> Optional[Geometry]:
    """Validate a stored or submitted geometry dict; None passes through."""
    if data is None:
        return None
    return GEOMETRY_ADAPTER.validate_python(data)

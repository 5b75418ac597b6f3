"""
Material definitions shared by inline model materials and the material library.

Known material ``type`` values each carry a typed property set. Texture slots
map a slot name (albedo, normal, roughness, ...) to a storage reference.
"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

UnitFloat = Annotated[float, Field(ge=0.0, le=1.0)]


def _white() -> List[float]:
    return [1.0, 1.0, 1.0, 1.0]


def _black_rgb() -> List[float]:
    return [0.0, 0.0, 0.0]


def normalize_color(value: List[float], with_alpha: bool = True) -> List[float]:
    """Validate an RGB(A) color in [0, 1]; RGB gets an opaque alpha appended."""
    if len(value) not in (3, 4):
        raise ValueError("color must have 3 (rgb) or 4 (rgba) components")
    if any(c < 0.0 or c > 1.0 for c in value):
        raise ValueError("color components must be within [0, 1]")
    color = [float(c) for c in value]
    if with_alpha and len(color) == 3:
        color.append(1.0)
    return color


class _Properties(BaseModel):
    model_config = ConfigDict(extra="forbid")


class BasicProperties(_Properties):
    color: List[float] = Field(default_factory=_white)
    wireframe: bool = False

    @field_validator("color")
    @classmethod
    def _color(cls, value: List[float]) -> List[float]:
        return normalize_color(value)


class StandardProperties(_Properties):
    color: List[float] = Field(default_factory=_white)
    roughness: UnitFloat = 0.5
    metalness: UnitFloat = 0.0

    @field_validator("color")
    @classmethod
    def _color(cls, value: List[float]) -> List[float]:
        return normalize_color(value)


class PbrProperties(_Properties):
    base_color: List[float] = Field(default_factory=_white)
    metallic: UnitFloat = 0.0
    roughness: UnitFloat = 0.5
    normal: float = Field(default=1.0, ge=0.0, description="Normal map strength")
    emission: List[float] = Field(default_factory=_black_rgb)
    transparency: UnitFloat = 0.0

    @field_validator("base_color")
    @classmethod
    def _base_color(cls, value: List[float]) -> List[float]:
        return normalize_color(value)

    @field_validator("emission")
    @classmethod
    def _emission(cls, value: List[float]) -> List[float]:
        if len(value) != 3:
            raise ValueError("emission must be an rgb triple")
        return normalize_color(value, with_alpha=False)


TextureSlots = Dict[str, str]


class BasicMaterial(BaseModel):
    type: Literal["basic"] = "basic"
    properties: BasicProperties = Field(default_factory=BasicProperties)
    textures: Optional[TextureSlots] = None


class StandardMaterial(BaseModel):
    type: Literal["standard"] = "standard"
    properties: StandardProperties = Field(default_factory=StandardProperties)
    textures: Optional[TextureSlots] = None


class PbrMaterial(BaseModel):
    type: Literal["pbr"] = "pbr"
    properties: PbrProperties = Field(default_factory=PbrProperties)
    textures: Optional[TextureSlots] = None


Material = Annotated[
    Union[BasicMaterial, StandardMaterial, PbrMaterial],
    Field(discriminator="type"),
]

MATERIAL_ADAPTER: TypeAdapter = TypeAdapter(Material)


def parse_material(data: Optional[dict]) -> Optional[Material]:
    """Validate a stored or submitted material dict; None passes through."""
    if data is None:
        return None
    return MATERIAL_ADAPTER.validate_python(data)

"""Light sources and material kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "LightType",
    "DirectionalLight",
    "PointLight",
    "SpotLight",
    "MaterialType",
    "Material",
]

Vec3 = tuple[float, float, float]


def _vec3(value) -> Vec3:
    components = tuple(float(c) for c in value)
    if len(components) != 3:
        raise ValueError(f"expected 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


class LightType(Enum):
    DIRECTIONAL = "directional"
    POINT = "point"
    SPOT = "spot"

    def __str__(self) -> str:
        return self.value


@dataclass
class DirectionalLight:
    direction: Vec3
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    type: LightType = field(default=LightType.DIRECTIONAL, init=False)

    def __post_init__(self) -> None:
        self.direction = _vec3(self.direction)
        self.color = _vec3(self.color)


@dataclass
class PointLight:
    position: Vec3
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    attn_constant: float = 1.0
    attn_linear: float = 0.0
    attn_quadratic: float = 0.0
    type: LightType = field(default=LightType.POINT, init=False)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.color = _vec3(self.color)


@dataclass
class SpotLight:
    position: Vec3
    direction: Vec3
    inner_cutoff_angle: float
    outer_cutoff_angle: float
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    attn_constant: float = 1.0
    attn_linear: float = 0.0
    attn_quadratic: float = 0.0
    type: LightType = field(default=LightType.SPOT, init=False)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.direction = _vec3(self.direction)
        self.color = _vec3(self.color)


class MaterialType(Enum):
    BASIC = "Basic"
    LAMBERT = "Lambert"
    PHONG = "Phong"
    PBR = "Pbr"

    def __str__(self) -> str:
        return self.value


@dataclass
class Material:
    type: MaterialType = MaterialType.BASIC

    def __str__(self) -> str:
        return ""
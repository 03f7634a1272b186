"""Factories for cylinders, capsules and arrows built on :class:`Geometry`."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import pairwise

import numpy as np

from rendercore.geometry import Axis, Geometry, rotate_to_match_up_axis
from rendercore.transforms import normalize

__all__ = ["create_cylinder", "create_capsule", "create_arrow"]

_ARROW_DIVISIONS = 10
_Z = np.array([0.0, 0.0, 1.0])


@dataclass
class _MeshBuilder:
    positions: list[np.ndarray] = field(default_factory=list)
    normals: list[np.ndarray] = field(default_factory=list)
    uvs: list[tuple[float, float]] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    def add_vertex(self, position, normal, uv) -> None:
        self.positions.append(np.asarray(position, dtype=np.float64))
        self.normals.append(np.asarray(normal, dtype=np.float64))
        self.uvs.append((float(uv[0]), float(uv[1])))

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self.indices.extend((a, b, c))

    def build(self) -> Geometry:
        return Geometry(self.positions, self.normals, self.uvs, self.indices)


def _require_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {value}")


def _require_divisions(name: str, value: int, minimum: int) -> None:
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")


def _circle(radius: float, n_div: int, closed: bool = True) -> list[np.ndarray]:
    """Points of a circle in the xy plane; a closed circle repeats its first point."""
    count = n_div + 1 if closed else n_div
    return [
        np.array(
            [
                radius * math.cos(2.0 * math.pi * i / n_div),
                radius * math.sin(2.0 * math.pi * i / n_div),
                0.0,
            ]
        )
        for i in range(count)
    ]


def _disc_uv(point: np.ndarray, radius: float) -> tuple[float, float]:
    return 0.5 * (1.0 + point[0] / radius), 0.5 * (1.0 + point[1] / radius)


def _add_disc(
    builder: _MeshBuilder,
    section: list[np.ndarray],
    z: float,
    radius: float,
    axis: Axis,
    facing_up: bool,
) -> None:
    """A triangle-fan disc; ``section`` holds one point per division."""
    start = len(builder)
    offset = np.array([0.0, 0.0, z])
    normal = rotate_to_match_up_axis(_Z if facing_up else -_Z, axis)
    for point in section:
        builder.add_vertex(
            rotate_to_match_up_axis(point + offset, axis), normal, _disc_uv(point, radius)
        )
    for i in range(1, len(section) - 1):
        if facing_up:
            builder.add_triangle(start, start + i, start + i + 1)
        else:
            builder.add_triangle(start, start + i + 1, start + i)


def _add_tube(
    builder: _MeshBuilder,
    section: list[np.ndarray],
    z_low: float,
    z_high: float,
    axis: Axis,
) -> None:
    """Side surface between two copies of a closed section, one quad per division."""
    n_div = len(section) - 1
    low = np.array([0.0, 0.0, z_low])
    high = np.array([0.0, 0.0, z_high])
    for i, (a, b) in enumerate(pairwise(section)):
        start = len(builder)
        n_a = rotate_to_match_up_axis(normalize(a), axis)
        n_b = rotate_to_match_up_axis(normalize(b), axis)
        u0, u1 = i / n_div, (i + 1) / n_div
        builder.add_vertex(rotate_to_match_up_axis(a + low, axis), n_a, (u0, 0.0))
        builder.add_vertex(rotate_to_match_up_axis(b + low, axis), n_b, (u1, 0.0))
        builder.add_vertex(rotate_to_match_up_axis(b + high, axis), n_b, (u1, 1.0))
        builder.add_vertex(rotate_to_match_up_axis(a + high, axis), n_a, (u0, 1.0))
        builder.add_triangle(start, start + 1, start + 2)
        builder.add_triangle(start, start + 2, start + 3)


def _add_cap(
    builder: _MeshBuilder,
    radius: float,
    n_div1: int,
    n_div2: int,
    offset: np.ndarray,
    flipped: bool,
) -> None:
    """A whole UV sphere shifted by ``offset``, used as a capsule end."""
    start = len(builder)
    for i in range(n_div1 + 1):
        u = i / n_div1
        theta = 2.0 * math.pi * u
        cos_theta, sin_theta = math.cos(theta), math.sin(theta)
        for j in range(n_div2 + 1):
            v = j / n_div2
            phi = math.pi * (v - 0.5)
            cos_phi, sin_phi = math.cos(phi), math.sin(phi)
            vertex = np.array(
                [radius * cos_theta * cos_phi, radius * sin_theta * cos_phi, radius * sin_phi]
            )
            if j == n_div2:
                v_offset = -0.5 / n_div1
            elif j == 0:
                v_offset = 0.5 / n_div1
            else:
                v_offset = 0.0
            builder.add_vertex(vertex + offset, normalize(vertex), (u, v + v_offset))

    row = n_div2 + 1
    for i in range(n_div1):
        for j in range(n_div2):
            idx0 = start + i * row + j
            idx1 = start + (i + 1) * row + j
            idx2 = start + (i + 1) * row + j + 1
            idx3 = start + i * row + j + 1
            if flipped:
                builder.add_triangle(idx0, idx2, idx1)
                if j != n_div2 - 1:
                    builder.add_triangle(idx0, idx3, idx2)
            else:
                builder.add_triangle(idx0, idx1, idx2)
                if j != n_div2 - 1:
                    builder.add_triangle(idx0, idx2, idx3)


def create_cylinder(
    radius: float, height: float, axis: Axis = Axis.Z, n_div: int = 20
) -> Geometry:
    """A closed cylinder centred at the origin, its axis along ``axis``."""
    _require_positive("radius", radius)
    _require_divisions("n_div", n_div, 3)
    section = _circle(radius, n_div)
    builder = _MeshBuilder()
    _add_disc(builder, section[:-1], 0.5 * height, radius, axis, facing_up=True)
    _add_tube(builder, section, -0.5 * height, 0.5 * height, axis)
    _add_disc(builder, section[:-1], -0.5 * height, radius, axis, facing_up=False)
    return builder.build()


def create_capsule(
    radius: float,
    height: float,
    axis: Axis = Axis.Z,
    n_div1: int = 20,
    n_div2: int = 20,
) -> Geometry:
    """A cylinder of the given height capped by two spheres of the given radius."""
    _require_positive("radius", radius)
    _require_divisions("n_div1", n_div1, 1)
    _require_divisions("n_div2", n_div2, 1)
    offset = rotate_to_match_up_axis((0.0, 0.0, 0.5 * height), axis)
    builder = _MeshBuilder()
    _add_cap(builder, radius, n_div1, n_div2, offset, flipped=False)
    _add_tube(builder, _circle(radius, n_div1), -0.5 * height, 0.5 * height, axis)
    _add_cap(builder, radius, n_div1, n_div2, -offset, flipped=True)
    return builder.build()


def create_arrow(length: float, axis: Axis = Axis.Z) -> Geometry:
    """An arrow from the origin to ``length`` along ``axis``: shaft plus cone."""
    _require_positive("length", length)
    n_div = _ARROW_DIVISIONS
    radius_cylinder = 0.05 * length
    length_cylinder = 0.8 * length
    radius_cone = 0.075 * length
    length_cone = 0.2 * length

    builder = _MeshBuilder()
    section = _circle(radius_cylinder, n_div)
    _add_disc(builder, section[:-1], 0.0, radius_cylinder, axis, facing_up=False)
    _add_tube(builder, section, 0.0, length_cylinder, axis)

    cone_out = _circle(radius_cone, n_div, closed=False)
    cone_in = _circle(radius_cylinder, n_div, closed=False)
    lift = np.array([0.0, 0.0, length_cylinder])
    apex = rotate_to_match_up_axis((0.0, 0.0, length_cylinder + length_cone), axis)
    apex_normal = normalize(rotate_to_match_up_axis(_Z, axis))
    count = len(cone_out)

    for i in range(count):
        start = len(builder)
        builder.add_triangle(start, start + 1, start + 2)
        current, following = cone_out[i], cone_out[(i + 1) % count]
        builder.add_vertex(
            rotate_to_match_up_axis(current + lift, axis),
            normalize(rotate_to_match_up_axis(current, axis)),
            (i / count, 1.0),
        )
        builder.add_vertex(
            rotate_to_match_up_axis(following + lift, axis),
            normalize(rotate_to_match_up_axis(following, axis)),
            ((i + 1) / count, 1.0),
        )
        builder.add_vertex(apex, apex_normal, (i / count, 0.0))

    # The ring closing the cone's base keeps the source's unnormalised normal.
    ring_normal = rotate_to_match_up_axis((0.0, 0.0, -1.05), axis)
    for i in range(count):
        nxt = (i + 1) % count
        start = len(builder)
        for point in (cone_out[i], cone_in[i], cone_in[nxt], cone_out[nxt]):
            builder.add_vertex(
                rotate_to_match_up_axis(point + lift, axis),
                ring_normal,
                _disc_uv(point, radius_cone),
            )
        builder.add_triangle(start, start + 2, start + 1)
        builder.add_triangle(start, start + 3, start + 2)

    return builder.build()
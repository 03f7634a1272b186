"""Triangle mesh geometry and factories for basic shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from rendercore.buffer_layout import BufferElement, BufferLayout
from rendercore.enums import BufferUsage, ElementType, element_count
from rendercore.transforms import normalize

__all__ = [
    "Axis",
    "Geometry",
    "rotate_to_match_up_axis",
    "create_plane",
    "create_box",
    "create_sphere",
    "create_ellipsoid",
]


class Axis(Enum):
    """Axis a shape's local +z direction is mapped onto."""

    X = "x"
    Y = "y"
    Z = "z"

    def __str__(self) -> str:
        return self.value


@dataclass
class _AttributeBuffer:
    layout: BufferLayout
    usage: BufferUsage
    data: np.ndarray


class Geometry:
    """Indexed vertex data: one buffer per attribute plus an index buffer."""

    def __init__(self, positions, normals, uvs, indices) -> None:
        if len(positions) == 0:
            raise ValueError("a geometry needs at least one vertex")
        self._indices = np.zeros(0, dtype=np.uint32)
        self._index_usage = BufferUsage.STATIC
        self._attributes: dict[str, _AttributeBuffer] = {}
        self.set_indices(indices)
        self.set_attribute("position", ElementType.FLOAT_3, positions, False)
        self.set_attribute("normal", ElementType.FLOAT_3, normals, True)
        self.set_attribute("uvs", ElementType.FLOAT_2, uvs, False)

    def set_indices(self, data, usage: BufferUsage = BufferUsage.STATIC) -> None:
        """Replace the index buffer."""
        raw = np.asarray(data, dtype=np.int64).ravel()
        if raw.size and raw.min() < 0:
            raise ValueError("indices must be non-negative")
        self._indices = raw.astype(np.uint32)
        self._index_usage = usage

    def set_attribute(
        self,
        name: str,
        etype: ElementType,
        data,
        normalized: bool = False,
        usage: BufferUsage = BufferUsage.STATIC,
    ) -> None:
        """Store a per-vertex attribute buffer under ``name``."""
        flat = np.asarray(data, dtype=np.float32).ravel()
        count = element_count(etype)
        if flat.size % count:
            raise ValueError(
                f"attribute '{name}' holds {flat.size} values, "
                f"not a multiple of {count} ({etype})"
            )
        layout = BufferLayout([BufferElement(name, etype, normalized)])
        self._attributes[name] = _AttributeBuffer(layout, usage, flat.reshape(-1, count))

    @property
    def indices(self) -> np.ndarray:
        return self._indices.copy()

    @property
    def index_usage(self) -> BufferUsage:
        return self._index_usage

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    def attribute(self, name: str) -> np.ndarray:
        """Rows of the named attribute, one per vertex."""
        return self._attributes[name].data.copy()

    def layout(self, name: str) -> BufferLayout:
        return self._attributes[name].layout

    def usage(self, name: str) -> BufferUsage:
        return self._attributes[name].usage

    @property
    def positions(self) -> np.ndarray:
        return self.attribute("position")

    @property
    def normals(self) -> np.ndarray:
        return self.attribute("normal")

    @property
    def uvs(self) -> np.ndarray:
        return self.attribute("uvs")

    @property
    def vertex_count(self) -> int:
        return len(self._attributes["position"].data)

    def __str__(self) -> str:
        return (
            f"Geometry(vertices={self.vertex_count}, indices={len(self._indices)}, "
            f"attributes={list(self._attributes)})"
        )


def rotate_to_match_up_axis(vec, axis: Axis) -> np.ndarray:
    """Permute the components of ``vec`` so local +z lines up with ``axis``."""
    x, y, z = (float(c) for c in vec)
    if axis is Axis.X:
        return np.array([y, z, x])
    if axis is Axis.Y:
        return np.array([z, x, y])
    return np.array([x, y, z])


def create_plane(width: float, depth: float, axis: Axis = Axis.Z) -> Geometry:
    """A rectangle of the given size, centred at the origin."""
    hw, hd = 0.5 * width, 0.5 * depth
    corners = [(hw, -hd, 0.0), (hw, hd, 0.0), (-hw, hd, 0.0), (-hw, -hd, 0.0)]
    positions = [rotate_to_match_up_axis(c, axis) for c in corners]
    normal = rotate_to_match_up_axis((0.0, 0.0, 1.0), axis)
    normals = [normal] * 4
    uvs = [(0.0, 0.0), (hw, 0.0), (hw, hd), (0.0, hd)]
    return Geometry(positions, normals, uvs, [0, 1, 2, 0, 2, 3])


_BOX_FACE_NORMALS = (
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
)


def create_box(width: float, depth: float, height: float) -> Geometry:
    """An axis-aligned box centred at the origin, four vertices per face."""
    scale = np.array([0.5 * width, 0.5 * depth, 0.5 * height])
    positions: list[np.ndarray] = []
    normals: list[np.ndarray] = []
    uvs: list[tuple[float, float]] = []
    indices: list[int] = []
    for normal in _BOX_FACE_NORMALS:
        n = np.array(normal)
        base = len(positions)
        indices.extend([base, base + 1, base + 2, base, base + 2, base + 3])
        # Right-handed frame on the face plane.
        s1 = np.array([n[1], n[2], n[0]])
        s2 = np.cross(n, s1)
        positions.extend(
            [
                (n - s1 - s2) * scale,
                (n + s1 - s2) * scale,
                (n + s1 + s2) * scale,
                (n - s1 + s2) * scale,
            ]
        )
        uvs.extend([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        normals.extend([n] * 4)
    return Geometry(positions, normals, uvs, indices)


def _check_divisions(*divisions: int) -> None:
    for div in divisions:
        if div < 1:
            raise ValueError(f"number of divisions must be at least 1, got {div}")


def _uv_ellipsoid(rx: float, ry: float, rz: float, n_div1: int, n_div2: int) -> Geometry:
    _check_divisions(n_div1, n_div2)
    positions: list[np.ndarray] = []
    normals: list[np.ndarray] = []
    uvs: list[tuple[float, float]] = []
    for i in range(n_div1 + 1):
        u = i / n_div1
        theta = 2.0 * math.pi * u
        cos_theta, sin_theta = math.cos(theta), math.sin(theta)
        for j in range(n_div2 + 1):
            v = j / n_div2
            phi = math.pi * (v - 0.5)
            cos_phi, sin_phi = math.cos(phi), math.sin(phi)
            vertex = np.array(
                [rx * cos_theta * cos_phi, ry * sin_theta * cos_phi, rz * sin_phi]
            )
            positions.append(vertex)
            normals.append(normalize(vertex))
            if j == n_div2:
                v_offset = -0.5 / n_div1
            elif j == 0:
                v_offset = 0.5 / n_div1
            else:
                v_offset = 0.0
            uvs.append((u, v + v_offset))

    indices: list[int] = []
    row = n_div2 + 1
    for i in range(n_div1):
        for j in range(n_div2):
            idx0 = i * row + j
            idx1 = (i + 1) * row + j
            idx2 = (i + 1) * row + j + 1
            idx3 = i * row + j + 1
            if j != 0:
                indices.extend([idx0, idx1, idx2])
            if j != n_div2 - 1:
                indices.extend([idx0, idx2, idx3])
    return Geometry(positions, normals, uvs, indices)


def create_sphere(radius: float, n_div1: int, n_div2: int) -> Geometry:
    """A UV sphere: ``n_div1`` slices around z, ``n_div2`` stacks pole to pole."""
    return _uv_ellipsoid(radius, radius, radius, n_div1, n_div2)


def create_ellipsoid(
    radius_x: float, radius_y: float, radius_z: float, n_div1: int, n_div2: int
) -> Geometry:
    """A UV-tessellated ellipsoid with the given semi-axes."""
    return _uv_ellipsoid(radius_x, radius_y, radius_z, n_div1, n_div2)
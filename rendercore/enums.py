"""Graphics enumerations and vertex element metrics."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "GraphicsAPI",
    "WindowBackend",
    "ShaderType",
    "ElementType",
    "BufferUsage",
    "element_size",
    "element_count",
]


class _LabelledEnum(Enum):
    """Enum whose string form is its label."""

    def __str__(self) -> str:
        return self.value


class GraphicsAPI(_LabelledEnum):
    NONE = "none"
    OPENGL = "opengl"
    VULKAN = "vulkan"
    DIRECTX11 = "directx11"
    DIRECTX12 = "directx12"


class WindowBackend(_LabelledEnum):
    NONE = "none"
    GLFW = "glfw"
    EGL = "egl"


class ShaderType(_LabelledEnum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"
    GEOMETRY = "geometry"
    COMPUTE = "compute"


class ElementType(_LabelledEnum):
    FLOAT_1 = "Float1"
    FLOAT_2 = "Float2"
    FLOAT_3 = "Float3"
    FLOAT_4 = "Float4"
    INT_1 = "Int1"
    INT_2 = "Int2"
    INT_3 = "Int3"
    INT_4 = "Int4"


_ELEMENT_COUNTS = {
    ElementType.FLOAT_1: 1,
    ElementType.FLOAT_2: 2,
    ElementType.FLOAT_3: 3,
    ElementType.FLOAT_4: 4,
    ElementType.INT_1: 1,
    ElementType.INT_2: 2,
    ElementType.INT_3: 3,
    ElementType.INT_4: 4,
}

# Every scalar component (float32 or int32) takes four bytes.
_COMPONENT_BYTES = 4


class BufferUsage(_LabelledEnum):
    STATIC = "Static"
    DYNAMIC = "Dynamic"

    @property
    def gl_enum(self) -> int:
        """The OpenGL usage hint matching this usage."""
        return _GL_USAGE[self]


_GL_USAGE = {
    BufferUsage.STATIC: 0x88E4,  # GL_STATIC_DRAW
    BufferUsage.DYNAMIC: 0x88E8,  # GL_DYNAMIC_DRAW
}


def element_count(etype: ElementType) -> int:
    """Number of scalar components in an element of the given type."""
    return _ELEMENT_COUNTS[etype]


def element_size(etype: ElementType) -> int:
    """Size in bytes of an element of the given type."""
    return _COMPONENT_BYTES * element_count(etype)
"""Texture pixel data and the sampling state of a texture."""

from __future__ import annotations

import itertools
import logging
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image

__all__ = [
    "TextureFormat",
    "StorageType",
    "TextureWrap",
    "TextureFilter",
    "TextureIntFormat",
    "TextureData",
    "Texture",
]

logger = logging.getLogger(__name__)


class _GLEnum(Enum):
    """Enum whose string form is its label and which maps to an OpenGL enum."""

    def __str__(self) -> str:
        return self.value

    @property
    def gl_enum(self) -> int:
        """The matching OpenGL enum value."""
        return _GL_ENUMS[self]


class TextureFormat(_GLEnum):
    RGB = "rgb"
    RGBA = "rgba"
    BGRA = "bgra"
    DEPTH = "depth"
    STENCIL = "stencil"


class StorageType(_GLEnum):
    UINT_8 = "uint_8"
    UINT_32 = "uint_32"
    FLOAT_32 = "float_32"


class TextureWrap(_GLEnum):
    REPEAT = "repeat"
    REPEAT_MIRROR = "repeat_mirror"
    CLAMP_TO_EDGE = "clamp_to_edge"
    CLAMP_TO_BORDER = "clamp_to_border"


class TextureFilter(_GLEnum):
    NEAREST = "nearest"
    LINEAR = "linear"
    NEAREST_MIPMAP_NEAREST = "nearest_mipmap_nearest"
    LINEAR_MIPMAP_NEAREST = "linear_mipmap_nearest"
    NEAREST_MIPMAP_LINEAR = "nearest_mipmap_linear"
    LINEAR_MIPMAP_LINEAR = "linear_mipmap_linear"


class TextureIntFormat(_GLEnum):
    RED = "i_r"
    RG = "i_rg"
    RGB = "i_rgb"
    RGBA = "i_rgba"
    DEPTH = "i_depth"
    DEPTH_STENCIL = "i_stencil"


_GL_ENUMS: dict[Enum, int] = {
    TextureFormat.RGB: 0x1907,
    TextureFormat.RGBA: 0x1908,
    TextureFormat.BGRA: 0x80E1,
    TextureFormat.DEPTH: 0x1902,
    TextureFormat.STENCIL: 0x1901,
    StorageType.UINT_8: 0x1401,
    StorageType.UINT_32: 0x1405,
    StorageType.FLOAT_32: 0x1406,
    TextureWrap.REPEAT: 0x2901,
    TextureWrap.REPEAT_MIRROR: 0x8370,
    TextureWrap.CLAMP_TO_EDGE: 0x812F,
    TextureWrap.CLAMP_TO_BORDER: 0x812D,
    TextureFilter.NEAREST: 0x2600,
    TextureFilter.LINEAR: 0x2601,
    TextureFilter.NEAREST_MIPMAP_NEAREST: 0x2700,
    TextureFilter.LINEAR_MIPMAP_NEAREST: 0x2701,
    TextureFilter.NEAREST_MIPMAP_LINEAR: 0x2702,
    TextureFilter.LINEAR_MIPMAP_LINEAR: 0x2703,
    TextureIntFormat.RED: 0x1903,
    TextureIntFormat.RG: 0x8227,
    TextureIntFormat.RGB: 0x1907,
    TextureIntFormat.RGBA: 0x1908,
    TextureIntFormat.DEPTH: 0x1902,
    TextureIntFormat.DEPTH_STENCIL: 0x84F9,
}

_JPEG_MARKERS = (".jpg", ".jpeg", ".JPG", ".JPEG")
_PNG_MARKERS = (".png", ".PNG")
_NATIVE_MODES = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


def _fmt(vec) -> str:
    return "(" + ", ".join(f"{float(c):g}" for c in vec) + ")"


def _load_pixels(image_path: str) -> np.ndarray:
    """Pixels of an image file at their native channel count, shape (h, w, c)."""
    with Image.open(image_path) as image:
        mode = image.mode
        if mode not in _NATIVE_MODES:
            if mode == "P":
                target = "RGBA" if "transparency" in image.info else "RGB"
            elif mode in ("I", "I;16", "F"):
                target = "L"
            elif mode == "PA":
                target = "RGBA"
            else:
                target = "RGB"
            image = image.convert(target)
        pixels = np.asarray(image, dtype=np.uint8)
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    return pixels


class TextureData:
    """Pixel data of an image, stored as 8-bit rows of interleaved channels."""

    def __init__(self, width: int, height: int, channels: int, data) -> None:
        if width <= 0 or height <= 0 or channels <= 0:
            raise ValueError(
                f"invalid texture size {width}x{height} with {channels} channels"
            )
        raw = np.frombuffer(bytes(data), dtype=np.uint8)
        size = width * height * channels
        if raw.size < size:
            raise ValueError(f"texture data holds {raw.size} bytes, expected {size}")
        pixels = raw[:size].reshape(height, width, channels).copy()
        self._init(pixels, image_path="")
        if channels == 3:
            self.format = TextureFormat.RGB
        elif channels == 4:
            self.format = TextureFormat.RGBA

    def _init(self, pixels: np.ndarray, image_path: str) -> None:
        pixels.flags.writeable = False
        self._pixels = pixels
        self.height, self.width, self.channels = (int(n) for n in pixels.shape)
        self.image_path = image_path
        self.format = TextureFormat.RGB
        self.storage = StorageType.UINT_8

    @classmethod
    def from_file(cls, image_path) -> TextureData:
        """Load an image; its format is chosen from the file's extension."""
        path = str(image_path)
        if not Path(path).is_file():
            raise FileNotFoundError(f"no image file at '{path}'")
        pixels = _load_pixels(path)
        texture_data = cls.__new__(cls)
        texture_data._init(pixels, image_path=path)
        if any(marker in path for marker in _JPEG_MARKERS):
            texture_data.format = TextureFormat.RGB
            texture_data.storage = StorageType.UINT_8
        elif any(marker in path for marker in _PNG_MARKERS):
            texture_data.format = TextureFormat.RGBA
            texture_data.storage = StorageType.UINT_8
        else:
            texture_data.format = TextureFormat.RGB
            logger.error("image-format not supported yet: %s", path)
        return texture_data

    @property
    def data(self) -> np.ndarray:
        """Read-only pixel array of shape (height, width, channels)."""
        return self._pixels

    def to_bytes(self) -> bytes:
        return self._pixels.tobytes()

    def __str__(self) -> str:
        return (
            "<TextureData\n"
            f"  width: {self.width}\n"
            f"  height: {self.height}\n"
            f"  channels: {self.channels}\n"
            f"  format: {self.format}\n"
            f"  storage: {self.storage}\n"
            f"  image_path: {self.image_path}\n"
            ">\n"
        )


_texture_ids = itertools.count(1)


class Texture:
    """A 2D texture: its pixel data plus wrapping, filtering and border state."""

    def __init__(self, data: TextureData) -> None:
        self.texture_data = data
        self.wrap_u = TextureWrap.REPEAT
        self.wrap_v = TextureWrap.REPEAT
        self.min_filter = TextureFilter.LINEAR
        self.mag_filter = TextureFilter.LINEAR
        self._border_color = (0.0, 0.0, 0.0, 1.0)
        self.int_format = TextureIntFormat.RGB
        # The internal format follows the pixel format for images.
        if data.format is TextureFormat.RGBA:
            self.int_format = TextureIntFormat.RGBA
        elif data.format is TextureFormat.RGB:
            self.int_format = TextureIntFormat.RGB
        self.opengl_id = next(_texture_ids)

    @classmethod
    def from_file(cls, image_path) -> Texture:
        """Create a texture from an image file."""
        return cls(TextureData.from_file(image_path))

    @property
    def border_color(self) -> tuple[float, float, float, float]:
        return self._border_color

    @border_color.setter
    def border_color(self, color) -> None:
        components = tuple(float(c) for c in color)
        if len(components) != 4:
            raise ValueError(f"border color needs 4 components, got {len(components)}")
        self._border_color = components  # type: ignore[assignment]

    @property
    def width(self) -> int:
        return self.texture_data.width

    @property
    def height(self) -> int:
        return self.texture_data.height

    @property
    def channels(self) -> int:
        return self.texture_data.channels

    def __str__(self) -> str:
        return (
            "<Texture\n"
            f"  width: {self.width}\n"
            f"  height: {self.height}\n"
            f"  channels: {self.channels}\n"
            f"  borderColor: {_fmt(self._border_color)}\n"
            f"  minFilter: {self.min_filter}\n"
            f"  magFilter: {self.mag_filter}\n"
            f"  wrapModeU: {self.wrap_u}\n"
            f"  wrapModeV: {self.wrap_v}\n"
            f"  openGLid: {self.opengl_id}\n"
            ">\n"
        )
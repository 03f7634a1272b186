import logging

import numpy as np
import pytest
from PIL import Image

from rendercore.texture import (
    StorageType,
    Texture,
    TextureData,
    TextureFilter,
    TextureFormat,
    TextureIntFormat,
    TextureWrap,
)


def _pixels(width, height, channels):
    return bytes(range(width * height * channels))


def test_raw_rgb_data_sets_format_and_shape():
    data = TextureData(2, 3, 3, _pixels(2, 3, 3))
    assert data.format is TextureFormat.RGB
    assert data.storage is StorageType.UINT_8
    assert data.data.shape == (3, 2, 3)
    assert data.to_bytes() == _pixels(2, 3, 3)


def test_raw_rgba_data_sets_rgba_format():
    data = TextureData(2, 2, 4, _pixels(2, 2, 4))
    assert data.format is TextureFormat.RGBA
    assert data.channels == 4


def test_raw_data_is_copied_and_read_only():
    buffer = bytearray(_pixels(1, 1, 3))
    data = TextureData(1, 1, 3, buffer)
    buffer[0] = 200
    assert data.data[0, 0, 0] == 0
    with pytest.raises(ValueError):
        data.data[0, 0, 0] = 5


def test_raw_data_too_short_raises():
    with pytest.raises(ValueError):
        TextureData(4, 4, 3, b"\x00" * 10)


def test_raw_data_invalid_size_raises():
    with pytest.raises(ValueError):
        TextureData(0, 4, 3, b"")


def test_texture_data_str_lists_fields():
    text = str(TextureData(2, 2, 4, _pixels(2, 2, 4)))
    assert text.startswith("<TextureData\n")
    assert "  format: rgba\n" in text
    assert "  storage: uint_8\n" in text
    assert text.endswith(">\n")


def test_png_file_round_trip(tmp_path):
    pixels = np.arange(3 * 2 * 4, dtype=np.uint8).reshape(2, 3, 4)
    path = tmp_path / "img.png"
    Image.fromarray(pixels, "RGBA").save(path)
    data = TextureData.from_file(path)
    assert (data.width, data.height, data.channels) == (3, 2, 4)
    assert data.format is TextureFormat.RGBA
    assert np.array_equal(data.data, pixels)
    assert data.image_path == str(path)


def test_jpg_file_gets_rgb_format(tmp_path):
    path = tmp_path / "img.jpg"
    Image.new("RGB", (4, 5), (10, 20, 30)).save(path)
    data = TextureData.from_file(path)
    assert data.format is TextureFormat.RGB
    assert (data.width, data.height, data.channels) == (4, 5, 3)


def test_unsupported_extension_logs_error(tmp_path, caplog):
    path = tmp_path / "img.bmp"
    Image.new("RGB", (2, 2)).save(path)
    with caplog.at_level(logging.ERROR, logger="rendercore.texture"):
        data = TextureData.from_file(path)
    assert data.format is TextureFormat.RGB
    assert any("not supported" in r.getMessage() for r in caplog.records)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextureData.from_file(tmp_path / "missing.png")


def test_gl_enum_values_match_opengl():
    rgba_data = TextureData(1, 1, 4, _pixels(1, 1, 4))
    assert rgba_data.format.gl_enum == 0x1908
    texture = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    texture.wrap_v = TextureWrap.REPEAT
    assert texture.wrap_v.gl_enum == 0x2901
    assert texture.int_format.gl_enum == TextureFormat.RGB.gl_enum


def test_enum_labels():
    texture = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    texture.min_filter = TextureFilter.LINEAR_MIPMAP_LINEAR
    assert "  minFilter: linear_mipmap_linear\n" in str(texture)
    assert str(TextureIntFormat(TextureIntFormat.DEPTH_STENCIL.value)) == "i_stencil"


def test_texture_int_format_follows_data_format():
    rgba = Texture(TextureData(1, 1, 4, _pixels(1, 1, 4)))
    rgb = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    assert rgba.int_format is TextureIntFormat.RGBA
    assert rgb.int_format is TextureIntFormat.RGB


def test_textures_get_distinct_ids():
    first = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    second = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    assert first.opengl_id > 0
    assert first.opengl_id != second.opengl_id


def test_border_color_validation():
    texture = Texture(TextureData(1, 1, 3, _pixels(1, 1, 3)))
    texture.border_color = (1, 0.5, 0.25, 1)
    assert texture.border_color == (1.0, 0.5, 0.25, 1.0)
    with pytest.raises(ValueError):
        texture.border_color = (1.0, 0.0, 0.0)


def test_texture_str_reflects_state():
    texture = Texture(TextureData(3, 2, 4, _pixels(3, 2, 4)))
    texture.min_filter = TextureFilter.NEAREST
    texture.wrap_v = TextureWrap.CLAMP_TO_EDGE
    text = str(texture)
    assert "  width: 3\n" in text
    assert "  height: 2\n" in text
    assert "  minFilter: nearest\n" in text
    assert "  wrapModeV: clamp_to_edge\n" in text
    assert f"  openGLid: {texture.opengl_id}\n" in text


def test_texture_from_file(tmp_path):
    path = tmp_path / "tex.png"
    Image.new("RGBA", (6, 7), (1, 2, 3, 4)).save(path)
    texture = Texture.from_file(path)
    assert (texture.width, texture.height, texture.channels) == (6, 7, 4)
    assert texture.int_format is TextureIntFormat.RGBA
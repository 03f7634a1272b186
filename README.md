# rendercore

Building blocks for a small real-time 3D renderer that need no graphics
context: mesh generation, vertex buffer layouts, vector and quaternion
math, projection matrices, input state tracking, light and material
descriptions, and texture pixel data. It depends on `numpy` and `pillow`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `rendercore.enums`: the `GraphicsAPI`, `WindowBackend`, `ShaderType`,
  `ElementType` and `BufferUsage` enumerations. `str()` of a member gives its
  label (for example `"Float3"`). `element_count(etype)` gives the number of
  components of an element type and `element_size(etype)` its size in bytes
  (four bytes per component). `BufferUsage.gl_enum` gives the matching OpenGL
  usage constant as an integer.
- `rendercore.buffer_layout`: `BufferElement` (name, type, normalized flag,
  with `count`, `nbytes` and `offset`) and `BufferLayout`, which packs elements
  one after another, works out each `offset` and the total `stride`, and
  supports `len()`, iteration and indexing (`IndexError` when out of range).
- `rendercore.transforms`: `normalize` (raises `ValueError` on a zero vector),
  `quat_from_matrix` and `matrix_from_quat` for quaternions ordered
  `(w, x, y, z)`, `perspective(left, right, top, bottom, near, far)`,
  `ortho(width, height, near, far)`, and the intrinsic Z-X-Y Euler helpers
  `euler_zxy_from_quat` and `quat_from_euler_zxy`.
- `rendercore.input`: `InputManager` records key and mouse button actions,
  the cursor position and the last and accumulated scroll offsets.
  `is_key_down` is true for `KeyAction.PRESSED` or `KeyAction.REPEAT`;
  `is_mouse_down` for `ButtonAction.BUTTON_PRESSED`. Queries out of range
  return `False`; callbacks out of range raise `IndexError`.
- `rendercore.lighting`: `DirectionalLight`, `PointLight` and `SpotLight`
  dataclasses tagged with a `LightType`, plus `Material` and `MaterialType`.
- `rendercore.geometry`: `Geometry` holds an index buffer and one attribute
  buffer per name (`position`, `normal`, `uvs`, each with its own
  `BufferLayout`), and the factories `create_plane`, `create_box`,
  `create_sphere` and `create_ellipsoid`. `rotate_to_match_up_axis` maps a
  shape's local +z onto `Axis.X`, `Axis.Y` or `Axis.Z`.
- `rendercore.primitives`: `create_cylinder`, `create_capsule` and
  `create_arrow`, built on `Geometry`.
- `rendercore.texture`: `TextureData` (8-bit pixel rows, either from raw bytes
  or from an image file through `TextureData.from_file`) and `Texture`, which
  keeps the data together with wrap modes, filters, border color and internal
  format. The enumerations `TextureFormat`, `StorageType`, `TextureWrap`,
  `TextureFilter` and `TextureIntFormat` each have a `gl_enum` property with
  the matching OpenGL constant.

## Example

```python
from rendercore.buffer_layout import BufferElement, BufferLayout
from rendercore.enums import ElementType
from rendercore.geometry import Axis, create_sphere
from rendercore.primitives import create_arrow
from rendercore.texture import Texture, TextureData

layout = BufferLayout(
    [
        BufferElement("position", ElementType.FLOAT_3),
        BufferElement("color", ElementType.FLOAT_3),
    ]
)
print(layout.stride)          # 24
print(layout[1].offset)       # 12

sphere = create_sphere(1.0, 16, 8)
print(sphere.vertex_count)    # 153
print(sphere.positions.shape) # (153, 3)

arrow = create_arrow(2.0, Axis.X)
print(arrow.indices[:6])

texture = Texture(TextureData(2, 1, 3, bytes(6)))
print(texture.int_format)     # i_rgb
```

## What it does not do

The package makes no graphics calls and opens no windows. `Geometry` and
`Texture` hold data and state in memory; nothing uploads them to a GPU, and
`Texture.opengl_id` is only a counter that tells textures apart. There are no
cameras, camera controllers, scene containers, shader programs, asset caches
or debug line drawing here, and no command to run.
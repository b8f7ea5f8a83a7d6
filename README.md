# softraster

A small software rasterizer written in plain Python. It turns triangle meshes
into pixels in an in-memory framebuffer. No graphics card or windowing library
is involved.

## What it provides

- `softraster.vectors`: `Vec2` (texture coordinates), `Vec3`, `Vec4`
  (homogeneous) and `Vecii` (integer pixel position)
- `softraster.color`: `Color`, an RGBA colour with float channels, with
  `Color.gray` and `Color.with_alpha`
- `softraster.mat4`: `Mat4`, a row-major 4x4 matrix. It builds translation,
  scaling, X/Y/Z rotation (in degrees), combined transforms, perspective
  projection (`perspective`) and orthographic projection (`orthographic`,
  `orthographic_bounds`). It also gives `inverse`, `determinant`,
  `minor_determinant`, `adjoint` and `transpose`. Multiplying a `Mat4` by a
  `Vec3` transforms a point and divides by w when w is positive.
- `softraster.transform_matrix`: `TransformMatrix`, an affine 3x4 matrix
- `softraster.projection_matrix`: `ProjectionMatrix`, a compact perspective
  projection
- `softraster.geometry`: `Vertex` (buffer indices plus a colour) and `Triangle`
- `softraster.mesh`: `Mesh`, with these parts:
  - coordinate, normal, texel and triangle buffers
  - `create_cube` and `create_sphere` generators
  - a Wavefront OBJ reader, through `from_file` and `from_text`
- `softraster.texture`: `Texture`, built from 8-bit RGB or RGBA samples with
  `Texture.from_bytes`. `color_at` samples it with mirrored repeat and
  bilinear filtering.
- `softraster.entity`: `Entity`, a mesh with its own position, rotation, scale
  and alpha
- `softraster.scene`: `Scene`, which holds entities and lights
- `softraster.camera`: `Camera`, which has:
  - a projection matrix
  - a position and a rotation in degrees; `rotate` keeps the pitch within
    ±90°
  - a heading-relative `translate`
- `softraster.light`: `Light`, which has ambient, diffuse and specular terms.
  `Light.intensity` returns a value clamped to [0, 1].
- `softraster.clip_space`: `clip_edges()` yields the six planes of the unit
  cube as `Edge` objects.
- `softraster.view_box`: `ViewBox` is an axis-aligned box. Iterating over it
  yields the box's inward-facing planes.
- `softraster.window`: `WindowVertex` and `WindowTriangle`. A
  `WindowTriangle` is clipped to the unit cube, then mapped to pixel
  coordinates.
- `softraster.screen`: `Screen` holds a colour buffer and a depth buffer. It
  provides:
  - `draw_triangle` for filled triangles
  - `draw_frame` and `draw_line` for wireframe edges (Bresenham's algorithm)
  - alpha blending and optional lighting
- `softraster.rasterizer`: `render_scene` draws a whole scene into a screen.
  The module also has the helpers `update_buffers`, `is_culled` and
  `is_clipped`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from softraster.camera import Camera
from softraster.entity import Entity
from softraster.light import Light
from softraster.mesh import Mesh
from softraster.rasterizer import render_scene
from softraster.scene import Scene
from softraster.screen import Screen
from softraster.vectors import Vec3

scene = Scene()
scene.add_entity(Entity(Mesh.create_sphere(12, 24)))
scene.add_light(Light(Vec3(0.0, 0.0, 0.5), 0.4, 0.4, 0.2))

camera = Camera()
camera.set_perspective_view(320, 240, 1.0, 10.0, 120.0)
camera.position = Vec3(0.0, 0.0, 5.0)

screen = Screen(320, 240)
render_scene(scene, screen, camera, wireframe=False, cull=False, light_on=True)

print(screen.pixel(160, 120))
```

The flags change what `render_scene` draws:

- `wireframe=True` draws only triangle edges.
- `cull=True` skips triangles whose vertices wind clockwise.
- `light_on=False` draws unlit colours.

`screen.pixels` is a flat list of `Color` objects, stored row by row. The
colour of pixel `(x, y)` is `pixels[width * y + x]`.

## Loading models

```python
from softraster.mesh import Mesh

mesh = Mesh.from_file("model.obj")
```

The reader handles `v`, `vn`, `vt` and `f` records. It ignores other records.

- A `w` component on a `v` record other than 1 divides x, y and z by `w`.
- Faces with more than three vertices are split into a triangle fan.
- Negative indices count back from the end of the buffer as it stands at that
  point in the file.
- After parsing, a default texel `(0, 0)` and a default normal `(1, 0, 0)` are
  appended.

## Textures

```python
from softraster.mesh import Mesh
from softraster.texture import Texture

texture = Texture.from_bytes(2, 2, 3, bytes([255, 0, 0] * 4))
cube = Mesh.create_cube(texture)
```

The texture's first row is at `v = 0`. RGB data gives fully opaque texels.

## Lighting notes

`Light.intensity(normal, pixel_position, light_position)` computes its terms as
follows:

- The diffuse term is the dot product of the normalized surface normal with
  the light's own `position`.
- The specular term uses the light's fixed `look_direction`.
- `pixel_position` and `light_position` do not affect the result.

When several lights are present, `Screen` adds their intensities together.

## What it does not do

- It does not decode image files. Textures come from raw bytes via
  `Texture.from_bytes`.
- It has no window, display or interactive viewer. It also has no command-line
  program.
- Rendering fills `Screen` buffers in memory. Showing or saving the result is
  up to the caller.
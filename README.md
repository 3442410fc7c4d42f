# threed

A small 3D engine. A scene holds triangle meshes and lights. Each frame,
every triangle is rotated and moved into place, and triangles that face away
from the camera are dropped. The rest are projected with a perspective
camera and drawn as flat-shaded polygons, lit by the scene's first
directional light. pygame draws the frame in a window or on any surface you
supply.

## Installation

```
pip install .
```

## Running the demo

```
threed
```

This opens a resizable 800×600 window titled "3D Engine". A unit cube sits
5 units in front of the camera and turns about its x and y axes. A white
light shines along (1, -1, 1) and lights the cube. Close the window to quit.
The command takes no options other than `--help`.

## Building a scene

```python
from threed.camera import Camera
from threed.engine import Engine
from threed.light import DirectionalLight
from threed.primitives import sphere
from threed.scene import Scene
from threed.vector import Vec3

scene = Scene()

light = DirectionalLight(Vec3(1.0, -1.0, 1.0))   # direction is normalised
light.color = Vec3(1.0, 0.8, 0.6)
light.intensity = 1.0
scene.add_light(light)

ball = sphere(1.0, 16)
ball.position = Vec3(0.0, 0.0, 5.0)

def spin(obj, delta_time):
    r = obj.rotation
    obj.rotation = Vec3(r.x, r.y + delta_time, r.z)

ball.set_update(spin)
scene.add_object(ball)

Engine(scene, Camera()).run()
```

`threed.engine.demo_scene()` returns the scene that the `threed` command
shows.

### Building blocks

- `threed.vector`: the immutable `Vec3` type with `+`, `-`, scalar `*` and
  `/`, `dot`, `cross`, `length` and `normalize`. Normalising a zero vector
  gives NaN components. It also has `Mat3` (use `m @ v` or `m @ other`) and
  the `rotation_x`, `rotation_y` and `rotation_z` functions, which take
  angles in radians.
- `threed.triangle.Triangle`: three `Vec3` vertices and a unit `normal`.
  The normal is worked out again when `set_vertices` is called.
- `threed.mesh.Mesh`: a list of triangles. `Mesh.from_raw_coordinates` takes
  rows of nine floats. `edge_vertices()` returns the vertex pairs along each
  triangle's edges.
- `threed.sceneobject.SceneObject`: a mesh with a `position` and a `rotation`
  in radians. The rotation is applied about x, then y, then z.
  `set_update(func)` installs a callback, and `update(dt)` calls it as
  `func(obj, dt)`.
- `threed.light`: the abstract `Light` class, and `BaseLight`, which is white,
  has intensity 1 and shines straight down. There is also `DirectionalLight`.
- `threed.scene.Scene`: its `add_object`, `add_light` and `update(dt)`
  methods. `add_light` rejects anything that is not a `Light`.
- `threed.camera.Camera`: a camera that looks down +z. By default `near` is
  1.0 and `far` is 10.0. It has `project_point` and `project_triangle`.

### Primitives

`threed.primitives` makes scene objects with meshes already built. Each one
starts at the origin with no rotation:

- `cube(size)`
- `rectangular_prism(width, height, depth)`
- `pyramid(base_size, height)`
- `triangular_prism(base_width, height, depth)`
- `cylinder(radius, height, segments)`
- `sphere(radius, segments)`

A negative segment count raises `ValueError`, and zero segments gives an
empty mesh.

### Projection settings

The camera reads the viewport size and field of view from a setting that the
whole process shares:

```python
from threed.config import get_config, update_config

update_config(1024, 768, 70.0)
print(get_config())   # RenderConfig(width=1024, height=768, fov=70.0)
```

The default is 800×600 with a 90° field of view. A negative width or height
raises `ValueError`.

### Working without a window

- `threed.renderer.frame_vertices(scene, camera)` returns the vertex data for
  one frame after culling. It gives three `(x, y, z, nx, ny, nz)` tuples for
  each visible triangle.
- `threed.renderer.light_data(scene)` packs the first light as
  `(dx, dy, dz, 0.0, r, g, b, intensity)`. It returns `None` when the scene
  has no lights.
- A `Renderer(scene, camera, surface=some_pygame_surface)` draws onto that
  surface each time you call `render()`. `advance(dt)` moves the scene on by
  `dt` seconds and returns the vertices without drawing anything.

## Limitations

- Triangles are drawn in scene order. There is no depth buffer, so a surface
  that faces the camera can be painted over the wrong way where objects
  overlap.
- Triangles are not clipped. If any corner of a triangle lies outside the
  depth range 0–1, the whole triangle is skipped.
- The camera only moves by its `position`, which is used for culling. It
  always looks down +z and cannot turn.
- Only the first light in a scene lights the frame.
- There is no model loading or saving: you build meshes in code.

## Tests

```
pip install ".[test]"
pytest
```
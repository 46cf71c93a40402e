# cubesculpt

A small polygon model editor core. Start from a cube, triangulate its faces
into a flat vertex list that is ready for rendering, and reshape it by dragging
vertices in top, left or right orthographic views.

## Install

```
pip install .
```

## Modules

- `cubesculpt.model`: `Vertex`, `FaceVertex` and `Model`.
  - A `Model` starts as a unit cube centred at the origin, with eight vertices
    (`vertices`) and six quad faces (`faces`).
  - `generate_tris()` fans each face into triangles with flat normals. It fills
    `tris` and records in `tri_sources` which master vertex each triangle
    vertex came from. `tri_count` is the number of triangle vertices.
  - `clear_tris()` empties both lists.
  - `init_cube()` resets the model to the cube.
  - `add_midpoint(a, b)` splits the edge `a`–`b` in every face that has it. It
    returns the new vertex, or `None` if no face has that edge.
  - `update_vertex(v, x, y, z)` moves a vertex and refreshes the triangles that
    use it.
  - `compute_normal(v0, v1, v2)` gives the unit normal of a triangle. For a
    degenerate triangle it gives zeros.
- `cubesculpt.cube`: `generate_textured_cube(u0, u1, v0, v1)` returns the 36
  vertices of a textured cube, two triangles per face.
- `cubesculpt.editor`: `EditorScene`, which edits a `Model` on a 320×240
  touch area.
  - `project_to_2d(v)` and `screen_to_model(x, y, reference)` convert between
    model space and screen positions.
  - `handle_touch(px, py)` picks the vertex within 6 pixels of a touch, drags
    it within the [-1, 1] bounds, and rebuilds the triangles when the touch is
    released. A touch at `(0, 0)` counts as no touch.
  - `handle_keys(keys_down, keys_held)` changes `angle_x` and `angle_y` while
    the direction keys are held. It returns `True` when START is pressed.
  - `user_input(keys_down, keys_held, touch)` does both for one frame.
  - `edge_lines()` and `handle_positions()` give the projected wireframe and
    the positions of the vertex handles.
  - `ViewState` (`TOP`, `LEFT`, `RIGHT`) chooses the view, and `Key` names the
    buttons.
  - `clamp(value, lo, hi)` bounds a value.

## Example

```python
from cubesculpt.editor import EditorScene, ViewState

scene = EditorScene(ViewState.TOP)
print(scene.model.tri_count)             # 36 vertices, 12 triangles

x, y = scene.project_to_2d(scene.model.vertices[0])
scene.handle_touch(x, y)                 # grab the vertex under the touch
scene.handle_touch(x - 10, y)            # drag it left
scene.handle_touch(0, 0)                 # release; triangles are rebuilt

for start, end in scene.edge_lines():
    ...                                  # draw the wireframe
```

## What it does not do

The package draws nothing and reads no input device. It has no window, no
renderer and no main loop. The caller supplies the key bits and touch
coordinates. The caller also draws `tris`, `edge_lines()` and
`handle_positions()` with whatever graphics library it uses. Models are not
saved or loaded, and there is no command-line program.

## Tests

```
pip install .[test]
pytest
```
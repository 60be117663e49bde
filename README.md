# rupert

Tools for studying whether a polyhedron has the Rupert property, meaning it can
pass through a hole cut in a copy of itself. Coordinates are exact rational
numbers (`fractions.Fraction`). Interval arithmetic covers regions of rotation
space.

## Modules

- `rupert.interval`: the `Interval` class, a frozen dataclass with `min` and `max` fields.
  - It supports `+`, `-`, unary `-` and `*`, with plain numbers as well as with other intervals.
  - `square()` is tighter than multiplying an interval by itself.
  - `recip()` raises `ZeroDivisionError` when the interval touches or spans zero.
  - The sign predicates are `is_positive`, `is_negative`, `is_maybe_positive` and `is_maybe_negative`.
  - The module-level functions of the same names, plus `square` and `recip`, accept either a plain number or an `Interval`.
- `rupert.geom`: `Point3d` and `Quat`.
  - `Point3d` supports `+`, `-`, scaling by a number, `cross` and `dot`.
  - `Quat` supports `conj`, `invsqnorm`, quaternion multiplication and `rotate`.
  - `rotate` rotates a point and divides by the squared norm, so the quaternion need not be a unit. `quat * point` does the same.
  - Both classes work over `Fraction` or over `Interval` values.
  - `rotate_vertices(rotation, vertices)` rotates a list of vertices.
- `rupert.json_rep`: the `Vertex` and `Polyhedron` classes.
  - Each has `from_dict`/`to_dict`, and `Polyhedron` also has `from_json`/`to_json`.
  - In the JSON, a rational is `{"n": "<numerator>", "d": "<denominator>"}`, with both parts as decimal strings. Vertices are listed under `"v"` and faces, as lists of vertex indices, under `"f"`.
  - Malformed input raises `ValueError`.
  - `rational_from_wire` and `rational_to_wire` convert single values.
- `rupert.render_geom`: `Point2d` and `Xform`. `Xform.apply` scales a 2d point, then translates it.
- `rupert.env`: the `Env` class.
  - `Env.build(vertices, faces, rotation, circuit)` applies the rotation to the vertices and records the indices of the faces that face the positive z direction (`positive_faces`).
  - `get_proj_faces()` projects the faces to 2d by dropping z.
  - `render()` returns an SVG document.
  - The module also has the helpers `is_positive_face`, `get_positive_faces` and `proj_vertex`.
- `rupert.search`: `quat_in_in_patch(env, quat)` takes a quaternion with interval components.
  - It returns `False` if any face could become positive while not being one of the environment's positive faces.
  - `State` holds a 7-dimensional box in parameter space: `outer`, `inner` and `translate`.
- `rupert.render`: produces the SVG output.
  - The drawing shows every face outline, fills the positive faces, and marks and numbers each vertex.
  - The helpers are `format_line`, `format_xf_line`, `format_xf_poly`, `render_faces`, `make_label` and `render`.

## Installation

```
pip install .
```

## Command line

```
rupert [INPUT] [-o OUTPUT]
```

The command does the following:

1. Reads a polyhedron from `INPUT` (default `data/rational-snub.json`, relative to the current directory).
2. Prints the polyhedron back as compact JSON.
3. Prints each vertex with its coordinates as decimals.
4. Applies the fixed rotation `10 + 9.9i + 0.55j + 2k`.
5. Writes the SVG drawing of the projection to `OUTPUT` (default `/tmp/a.svg`).

If the file cannot be read or written, or the JSON or polyhedron is invalid, it prints an error and exits with status 1.

No polyhedron data file is shipped with the package.

## Library use

```python
from fractions import Fraction
from rupert.interval import Interval

iv = Interval(Fraction(1, 4), Fraction(3, 4)) + Interval(Fraction(5, 4), Fraction(7, 4))
assert iv == Interval(Fraction(3, 2), Fraction(5, 2))
assert iv.is_positive()
```

## What it does not do

There is no search over rotation space. `State` only holds the bounds of a box. `quat_in_in_patch` tests one interval quaternion and does nothing more.

## Running the tests

```
pip install .[test]
pytest
```
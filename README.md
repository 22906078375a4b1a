# urbangen

Geometry primitives and area subdivision for procedural city generation.

`urbangen` is a library. It provides:

- **`urbangen.primitives`**: `Point` and `Vector` in 3D space with tolerant
  equality (within `COORDINATES_EPSILON`), `Point` ordering by x then y,
  `Point + Vector`, `Point - Point`, vector length, `normalized()`,
  `rotated()` and the per-axis rotations, `dot()`, `perp_dot()`, `cross()`
  (raises `ValueError` for parallel vectors), `angle_to()`,
  `is_parallel_with()` and `angle_to_x_axis()`. The unit constants
  `METER`, `PI`, `EPSILON`, `COORDINATES_EPSILON` and `SNAP_DISTANCE` live
  here too.
- **`urbangen.line`**: the `Intersection` enum and the infinite `Line`,
  with `intersection_2d()`, `nearest_point()`, `distance()`,
  `has_point_2d()` and `point_position_test()`.
- **`urbangen.linesegment`**: `LineSegment`, with `length()`, `normal()`
  and intersection against other segments (reporting identical, containing,
  contained, overlapping or touching segments) or against lines.
- **`urbangen.ray`**: `Ray`, intersecting rays, lines and segments.
- **`urbangen.polygon`**: `Polygon` with area, centroid, plane normal,
  inward `edge_normal()`, `encloses_2d()`, `split()` along a line,
  `subtract()` and `subtract_edge()` to shrink its borders, `rotate()`,
  `scale()`, ear-clipping `triangulate()` / `surface_indexes()` and
  `is_non_self_intersecting()`.
- **`urbangen.shape`**: `Shape`, a polygon base extruded along Z to a
  height, with `top()` and `encloses()` for points, polygons and shapes.
- **`urbangen.area`**: `Area` (a bounding polygon and an optional parent)
  and `Lot`.
- **`urbangen.subregion`**: `SubRegion`, a polygon kept as a linked cycle of
  `Edge` objects marked with road access, used for subdivision.
- **`urbangen.block`**: `Block`, whose `create_lots()` subdivides the block
  into lots of roughly a given width and depth, keeping only pieces that
  touch a road.
- **`urbangen.urbanentity`**: `UrbanEntity`, an object placed on a lot with
  a numeric entity type; `define_new_entity_type()` hands out new ones.

Intersection methods return a pair `(Intersection, Point | None)`; the point
is given only when the result is `Intersection.INTERSECTING`.

## Installation

```
pip install urbangen
```

## Example

```python
from urbangen.primitives import Point
from urbangen.polygon import Polygon
from urbangen.block import Block

border = Polygon(Point(0, 0, 0), Point(40, 0, 0), Point(40, 20, 0), Point(0, 20, 0))
print(border.area())       # 800.0
print(border.centroid())   # Point(20, 10, 0)

block = Block(None, border)
block.create_lots(10, 10, 0.0)
for lot in block.lots:
    print(lot.constraints)
```

`create_lots()` takes an optional `rng` (a `random.Random`) so that results
with a non-zero deviance can be reproduced.

## What it does not do

The package does not generate a street network, zones or buildings, and it
does not render or store anything. It has no command-line tool: it covers the
geometry and the block-to-lot subdivision that such a generator builds on.

## Running the tests

```
pip install -e ".[test]"
pytest
```
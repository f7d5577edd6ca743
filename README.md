# tangy

Layout geometry for a small picture description language. It provides the
pieces that size objects and place them one after another along the
current drawing direction, with integer coordinates and bounding boxes.

Directions are whole degrees, counter-clockwise from the positive x axis.
Halving and division of integers truncate toward zero.

## Modules

- `tangy.bbox`
  - `BoundingBox`: a box that starts empty and grows as points are marked
    (`mark`), or is set from two corners (`set_bounds`). It offers
    `merge`, `shift`, `center`, `size`, `reset`, `is_initial`, the 32-bit
    checksums `signature` and `full_signature`, `classify` (zone of a
    point per axis), and `overlap`, which returns the intersection box or
    `None`. `BoundingBox.with_id()` creates an empty box with a fresh
    serial `bbid`.
  - `Zone`: `UNDER`, `MIDDLE`, `OVER`, the position of a value against a
    closed range.
- `tangy.geometry`
  - `normalize_direction` (to -180..179) and
    `normalize_direction_positive` (to 0..359).
  - `Position`: anchor names (`center`, `north`, …, `start`, `end`, and the
    short forms `c`, `n`, `ne`, …); `Position.parse` ignores a leading dot
    and raises `ValueError` on an unknown name.
  - `anchor_point(left, bottom, right, top, position)`: the anchor's
    coordinates on a box and the direction it faces (`None` for centre).
  - `apply_with` moves a point so a given anchor of an object of the given
    size lands on it; `rewind_center` steps back half the object size
    against an axis direction (other directions raise `ValueError`).
  - `DirectionCommand` and `apply_direction` for `dir`, `incdir`,
    `decdir`, `lturn`, `rturn`, `up`, `down`, `left`, `right`.
  - `bump`, `bump_horizontal`, `bump_vertical`: where a line through a
    point at a given angle crosses an edge, or `None`;
    `separator_points` collects the crossings of a separator with the four
    sides of a box.
- `tangy.fitting`
  - `ShapeKind` and `default_size(kind, unit)`: the width and height an
    object takes when none is given (round shapes and points from a
    default radius).
  - `fit_by_size` places a box so the travel line enters one side and
    leaves the opposite one; `fit_by_bounds` places an object whose bounds
    and final point are relative to its start. Both return a `Placement`
    with centre, bounds, `start` and `end`.
- `tangy.lanes`
  - `layout_lanes(sizes, lanes, order, gap_h, gap_v)`: equal cells on a
    grid, `lanes` per row (`LaneOrder.NWR`) or per column
    (`LaneOrder.NWD`); other orders and a non-positive lane count raise
    `ValueError`. Returns a `LaneLayout`.
  - `chunk_bounds(boxes, margin)`: the extent of member boxes plus a
    margin, as a `ChunkBounds` with size, origin offset and radius.

## Example

```python
from tangy.bbox import BoundingBox
from tangy.geometry import anchor_point, normalize_direction
from tangy.fitting import fit_by_size
from tangy.lanes import chunk_bounds

box = BoundingBox()
box.mark(0, 0)
box.mark(30, 20)
print(box.size())                     # (30, 20)
print(box.center())                   # (15, 10)

print(normalize_direction(270))       # -90
print(anchor_point(0, 0, 10, 10, "ne"))  # (10, 10, 45)

p = fit_by_size(30, 20, 0, 0, 0)
print(p.center, p.end)                # (15, 0) (30, 0)

cb = chunk_bounds([(0, 0, 10, 10), (20, 5, 30, 15)], margin=2)
print(cb.width, cb.height)            # 34 19
```

## What it does not do

This is a library of layout calculations only. It does not read or parse
picture descriptions, does not walk drawing paths made of line, arc and
curve commands, does not lay out auxiliary dimension lines, and does not
render output of any kind. There is no command-line program.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```
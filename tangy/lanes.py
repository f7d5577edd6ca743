"""Grid layout of chunk members in lanes, and the bounds of a whole chunk."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

from tangy.bbox import BoundingBox
from tangy.fitting import Placement

Size = Tuple[int, int]
Box = Tuple[int, int, int, int]


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class LaneOrder(enum.Enum):
    """The corner a lane layout starts from and the way it fills.

    Only ``NWR`` (rows from the north-west, filling rightwards) and ``NWD``
    (columns from the north-west, filling downwards) can be laid out.
    """

    NWR = "nwr"
    NWD = "nwd"
    SWU = "swu"
    SWR = "swr"
    SEL = "sel"


@dataclass
class LaneLayout:
    """Cells of a lane layout and the size of the chunk holding them."""

    cells: List[Placement] = field(default_factory=list)
    width: int = 0
    height: int = 0
    columns: int = 0
    rows: int = 0

    @property
    def center(self) -> Tuple[int, int]:
        return _half(self.width), _half(self.height)

    @property
    def origin_offset(self) -> Tuple[int, int]:
        return -_half(self.width), -_half(self.height)

    @property
    def start(self) -> Tuple[int, int]:
        return 0, _half(self.height)

    @property
    def end(self) -> Tuple[int, int]:
        return self.width, _half(self.height)

    @property
    def bounds(self) -> Box:
        return 0, 0, self.width, self.height


def layout_lanes(
    sizes: Sequence[Size],
    lanes: int,
    order: LaneOrder = LaneOrder.NWR,
    gap_h: int = 0,
    gap_v: int = 0,
) -> LaneLayout:
    """Arrange members on a grid of equal cells, ``lanes`` per row or column.

    Every cell takes the largest member width and height. ``gap_h`` and
    ``gap_v`` separate cells and surround the grid.
    """
    if lanes <= 0:
        raise ValueError("number of lanes must be positive")
    if order not in (LaneOrder.NWR, LaneOrder.NWD):
        raise ValueError(f"lane order '{order.value}' is not supported")

    sizes = list(sizes)
    if not sizes:
        return LaneLayout()

    maxw = max(w for w, _ in sizes)
    maxh = max(h for _, h in sizes)
    count = len(sizes)

    xc = count % lanes if count < lanes else lanes
    yc = _cdiv(count + lanes - 1, lanes)

    hw, hh = _half(maxw), _half(maxh)
    cells = []
    for c in range(count):
        x, y = c % lanes, c // lanes
        if order is LaneOrder.NWR:
            cx = (maxw + gap_h) * (x + 1) - hw
            cy = (maxh + gap_v) * (yc - y) - hh
        else:
            cx = (maxw + gap_h) * (y + 1) - hw
            cy = (maxh + gap_v) * (xc - x) - hh
        cells.append(
            Placement(
                cx=cx,
                cy=cy,
                left=cx - hw,
                bottom=cy - hh,
                right=cx + hw,
                top=cy + hh,
                sx=cx - hw,
                sy=cy,
                ex=cx + hw,
                ey=cy,
            )
        )

    if order is LaneOrder.NWD:
        width = yc * maxw + (yc + 1) * gap_h
        height = xc * maxh + (xc + 1) * gap_v
    else:
        width = xc * maxw + (xc + 1) * gap_h
        height = yc * maxh + (yc + 1) * gap_v

    return LaneLayout(cells=cells, width=width, height=height, columns=xc, rows=yc)


@dataclass
class ChunkBounds:
    """Extent of a chunk around its members, widened by an inner margin."""

    left: int
    bottom: int
    right: int
    top: int
    width: int
    height: int
    ox: int
    oy: int
    radius: int

    @property
    def center(self) -> Tuple[int, int]:
        return -self.ox, -self.oy


def _as_box(item: Union[Box, BoundingBox]) -> Box:
    if isinstance(item, BoundingBox):
        return item.lx, item.by, item.rx, item.ty
    lx, by, rx, ty = item
    return lx, by, rx, ty


def chunk_bounds(
    boxes: Iterable[Union[Box, BoundingBox]], margin: int = 0
) -> ChunkBounds:
    """Bounds covering member boxes (left, bottom, right, top), plus a margin.

    ``radius`` is the half-diagonal of the members' extent, without margin.
    With no members the extent is the origin.
    """
    items = [_as_box(b) for b in boxes]
    if items:
        xs = [v for lx, _, rx, _ in items for v in (lx, rx)]
        ys = [v for _, by, _, ty in items for v in (by, ty)]
        minx, maxx = min(xs), max(xs)
        miny, maxy = min(ys), max(ys)
        w, h = maxx - minx, maxy - miny
        radius = int(math.sqrt(_cdiv(_half(w) * w, 2) + _cdiv(_half(h) * h, 2)))
    else:
        minx = maxx = miny = maxy = 0
        radius = 0

    width = (maxx - minx) + margin * 2
    height = (maxy - miny) + margin * 2
    zx = minx - margin + _half(width)
    zy = miny - margin + _half(height)
    return ChunkBounds(
        left=minx - margin,
        bottom=miny - margin,
        right=maxx + margin,
        top=maxy + margin,
        width=width,
        height=height,
        ox=-zx,
        oy=-zy,
        radius=radius,
    )
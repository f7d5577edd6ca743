"""Default object sizes and placement of an object along the drawing direction."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Tuple

from tangy.geometry import RF, normalize_direction

# Below this squared sine/cosine the offset along the other axis is dropped.
QLIMIT = 0.01


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class ShapeKind(enum.Enum):
    """Object kinds whose size comes from the unit length alone."""

    CHUNKOBJATTR = "chunkobjattr"
    OBJLOAD = "objload"
    LPAREN = "lparen"
    RPAREN = "rparen"
    LBRACKET = "lbracket"
    RBRACKET = "rbracket"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    MOVE = "move"
    PAPER = "paper"
    CARD = "card"
    DIAMOND = "diamond"
    HOUSE = "house"
    CLOUD = "cloud"
    DRUM = "drum"
    PIPE = "pipe"
    BOX = "box"
    ELLIPSE = "ellipse"
    CIRCLE = "circle"
    POINT = "point"
    PIE = "pie"
    POLYGON = "polygon"
    GEAR = "gear"
    PARALLELOGRAM = "parallelogram"
    DOTS = "dots"
    PING = "ping"
    PINGPONG = "pingpong"
    SCATTER = "scatter"
    GATHER = "gather"
    THRU = "thru"
    XLINK = "xlink"
    PLINE = "pline"
    SEP = "sep"
    VCRANK = "vcrank"
    VELBOW = "velbow"
    HCRANK = "hcrank"
    HELBOW = "helbow"


class _Form(enum.Enum):
    WIDE_WIDE = "wwo"
    WIDE = "wo"
    SQUARE = "ro"
    NARROW = "no"
    NARROW_NARROW = "nno"
    QUARTER = "nnnn"
    ZERO = "zz"
    SMALL = "so"


_FORMS = {
    ShapeKind.CHUNKOBJATTR: _Form.ZERO,
    ShapeKind.OBJLOAD: _Form.SQUARE,
    ShapeKind.LPAREN: _Form.NARROW_NARROW,
    ShapeKind.RPAREN: _Form.NARROW_NARROW,
    ShapeKind.LBRACKET: _Form.NARROW_NARROW,
    ShapeKind.RBRACKET: _Form.NARROW_NARROW,
    ShapeKind.LBRACE: _Form.NARROW_NARROW,
    ShapeKind.RBRACE: _Form.NARROW_NARROW,
    ShapeKind.MOVE: _Form.WIDE,
    ShapeKind.PAPER: _Form.WIDE,
    ShapeKind.CARD: _Form.WIDE,
    ShapeKind.DIAMOND: _Form.WIDE,
    ShapeKind.HOUSE: _Form.WIDE,
    ShapeKind.CLOUD: _Form.WIDE,
    ShapeKind.DRUM: _Form.WIDE,
    ShapeKind.PIPE: _Form.WIDE,
    ShapeKind.BOX: _Form.WIDE,
    ShapeKind.ELLIPSE: _Form.WIDE,
    ShapeKind.CIRCLE: _Form.SQUARE,
    ShapeKind.POINT: _Form.SMALL,
    ShapeKind.PIE: _Form.SQUARE,
    ShapeKind.POLYGON: _Form.SQUARE,
    ShapeKind.GEAR: _Form.SQUARE,
    ShapeKind.PARALLELOGRAM: _Form.WIDE_WIDE,
    ShapeKind.DOTS: _Form.WIDE,
    ShapeKind.PING: _Form.WIDE,
    ShapeKind.PINGPONG: _Form.WIDE,
    ShapeKind.SCATTER: _Form.WIDE,
    ShapeKind.GATHER: _Form.WIDE,
    ShapeKind.THRU: _Form.WIDE,
    ShapeKind.XLINK: _Form.WIDE,
    ShapeKind.PLINE: _Form.ZERO,
    ShapeKind.SEP: _Form.QUARTER,
    ShapeKind.VCRANK: _Form.NARROW,
    ShapeKind.VELBOW: _Form.NARROW,
    ShapeKind.HCRANK: _Form.NARROW,
    ShapeKind.HELBOW: _Form.NARROW,
}

_ROUND = frozenset(
    {ShapeKind.CIRCLE, ShapeKind.PIE, ShapeKind.POLYGON, ShapeKind.GEAR}
)


def _form_size(form: _Form, unit: int) -> Tuple[int, int]:
    if form is _Form.WIDE_WIDE:
        return unit * 2, unit
    if form is _Form.WIDE:
        return _cdiv(unit * 3, 2), unit
    if form is _Form.SQUARE:
        return unit, unit
    if form is _Form.NARROW:
        return _cdiv(unit, 2), unit
    if form is _Form.NARROW_NARROW:
        return _cdiv(unit, 4), unit
    if form is _Form.QUARTER:
        return _cdiv(unit, 4), _cdiv(unit, 4)
    if form is _Form.SMALL:
        return _cdiv(unit, 5), _cdiv(unit, 5)
    return 0, 0


def default_size(kind: ShapeKind, unit: int) -> Tuple[int, int]:
    """Width and height an object of this kind takes when none is given.

    Round shapes and points take their size from a default radius.
    """
    if kind not in _FORMS:
        raise ValueError(f"no default size for {kind!r}")
    if kind in _ROUND:
        rad = _cdiv(unit, 2)
        if rad > 0:
            return rad * 2, rad * 2
    if kind is ShapeKind.POINT:
        rad = _cdiv(unit, 10)
        if rad > 0:
            return rad * 2, rad * 2
    return _form_size(_FORMS[kind], unit)


@dataclass
class Placement:
    """Where an object landed: centre, bounds, entry and exit points."""

    cx: int
    cy: int
    left: int
    bottom: int
    right: int
    top: int
    sx: int
    sy: int
    ex: int
    ey: int

    @property
    def center(self) -> Tuple[int, int]:
        return self.cx, self.cy

    @property
    def start(self) -> Tuple[int, int]:
        return self.sx, self.sy

    @property
    def end(self) -> Tuple[int, int]:
        """The point the next object continues from."""
        return self.ex, self.ey

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.top - self.bottom


def fit_by_size(width: int, height: int, direction: int, x: int, y: int) -> Placement:
    """Place a box so the travel line from (x, y) enters one side and leaves the opposite."""
    d = normalize_direction(direction)
    th = math.atan2(height, width) / RF
    hw = _cdiv(width, 2)
    hh = _cdiv(height, 2)

    if (th < d < 180 - th) or (-180 + th < d < -th):
        qy = math.sin(d * RF)
        dx = 0.0 if qy * qy < QLIMIT else math.tan((90 - d) * RF) * hh
        if qy > 0:
            dy = float(hh)
        else:
            dy = float(-hh)
            dx = -dx
    else:
        qx = math.cos(d * RF)
        dy = 0.0 if qx * qx < QLIMIT else math.tan(d * RF) * hw
        if qx > 0:
            dx = float(hw)
        else:
            dx = float(-hw)
            dy = -dy

    cx = int(x + dx)
    cy = int(y + dy)
    return Placement(
        cx=cx,
        cy=cy,
        left=cx - hw,
        bottom=cy - hh,
        right=cx + hw,
        top=cy + hh,
        sx=x,
        sy=y,
        ex=int(x + dx * 2),
        ey=int(y + dy * 2),
    )


def fit_by_bounds(
    left: int,
    bottom: int,
    right: int,
    top: int,
    ox: int,
    oy: int,
    x: int,
    y: int,
    fx: int,
    fy: int,
) -> Placement:
    """Place an object whose bounds and final point are relative to its start at (x, y)."""
    return Placement(
        cx=x - ox,
        cy=y - oy,
        left=x + left,
        bottom=y + bottom,
        right=x + right,
        top=y + top,
        sx=x,
        sy=y,
        ex=x + fx,
        ey=y + fy,
    )
"""Direction arithmetic, anchor positions and line/box intersections."""

from __future__ import annotations

import enum
import math
from typing import List, Optional, Tuple, Union

RF = math.pi / 180.0

Point = Tuple[int, int]


def _cmod(a: int, m: int) -> int:
    """Remainder with the sign of the dividend, as integer hardware computes it."""
    r = abs(a) % m
    return r if a >= 0 else -r


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


class Position(enum.Enum):
    """Named anchor points of an object."""

    CENTER = "center"
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    START = "start"
    END = "end"

    @classmethod
    def parse(cls, text: str) -> "Position":
        """Look up a position by name; a leading dot is ignored."""
        if not text:
            raise ValueError("empty position")
        key = text[1:] if text.startswith(".") else text
        key = key.lower()
        found = _POSITION_ALIASES.get(key)
        if found is None:
            raise ValueError(f"unknown position '{text}'")
        return found


_POSITION_ALIASES = {p.value: p for p in Position}
_POSITION_ALIASES.update(
    {
        "c": Position.CENTER,
        "n": Position.NORTH,
        "s": Position.SOUTH,
        "e": Position.EAST,
        "w": Position.WEST,
        "ne": Position.NORTHEAST,
        "nw": Position.NORTHWEST,
        "se": Position.SOUTHEAST,
        "sw": Position.SOUTHWEST,
    }
)


class DirectionCommand(enum.Enum):
    """Commands that change the current drawing direction."""

    DIR = "dir"
    INCDIR = "incdir"
    DECDIR = "decdir"
    LTURN = "lturn"
    RTURN = "rturn"
    DOWN = "down"
    RIGHT = "right"
    UP = "up"
    LEFT = "left"


def normalize_direction(angle: int) -> int:
    """Bring an angle in degrees into -180..179."""
    return _cmod(angle + 360 + 180, 360) - 180


def normalize_direction_positive(angle: int) -> int:
    """Bring an angle in degrees into 0..359."""
    return _cmod(angle + 360, 360)


def rewind_center(width: int, height: int, direction: int, x: int, y: int) -> Point:
    """Step back from a point by half the object size against an axis direction."""
    d = normalize_direction(direction)
    if d == -180 or d == 180:
        return x + _half(width), y
    if d == -90:
        return x, y + _half(height)
    if d == 0:
        return x - _half(width), y
    if d == 90:
        return x, y - _half(height)
    raise ValueError(f"direction {direction} is not along an axis")


def apply_with(
    width: int, height: int, position: Union[str, Position], x: int, y: int
) -> Point:
    """Move a point so that the given anchor of an object lands on it."""
    pos = position if isinstance(position, Position) else Position.parse(position)
    hw, hh = _half(width), _half(height)
    offsets = {
        Position.CENTER: (0, 0),
        Position.NORTH: (0, -hh),
        Position.SOUTH: (0, hh),
        Position.EAST: (-hw, 0),
        Position.WEST: (hw, 0),
        Position.NORTHEAST: (-hw, -hh),
        Position.NORTHWEST: (hw, -hh),
        Position.SOUTHEAST: (-hw, hh),
        Position.SOUTHWEST: (hw, hh),
    }
    if pos not in offsets:
        raise ValueError(f"position '{pos.value}' cannot be used with 'with'")
    dx, dy = offsets[pos]
    return x + dx, y + dy


def anchor_point(
    left: int, bottom: int, right: int, top: int, position: Union[str, Position]
) -> Tuple[int, int, Optional[int]]:
    """Coordinates of an anchor on a box, and the direction it faces.

    The direction is None for the centre, which faces nowhere.
    """
    pos = position if isinstance(position, Position) else Position.parse(position)
    cx, cy = _half(left + right), _half(bottom + top)
    table = {
        Position.NORTH: (cx, top, 90),
        Position.NORTHEAST: (right, top, 45),
        Position.EAST: (right, cy, 0),
        Position.SOUTHEAST: (right, bottom, -45),
        Position.SOUTH: (cx, bottom, -90),
        Position.SOUTHWEST: (left, bottom, -135),
        Position.WEST: (left, cy, 180),
        Position.NORTHWEST: (left, top, 135),
        Position.CENTER: (cx, cy, None),
    }
    if pos not in table:
        raise ValueError(f"position '{pos.value}' is not defined by bounds alone")
    return table[pos]


def apply_direction(
    command: DirectionCommand, direction: int, argument: int = 0
) -> int:
    """Apply a direction command and return the normalised new direction."""
    if command is DirectionCommand.DIR:
        direction = argument
    elif command is DirectionCommand.INCDIR:
        direction += argument
    elif command is DirectionCommand.DECDIR:
        direction -= argument
    elif command is DirectionCommand.LTURN:
        direction += 90
    elif command is DirectionCommand.RTURN:
        direction -= 90
    elif command is DirectionCommand.DOWN:
        direction = -90
    elif command is DirectionCommand.RIGHT:
        direction = 0
    elif command is DirectionCommand.UP:
        direction = 90
    elif command is DirectionCommand.LEFT:
        direction = 180
    return normalize_direction(direction)


def _between(v: float, a: int, b: int) -> bool:
    return (a <= v <= b) or (b <= v <= a)


def _inside(x1: int, x2: int, y1: int, y2: int, gx: float, gy: float) -> bool:
    if not (math.isfinite(gx) and math.isfinite(gy)):
        return False
    if not (_between(gx, x1, x2) and _between(gy, y1, y2)):
        return False
    tx, ty = int(gx), int(gy)
    return _between(tx, x1, x2) and _between(ty, y1, y2)


def _line(cx: int, cy: int, cdir: int) -> Tuple[float, float]:
    c = math.tan(cdir * RF)
    return c, float(cy) - c * float(cx)


def bump(
    x1: int, y1: int, x2: int, y2: int, cx: int, cy: int, cdir: int
) -> Optional[Point]:
    """Where a line through (cx, cy) at angle cdir crosses a segment, or None."""
    if x2 == x1:
        return None
    a = (float(y2) - float(y1)) / (float(x2) - float(x1))
    b = float(y1) - a * float(x1)
    c, d = _line(cx, cy, cdir)
    if a == c:
        return None
    gx = (d - b) / (a - c)
    gy = a * gx + b
    if not (math.isfinite(gx) and math.isfinite(gy)):
        return None
    if _between(gx, x1, x2) and _between(gy, y1, y2):
        return int(gx), int(gy)
    return None


def bump_horizontal(
    x1: int, y1: int, x2: int, y2: int, cx: int, cy: int, cdir: int
) -> Optional[Point]:
    """Crossing of a line with a horizontal edge at y1, or None."""
    c, d = _line(cx, cy, cdir)
    if c == 0:
        return None
    gy = float(y1)
    gx = (y1 - d) / c
    if _inside(x1, x2, y1, y2, gx, gy):
        return int(gx), int(gy)
    return None


def bump_vertical(
    x1: int, y1: int, x2: int, y2: int, cx: int, cy: int, cdir: int
) -> Optional[Point]:
    """Crossing of a line with a vertical edge at x1, or None."""
    c, d = _line(cx, cy, cdir)
    gx = float(x1)
    gy = c * x1 + d
    if _inside(x1, x2, y1, y2, gx, gy):
        return int(gx), int(gy)
    return None


def separator_points(
    bx: int,
    by: int,
    width: int,
    height: int,
    ox: int,
    oy: int,
    cx: int,
    cy: int,
    direction: int,
) -> List[Point]:
    """Points where a separator across the travel direction meets a box.

    The separator passes through (cx + ox, cy + oy) perpendicular to
    ``direction``; edges are tried top, bottom, left, right, and each hit
    is returned relative to the offset (ox, oy).
    """
    hw, hh = _half(width), _half(height)
    px, py = cx + ox, cy + oy
    cdir = direction + 90
    hits = [
        bump_horizontal(bx - hw, by + hh, bx + hw, by + hh, px, py, cdir),
        bump_horizontal(bx - hw, by - hh, bx + hw, by - hh, px, py, cdir),
        bump_vertical(bx - hw, by - hh, bx - hw, by + hh, px, py, cdir),
        bump_vertical(bx + hw, by - hh, bx + hw, by + hh, px, py, cdir),
    ]
    return [(qx - ox, qy - oy) for qx, qy in (h for h in hits if h is not None)]
"""Axis-aligned bounding boxes on integer coordinates."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass
from typing import Optional, Tuple

INT_MAX = 2**31 - 1
EMPTY_LOW = INT_MAX
EMPTY_HIGH = -(INT_MAX - 1)

_serial = itertools.count(1)

# Zone pairs (start, end) on one axis for which two ranges overlap.
_OVERLAPPING = frozenset({0x12, 0x14, 0x22, 0x24})


def _wrap32(value: int) -> int:
    """Reduce an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


class Zone(enum.IntEnum):
    """Where a coordinate lies relative to a closed range."""

    UNDER = 0x01
    MIDDLE = 0x02
    OVER = 0x04

    @classmethod
    def of(cls, low: int, high: int, value: int) -> "Zone":
        if value < low:
            return cls.UNDER
        if value <= high:
            return cls.MIDDLE
        return cls.OVER


@dataclass
class BoundingBox:
    """A box that grows to cover every point marked on it."""

    lx: int = EMPTY_LOW
    by: int = EMPTY_LOW
    rx: int = EMPTY_HIGH
    ty: int = EMPTY_HIGH
    count: int = 0
    bbid: int = 0

    @classmethod
    def with_id(cls) -> "BoundingBox":
        """Create an empty box carrying a fresh serial identifier."""
        return cls(bbid=next(_serial))

    def reset(self) -> None:
        """Return the box to the empty state, keeping its identifier."""
        self.lx = self.by = EMPTY_LOW
        self.rx = self.ty = EMPTY_HIGH
        self.count = 0

    def is_initial(self) -> bool:
        return (
            self.rx == EMPTY_HIGH
            and self.ty == EMPTY_HIGH
            and self.lx == EMPTY_LOW
            and self.by == EMPTY_LOW
        )

    def set_bounds(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Set the box to span two corners given in any order."""
        self.lx, self.rx = min(x1, x2), max(x1, x2)
        self.by, self.ty = min(y1, y2), max(y1, y2)

    def mark(self, x: int, y: int) -> None:
        """Grow the box to include a point."""
        self.lx = min(self.lx, x)
        self.rx = max(self.rx, x)
        self.by = min(self.by, y)
        self.ty = max(self.ty, y)
        self.count += 1

    def merge(self, other: "BoundingBox") -> None:
        """Grow the box to include another box."""
        self.mark(other.lx, other.by)
        self.mark(other.rx, other.ty)

    def shift(self, dx: int, dy: int) -> None:
        self.lx += dx
        self.rx += dx
        self.by += dy
        self.ty += dy

    def center(self) -> Tuple[int, int]:
        return _half(self.rx + self.lx), _half(self.ty + self.by)

    def size(self) -> Tuple[int, int]:
        return self.rx - self.lx, self.ty - self.by

    def signature(self) -> int:
        """A 32-bit checksum of the bounds."""
        value = 1234567 + self.rx * 3 + self.ty * 5 + self.lx * 7 + self.by * 11
        return _wrap32(value)

    def full_signature(self) -> int:
        """A 32-bit checksum of the bounds and the mark count."""
        value = (
            841923
            + self.rx * 3
            + self.ty * 5
            + self.lx * 7
            + self.by * 11
            + self.count * 13
        )
        return _wrap32(value)

    def classify(self, x: int, y: int) -> int:
        """Zone of x in the high nibble and zone of y in the low nibble."""
        return (Zone.of(self.lx, self.rx, x) << 4) | Zone.of(self.by, self.ty, y)

    def overlap(self, other: "BoundingBox") -> Optional["BoundingBox"]:
        """Return the intersection with another box, or None if they do not overlap."""
        xm = (Zone.of(self.lx, self.rx, other.lx) << 4) | Zone.of(
            self.lx, self.rx, other.rx
        )
        ym = (Zone.of(self.by, self.ty, other.by) << 4) | Zone.of(
            self.by, self.ty, other.ty
        )
        if xm not in _OVERLAPPING or ym not in _OVERLAPPING:
            return None
        xs = sorted((self.lx, self.rx, other.lx, other.rx))
        ys = sorted((self.by, self.ty, other.by, other.ty))
        return BoundingBox(lx=xs[1], by=ys[1], rx=xs[2], ty=ys[2])

    def __str__(self) -> str:
        flag = "I" if self.is_initial() else "-"
        return (
            f"qbb (id {self.bbid}) {flag} "
            f"[{self.lx} {self.by} {self.rx} {self.ty}] {self.count}"
        )
import pytest

from tangy.geometry import (
    DirectionCommand,
    Position,
    anchor_point,
    apply_direction,
    apply_with,
    bump,
    bump_horizontal,
    bump_vertical,
    normalize_direction,
    normalize_direction_positive,
    rewind_center,
    separator_points,
)


@pytest.mark.parametrize("angle", [-360, -1, 0, 90, 359, 360, 1000])
def test_normalize_positive_range_and_congruence(angle):
    d = normalize_direction_positive(angle)
    assert 0 <= d < 360
    assert (d - angle) % 360 == 0


def test_normalize_half_turn():
    assert normalize_direction(180) == -180


@pytest.mark.parametrize(
    "direction,position",
    [(0, "east"), (90, "north"), (-90, "south"), (180, "west"), (-180, "west")],
)
def test_rewind_matches_with(direction, position):
    assert rewind_center(40, 30, direction, 7, 9) == apply_with(40, 30, position, 7, 9)


def test_rewind_rejects_diagonal():
    with pytest.raises(ValueError):
        rewind_center(40, 30, 45, 0, 0)


def test_apply_with_center_is_identity():
    assert apply_with(40, 30, Position.CENTER, 11, 12) == (11, 12)


@pytest.mark.parametrize("a,b", [("n", "s"), ("e", "w"), ("ne", "sw"), ("nw", "se")])
def test_apply_with_opposites_are_symmetric(a, b):
    p = apply_with(40, 30, a, 100, 200)
    q = apply_with(40, 30, b, 100, 200)
    assert ((p[0] + q[0]) // 2, (p[1] + q[1]) // 2) == (100, 200)


def test_apply_with_leading_dot():
    assert apply_with(40, 30, ".north", 0, 0) == apply_with(40, 30, "north", 0, 0)


@pytest.mark.parametrize("bad", ["", "middle", "start"])
def test_apply_with_rejects(bad):
    with pytest.raises(ValueError):
        apply_with(40, 30, bad, 0, 0)


def test_anchor_corners():
    assert anchor_point(10, 20, 50, 80, "ne")[:2] == (50, 80)
    assert anchor_point(10, 20, 50, 80, "sw")[:2] == (10, 20)
    assert anchor_point(10, 20, 50, 80, "se")[:2] == (50, 20)
    assert anchor_point(10, 20, 50, 80, "nw")[:2] == (10, 80)


def test_anchor_directions():
    assert anchor_point(0, 0, 10, 10, Position.NORTH)[2] == 90
    assert anchor_point(0, 0, 10, 10, Position.CENTER)[2] is None
    for pos in ("n", "s", "e", "w", "ne", "nw", "se", "sw"):
        d = anchor_point(0, 0, 10, 10, pos)[2]
        assert -180 <= d <= 180


def test_anchor_north_uses_center_x():
    x, y, _ = anchor_point(10, 20, 50, 80, "north")
    cx, _, _ = anchor_point(10, 20, 50, 80, "center")
    assert (x, y) == (cx, 80)


def test_anchor_start_rejected():
    with pytest.raises(ValueError):
        anchor_point(0, 0, 10, 10, Position.START)


def test_turns_cancel():
    d = apply_direction(DirectionCommand.LTURN, 30)
    assert apply_direction(DirectionCommand.RTURN, d) == 30


def test_absolute_directions():
    assert apply_direction(DirectionCommand.UP, 17) == 90
    assert apply_direction(DirectionCommand.RIGHT, 17) == 0
    assert apply_direction(DirectionCommand.DIR, 17, 30) == 30


def test_incdir_wraps():
    d = apply_direction(DirectionCommand.INCDIR, 20, 350)
    assert -180 <= d < 180
    assert (d - 370) % 360 == 0
    assert apply_direction(DirectionCommand.DECDIR, d, 350) == 20


def test_bump_on_diagonal_segment():
    hit = bump(0, 0, 10, 10, 0, 10, -45)
    assert hit is not None
    gx, gy = hit
    assert gx == gy
    assert 0 <= gx <= 10


def test_bump_parallel_and_vertical():
    assert bump(0, 0, 10, 0, 0, 5, 0) is None
    assert bump(3, 0, 3, 10, 0, 5, 0) is None


def test_bump_horizontal_hits_edge():
    assert bump_horizontal(0, 10, 20, 10, 5, 0, 90) == (5, 10)


def test_bump_horizontal_misses():
    assert bump_horizontal(0, 10, 20, 10, 50, 0, 90) is None
    assert bump_horizontal(0, 10, 20, 10, 5, 0, 0) is None


def test_bump_vertical_hits_edge():
    assert bump_vertical(0, 0, 0, 20, 5, 7, 0) == (0, 7)
    assert bump_vertical(0, 0, 0, 20, 5, 70, 0) is None


def test_separator_across_horizontal_travel():
    pts = separator_points(0, 0, 20, 10, 0, 0, 0, 0, 0)
    assert pts == [(0, 5), (0, -5)]


def test_separator_across_vertical_travel():
    pts = separator_points(0, 0, 20, 10, 0, 0, 0, 0, 90)
    assert pts == [(-10, 0), (10, 0)]


def test_separator_offset_is_removed():
    base = separator_points(0, 0, 20, 10, 0, 0, 0, 0, 0)
    shifted = separator_points(0, 0, 20, 10, 3, 4, -3, -4, 0)
    assert shifted == [(x - 3, y - 4) for x, y in base]
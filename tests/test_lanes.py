import pytest

from tangy.bbox import BoundingBox
from tangy.lanes import ChunkBounds, LaneLayout, LaneOrder, chunk_bounds, layout_lanes


def test_zero_lanes_rejected():
    with pytest.raises(ValueError):
        layout_lanes([(10, 10)], 0)


@pytest.mark.parametrize("order", [LaneOrder.SWU, LaneOrder.SWR, LaneOrder.SEL])
def test_unsupported_order_rejected(order):
    with pytest.raises(ValueError):
        layout_lanes([(10, 10)], 2, order)


def test_empty_layout_has_no_cells():
    layout = layout_lanes([], 3)
    assert layout.cells == []
    assert (layout.width, layout.height) == (0, 0)


def test_cells_take_largest_member_size():
    layout = layout_lanes([(10, 4), (6, 20), (8, 8)], 2)
    for cell in layout.cells:
        assert cell.width == 10
        assert cell.height == 20


def test_nwr_grid_without_gaps_tiles_chunk():
    layout = layout_lanes([(10, 10)] * 4, 2, LaneOrder.NWR)
    assert (layout.columns, layout.rows) == (2, 2)
    assert layout.width == 2 * 10
    assert layout.height == 2 * 10
    union = BoundingBox()
    for cell in layout.cells:
        union.mark(cell.left, cell.bottom)
        union.mark(cell.right, cell.top)
    assert (union.lx, union.by, union.rx, union.ty) == layout.bounds
    total = sum(c.width * c.height for c in layout.cells)
    assert total == layout.width * layout.height


def test_nwr_fills_rows_from_top_left():
    layout = layout_lanes([(10, 10)] * 3, 2, LaneOrder.NWR)
    first, second, third = layout.cells
    assert first.left == 0
    assert first.top == layout.height
    assert first.cy == second.cy
    assert second.cx > first.cx
    assert third.cx == first.cx
    assert third.cy < first.cy


def test_nwd_fills_columns_from_top_left():
    layout = layout_lanes([(10, 10)] * 3, 2, LaneOrder.NWD)
    first, second, third = layout.cells
    assert first.left == 0
    assert first.top == layout.height
    assert first.cx == second.cx
    assert second.cy < first.cy
    assert third.cy == first.cy
    assert third.cx > first.cx


def test_nwd_is_transpose_of_nwr_for_square_cells():
    sizes = [(10, 10)] * 5
    nwr = layout_lanes(sizes, 3, LaneOrder.NWR, 2, 2)
    nwd = layout_lanes(sizes, 3, LaneOrder.NWD, 2, 2)
    assert (nwr.width, nwr.height) == (nwd.height, nwd.width)


def test_gaps_surround_every_cell():
    gap = 4
    layout = layout_lanes([(10, 6)] * 2, 2, LaneOrder.NWR, gap, gap)
    left, right = layout.cells
    assert left.left == gap
    assert right.left - left.right == gap
    assert layout.width - right.right == gap
    assert layout.height - left.top == gap
    assert left.bottom == gap


def test_cell_start_and_end_on_center_line():
    layout = layout_lanes([(10, 10)], 1)
    cell = layout.cells[0]
    assert cell.start == (cell.left, cell.cy)
    assert cell.end == (cell.right, cell.cy)


def test_layout_center_and_offset_agree():
    layout = LaneLayout(width=20, height=30)
    cx, cy = layout.center
    assert layout.origin_offset == (-cx, -cy)
    assert layout.start == (0, cy)
    assert layout.end == (20, cy)


def test_chunk_bounds_cover_all_boxes():
    boxes = [(0, 0, 10, 10), (-5, 3, 2, 20), (4, -7, 8, 1)]
    result = chunk_bounds(boxes)
    assert (result.left, result.bottom, result.right, result.top) == (-5, -7, 10, 20)
    assert result.width == result.right - result.left
    assert result.height == result.top - result.bottom


def test_chunk_bounds_margin_expands_each_side():
    boxes = [(0, 0, 10, 10)]
    plain = chunk_bounds(boxes)
    wide = chunk_bounds(boxes, margin=3)
    assert wide.left == plain.left - 3
    assert wide.right == plain.right + 3
    assert wide.width == plain.width + 6
    assert wide.height == plain.height + 6
    assert wide.center == plain.center
    assert wide.radius == plain.radius


def test_chunk_bounds_offset_points_at_center():
    result = chunk_bounds([(2, 4, 12, 8)])
    assert result.center == ((2 + 12) // 2, (4 + 8) // 2)


def test_chunk_bounds_accepts_bounding_boxes():
    box = BoundingBox()
    box.set_bounds(1, 2, 5, 9)
    assert chunk_bounds([box]) == chunk_bounds([(1, 2, 5, 9)])


def test_chunk_bounds_empty_is_origin():
    result = chunk_bounds([])
    assert result == ChunkBounds(0, 0, 0, 0, 0, 0, 0, 0, 0)


def test_point_box_has_zero_radius():
    result = chunk_bounds([(3, 3, 3, 3)])
    assert result.radius == 0
    assert result.width == 0
    assert result.center == (3, 3)
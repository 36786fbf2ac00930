"""Tests for the layout solver and its inverse."""

import pytest

from patternforge.engine.context import CellKey
from patternforge.engine.layout import (
    calculate_brick_layout,
    calculate_layout,
    cell_at_point,
    cell_center,
)
from patternforge.errors import InvalidConfigError, InvalidContainerError


def test_scenario_tile_size_and_offsets():
    layout = calculate_layout((800, 800), 4, 16, 8)
    assert layout.tile_size == 186
    assert layout.offset_x == 16
    assert layout.offset_y == 16
    assert layout.pitch == 194
    assert (layout.rows, layout.cols) == (4, 4)


def test_grid_is_centered_on_both_axes():
    layout = calculate_layout((1000, 800), 4)
    assert layout.tile_size == 200
    assert layout.offset_x == 100
    assert layout.offset_y == 0


def test_centering_margins_equal():
    layout = calculate_layout((640, 480), 5, 10, 4)
    actual = layout.tile_size * 5 + 4 * 4
    assert layout.offset_x == pytest.approx(640 - layout.offset_x - actual)
    assert layout.offset_y == pytest.approx(480 - layout.offset_y - actual)


def test_cell_center():
    layout = calculate_layout((800, 800), 4, 16, 8)
    assert cell_center(layout, 0, 0) == (109, 109)
    assert cell_center(layout, 1, 2) == (497, 303)


def test_cells_row_major():
    layout = calculate_layout((100, 100), 2)
    assert layout.cells() == [CellKey(0, 0), CellKey(0, 1), CellKey(1, 0), CellKey(1, 1)]


@pytest.mark.parametrize("container", [None, (800,), (0, 800), (800, -1), ("wide", 800)])
def test_invalid_container(container):
    with pytest.raises(InvalidContainerError):
        calculate_layout(container, 4)


def test_container_too_small_for_tiles():
    with pytest.raises(InvalidContainerError):
        calculate_layout((10, 10), 4, 10, 0)


def test_invalid_grid_size():
    with pytest.raises(InvalidConfigError):
        calculate_layout((800, 800), 0)


def test_negative_spacing():
    with pytest.raises(InvalidConfigError):
        calculate_layout((800, 800), 4, 0, -1)


class TestCellAtPoint:
    layout = calculate_layout((800, 800), 4, 16, 8)

    def test_center_maps_back(self):
        for key in self.layout.cells():
            x, y = cell_center(self.layout, key.row, key.col)
            assert cell_at_point(self.layout, x, y) == key

    def test_gap_between_tiles(self):
        # Tile (0,0) spans 16..202; the gap is 202..210
        assert cell_at_point(self.layout, 206, 50) is None

    def test_outside_grid(self):
        assert cell_at_point(self.layout, 5, 5) is None
        assert cell_at_point(self.layout, 795, 795) is None

    def test_tile_edge_inside(self):
        assert cell_at_point(self.layout, 16, 16) == CellKey(0, 0)


class TestBrickLayout:
    def test_odd_rows_shift_by_half_pitch(self):
        layout = calculate_brick_layout((800, 800), 4)
        assert layout.row_shift == pytest.approx(layout.pitch / 2)
        assert layout.row_offset(0) == 0
        assert layout.row_offset(1) == layout.row_shift

    def test_shifted_rows_fit_container(self):
        layout = calculate_brick_layout((800, 800), 4, 0, 8)
        right_edge = layout.offset_x + layout.row_shift + 3 * layout.pitch + layout.tile_size
        assert right_edge == pytest.approx(800)
        assert layout.offset_x == pytest.approx(0)

    def test_single_row_has_no_shift(self):
        assert calculate_brick_layout((800, 800), 1) == calculate_layout((800, 800), 1)

    def test_inverse_follows_shift(self):
        layout = calculate_brick_layout((800, 800), 4)
        x, y = cell_center(layout, 1, 0)
        assert cell_at_point(layout, x, y) == CellKey(1, 0)
        # Left of the shifted row's first tile
        assert cell_at_point(layout, layout.offset_x + 1, y) is None

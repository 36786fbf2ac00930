"""Layout solver: tile size and centering offsets for an N×N grid.

Forward: container + grid parameters -> Layout.
Inverse: point -> CellKey (or None inside gaps / outside the grid).
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from patternforge.engine.context import CellKey
from patternforge.errors import InvalidConfigError, InvalidContainerError


@dataclass(frozen=True)
class Layout:
    tile_size: float
    offset_x: float
    offset_y: float
    rows: int
    cols: int
    line_spacing: float = 0.0
    # Horizontal shift applied to odd rows (brick layouts)
    row_shift: float = 0.0

    @property
    def pitch(self) -> float:
        """Distance between the origins of two neighbouring tiles."""
        return self.tile_size + self.line_spacing

    def row_offset(self, row: int) -> float:
        return self.row_shift if row % 2 == 1 else 0.0

    def cells(self) -> list[CellKey]:
        """All cells in row-major order."""
        return [CellKey(r, c) for r in range(self.rows) for c in range(self.cols)]


def validate_container(container_size: Sequence[float] | None) -> tuple[float, float]:
    if container_size is None or len(container_size) < 2:
        raise InvalidContainerError(
            f"Invalid container size {container_size!r}: expected (width, height)"
        )
    try:
        width, height = float(container_size[0]), float(container_size[1])
    except (TypeError, ValueError) as e:
        raise InvalidContainerError(f"Invalid container size {container_size!r}: {e}") from e
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidContainerError(
            f"Invalid container size {container_size!r}: dimensions must be positive"
        )
    return width, height


def _validate_grid(grid_size: int, border_padding: float, line_spacing: float) -> None:
    if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size < 1:
        raise InvalidConfigError(f"grid_size must be an integer >= 1, got {grid_size!r}")
    if border_padding < 0:
        raise InvalidConfigError(f"border_padding must be >= 0, got {border_padding!r}")
    if line_spacing < 0:
        raise InvalidConfigError(f"line_spacing must be >= 0, got {line_spacing!r}")


def calculate_layout(
    container_size: Sequence[float] | None,
    grid_size: int,
    border_padding: float = 0.0,
    line_spacing: float = 0.0,
) -> Layout:
    """Square tiles sized by the more constraining axis, centered in the padded area."""
    width, height = validate_container(container_size)
    _validate_grid(grid_size, border_padding, line_spacing)

    pattern_w = width - 2 * border_padding
    pattern_h = height - 2 * border_padding
    total_spacing = (grid_size - 1) * line_spacing

    tile_w = (pattern_w - total_spacing) / grid_size
    tile_h = (pattern_h - total_spacing) / grid_size
    tile_size = min(tile_w, tile_h)
    if tile_size <= 0:
        raise InvalidContainerError(
            f"Container {width:g}×{height:g} too small for {grid_size}×{grid_size} grid "
            f"(padding {border_padding:g}, spacing {line_spacing:g})"
        )

    actual_w = tile_size * grid_size + total_spacing
    actual_h = tile_size * grid_size + total_spacing

    return Layout(
        tile_size=tile_size,
        offset_x=border_padding + (pattern_w - actual_w) / 2,
        offset_y=border_padding + (pattern_h - actual_h) / 2,
        rows=grid_size,
        cols=grid_size,
        line_spacing=line_spacing,
    )


def calculate_brick_layout(
    container_size: Sequence[float] | None,
    grid_size: int,
    border_padding: float = 0.0,
    line_spacing: float = 0.0,
) -> Layout:
    """Like calculate_layout, with odd rows shifted right by half a pitch.

    The extra half pitch is reserved horizontally so shifted rows stay inside
    the padded area.
    """
    width, height = validate_container(container_size)
    _validate_grid(grid_size, border_padding, line_spacing)

    pattern_w = width - 2 * border_padding
    pattern_h = height - 2 * border_padding
    total_spacing = (grid_size - 1) * line_spacing
    # Odd rows only exist from two rows up
    half_pitches = 0.5 if grid_size > 1 else 0.0

    # w = n*t + (n-1)*s + half*(t + s)  =>  t = (w - (n-1)*s - half*s) / (n + half)
    tile_w = (pattern_w - total_spacing - half_pitches * line_spacing) / (grid_size + half_pitches)
    tile_h = (pattern_h - total_spacing) / grid_size
    tile_size = min(tile_w, tile_h)
    if tile_size <= 0:
        raise InvalidContainerError(
            f"Container {width:g}×{height:g} too small for {grid_size}×{grid_size} brick grid"
        )

    row_shift = half_pitches * (tile_size + line_spacing)
    actual_w = tile_size * grid_size + total_spacing + row_shift
    actual_h = tile_size * grid_size + total_spacing

    return Layout(
        tile_size=tile_size,
        offset_x=border_padding + (pattern_w - actual_w) / 2,
        offset_y=border_padding + (pattern_h - actual_h) / 2,
        rows=grid_size,
        cols=grid_size,
        line_spacing=line_spacing,
        row_shift=row_shift,
    )


def cell_center(layout: Layout, row: int, col: int) -> tuple[float, float]:
    x = layout.offset_x + layout.row_offset(row) + col * layout.pitch + layout.tile_size / 2
    y = layout.offset_y + row * layout.pitch + layout.tile_size / 2
    return (x, y)


def cell_at_point(layout: Layout, x: float, y: float) -> CellKey | None:
    """Inverse of the layout: which tile contains (x, y)? None for gaps and margins."""
    pitch = layout.pitch
    local_y = y - layout.offset_y
    row = math.floor(local_y / pitch)
    if row < 0 or row >= layout.rows:
        return None

    local_x = x - layout.offset_x - layout.row_offset(row)
    col = math.floor(local_x / pitch)
    if col < 0 or col >= layout.cols:
        return None

    # Reject points in the spacing between tiles
    if local_x - col * pitch > layout.tile_size or local_y - row * pitch > layout.tile_size:
        return None
    return CellKey(row, col)

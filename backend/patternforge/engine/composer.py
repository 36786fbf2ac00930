"""Transform composer: per-cell mirroring, rotation and color assignment.

Effective order on a catalog path, innermost first:
  1. re-center the native box at the origin   translate(-h, -h)
  2. mirror                                   scale(±s, ±s)
  3. rotate about the origin                  rotate(angle)
  4. move to the cell center                  translate(cx, cy)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from patternforge.engine.config import PatternConfig
from patternforge.engine.context import DrawablePart
from patternforge.engine.seeded_random import SeededRandom
from patternforge.engine.transforms import Rotate, Transform

logger = logging.getLogger(__name__)

# Slot assumed for parts that carry none (single-color shapes)
DEFAULT_COLOR_SLOT = 1


@dataclass(frozen=True)
class CellDecoration:
    """Random-stream outcomes for one cell."""

    color_index: int
    flip_h: int = 1
    flip_v: int = 1
    angle: float | None = None


def preserved_flips(seed: int, grid_size: int, row: int, col: int) -> tuple[bool, bool]:
    """Position-derived flips; the +1 keeps the two axes uncorrelated."""
    index = seed + row * grid_size + col
    return (index % 2 == 0, (index + 1) % 2 == 0)


def draw_decoration(config: PatternConfig, row: int, col: int, rng: SeededRandom) -> CellDecoration:
    """Consume this cell's draws: color index, random flips, rotation angle.

    The number of draws depends only on the config, never on whether the
    cell ends up occupied.
    """
    color_index = rng.choice(range(len(config.color_palette)))

    flip_h = flip_v = 1
    if config.preserve_layout:
        should_h, should_v = preserved_flips(config.seed, config.grid_size, row, col)
        if config.mirror.horizontal and should_h:
            flip_h = -1
        if config.mirror.vertical and should_v:
            flip_v = -1
    else:
        if config.mirror.horizontal:
            flip_h = -1 if rng.next() > 0.5 else 1
        if config.mirror.vertical:
            flip_v = -1 if rng.next() > 0.5 else 1

    angle = rng.range(0, 360) if config.rotation_enabled else None
    return CellDecoration(color_index=color_index, flip_h=flip_h, flip_v=flip_v, angle=angle)


def compose_rotation(existing: Transform | None, angle: float, cx: float, cy: float) -> Transform:
    """Add a rotation about the part's final center (cx, cy) to its transform."""
    if not existing:
        return Transform((Rotate(angle, cx, cy),))

    if existing.is_positioned_shape():
        # Between the positioning translate and the mirror scale: pivots on
        # the origin, which the leading translate moves to (cx, cy).
        return existing.insert(1, Rotate(angle))

    anchor = existing.first_translate()
    if anchor is not None:
        return existing.then(Rotate(angle, anchor.x, anchor.y))
    return existing.then(Rotate(angle, cx, cy))


def slot_color(palette: Sequence[str], color_index: int, slot: int | None) -> str:
    """Slot s of a cell with base index b gets palette[(b + s - 1) mod len].

    Slots wrap around the palette: with fewer colors than slots, slot s and
    slot s + len(palette) share a color, so e.g. a one-color palette renders
    every multi-color shape as a solid tile.
    """
    slot = DEFAULT_COLOR_SLOT if slot is None else slot
    return palette[(color_index + slot - 1) % len(palette)]


def compose_cell(
    parts: Sequence[DrawablePart],
    *,
    cx: float,
    cy: float,
    decoration: CellDecoration,
    palette: Sequence[str],
) -> list[DrawablePart]:
    """Finalize the catalog parts of one cell: rotation merged, fill assigned."""
    slots = max((p.color_slot or DEFAULT_COLOR_SLOT for p in parts), default=DEFAULT_COLOR_SLOT)
    if slots > len(palette):
        logger.debug(
            "Shape at (%.1f, %.1f) has %d color slots but palette has %d colors; slots will repeat",
            cx,
            cy,
            slots,
            len(palette),
        )

    composed: list[DrawablePart] = []
    for part in parts:
        transform = part.transform
        if decoration.angle is not None:
            transform = compose_rotation(transform, decoration.angle, cx, cy)
        composed.append(
            replace(
                part,
                transform=transform or None,
                fill=slot_color(palette, decoration.color_index, part.color_slot),
            )
        )
    return composed

"""Shared value types flowing through a generation pass.

Per-cell results → DrawablePart (one or more per occupied cell)
Whole-pass result → ResolvedDocument
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from patternforge.engine.transforms import Transform

if TYPE_CHECKING:
    from patternforge.engine.layout import Layout

_CELL_KEY_RE = re.compile(r"([0-9]+)_([0-9]+)")


class CellKey(NamedTuple):
    """Grid coordinate; canonical string form is "row_col"."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row}_{self.col}"

    @classmethod
    def parse(cls, text: str) -> CellKey:
        match = _CELL_KEY_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"Invalid cell key: {text!r} (expected \"row_col\")")
        return cls(int(match.group(1)), int(match.group(2)))


@dataclass(frozen=True)
class DrawablePart:
    """One SVG element produced by the shape catalog."""

    # circle | rect | path
    kind: str
    attrs: dict[str, Any] = field(default_factory=dict)
    # Color role for multi-color shapes (1 = background, 2 = foreground, ...)
    color_slot: int | None = None
    transform: Transform | None = None
    # Assigned by the composer
    fill: str | None = None


@dataclass(frozen=True)
class ResolvedDocument:
    """Final output of one generation pass, ready for serialization."""

    parts: tuple[DrawablePart, ...]
    canvas_size: tuple[float, float]
    background_color: str
    seed: int = 0
    layout: Layout | None = None
    # Occupied cells in row-major order: key -> shape id
    occupied: dict[CellKey, str] = field(default_factory=dict)

    @property
    def width(self) -> float:
        return self.canvas_size[0]

    @property
    def height(self) -> float:
        return self.canvas_size[1]

    @property
    def num_parts(self) -> int:
        return len(self.parts)

"""Two-layer cell model: cached procedural base layer + sparse manual overrides.

Base layer: seed-derived CellKey -> shape_id for every non-empty cell. It is
rebuilt only when its CacheSignature changes.
Override layer: user edits. An override always wins; a Deleted override forces
the cell empty even where the base layer placed a shape.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from patternforge.engine.config import PatternConfig
from patternforge.engine.context import CellKey
from patternforge.engine.layout import Layout
from patternforge.engine.seeded_random import SeededRandom
from patternforge.errors import InvalidPaletteError, UnknownShapeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeOverride:
    shape_id: str


class Deleted:
    """Override that forces a cell empty."""

    _instance: Deleted | None = None

    def __new__(cls) -> Deleted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DELETED"


DELETED = Deleted()

CellOverride = Union[ShapeOverride, Deleted]
ManualOverrideMap = Mapping[CellKey, CellOverride]


def parse_overrides(raw: Mapping[str, str | None] | None) -> dict[CellKey, CellOverride]:
    """Decode the wire form {"row_col": shape_id | None}; None means deleted."""
    overrides: dict[CellKey, CellOverride] = {}
    for key, value in (raw or {}).items():
        cell = CellKey.parse(key)
        overrides[cell] = DELETED if value is None else ShapeOverride(value)
    return overrides


def dump_overrides(overrides: ManualOverrideMap) -> dict[str, str | None]:
    return {
        str(key): None if isinstance(value, Deleted) else value.shape_id
        for key, value in overrides.items()
    }


@dataclass(frozen=True)
class CacheSignature:
    """Inputs the base layer depends on, compared by value."""

    seed: int
    grid_size: int
    empty_space: float
    shape_palette: tuple[str, ...]

    @classmethod
    def from_config(cls, config: PatternConfig) -> CacheSignature:
        return cls(
            seed=config.seed,
            grid_size=config.grid_size,
            empty_space=config.empty_space,
            shape_palette=tuple(config.shape_palette),
        )


def build_base_layer(config: PatternConfig) -> dict[CellKey, str]:
    """Roll the procedural layer: one empty-space draw (if enabled) then one shape draw per cell.

    Row-major order is the order the random source is consumed in and must
    not change. The empty-space draw only happens when the probability is
    positive, so enabling empty space shifts every later draw.
    """
    if not config.shape_palette:
        raise InvalidPaletteError("Shape palette must not be empty")

    rng = SeededRandom(config.seed)
    cells: dict[CellKey, str] = {}
    for row in range(config.grid_size):
        for col in range(config.grid_size):
            if config.empty_space > 0 and rng.next() * 100 < config.empty_space:
                continue
            cells[CellKey(row, col)] = rng.choice(config.shape_palette)
    return cells


class ProceduralCellCache:
    """Memoized base layer; the check-then-rebuild step is atomic under a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._signature: CacheSignature | None = None
        self._cells: Mapping[CellKey, str] = MappingProxyType({})
        self.rebuild_count = 0

    @property
    def signature(self) -> CacheSignature | None:
        return self._signature

    def cells_for(self, config: PatternConfig) -> Mapping[CellKey, str]:
        signature = CacheSignature.from_config(config)
        with self._lock:
            if signature != self._signature:
                self._cells = MappingProxyType(build_base_layer(config))
                self._signature = signature
                self.rebuild_count += 1
                logger.debug(
                    "Rebuilt base layer for seed=%s grid=%d: %d/%d cells occupied",
                    config.seed,
                    config.grid_size,
                    len(self._cells),
                    config.grid_size**2,
                )
            return self._cells

    def invalidate(self) -> None:
        with self._lock:
            self._signature = None
            self._cells = MappingProxyType({})


def validate_overrides(
    overrides: ManualOverrideMap | None,
    layout: Layout,
    known_shapes: Collection[str],
) -> dict[CellKey, CellOverride]:
    """Drop overrides outside the grid; reject overrides naming unknown shapes."""
    valid: dict[CellKey, CellOverride] = {}
    for key, override in (overrides or {}).items():
        if isinstance(override, ShapeOverride) and override.shape_id not in known_shapes:
            raise UnknownShapeError(f"Override for cell {key} names unknown shape {override.shape_id!r}")
        if not (0 <= key.row < layout.rows and 0 <= key.col < layout.cols):
            logger.warning("Override for cell %s outside %dx%d grid, ignoring", key, layout.rows, layout.cols)
            continue
        valid[key] = override
    return valid


def resolve_cell(
    key: CellKey,
    base: Mapping[CellKey, str],
    overrides: ManualOverrideMap,
) -> str | None:
    """Override layer first, then base layer; None means the cell is empty."""
    override = overrides.get(key)
    if isinstance(override, Deleted):
        return None
    if isinstance(override, ShapeOverride):
        return override.shape_id
    return base.get(key)


def resolve_cells(
    layout: Layout,
    base: Mapping[CellKey, str],
    overrides: ManualOverrideMap,
) -> list[tuple[CellKey, str | None]]:
    """Every cell in row-major order with its resolved shape (or None)."""
    return [(key, resolve_cell(key, base, overrides)) for key in layout.cells()]

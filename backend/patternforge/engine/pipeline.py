"""Pattern engine: validates a config, resolves cells and composes the drawing."""

from __future__ import annotations

import asyncio
import logging
import threading
import time

from patternforge.catalog import ShapeCatalog, get_catalog, load_builtin_shapes
from patternforge.engine.cells import (
    ManualOverrideMap,
    ProceduralCellCache,
    resolve_cells,
    validate_overrides,
)
from patternforge.engine.composer import compose_cell, draw_decoration
from patternforge.engine.config import DECORATION_SEED_OFFSET, PatternConfig
from patternforge.engine.context import CellKey, DrawablePart, ResolvedDocument
from patternforge.engine.layout import Layout, cell_center, validate_container
from patternforge.engine.registry import PatternTypeRegistry, get_registry
from patternforge.engine.seeded_random import SeededRandom
from patternforge.errors import (
    GenerationSupersededError,
    InvalidConfigError,
    InvalidPaletteError,
    UnknownShapeError,
)
from patternforge.svg.serializer import serialize_document

logger = logging.getLogger(__name__)


class PatternEngine:
    """Turns a PatternConfig (plus manual overrides) into a ResolvedDocument."""

    def __init__(
        self,
        catalog: ShapeCatalog | None = None,
        registry: PatternTypeRegistry | None = None,
    ) -> None:
        self.catalog = get_catalog() if catalog is None else catalog
        self.registry = registry or get_registry()
        self.cache = ProceduralCellCache()

    def validate(self, config: PatternConfig) -> Layout:
        """Reject a bad config before any random draw; returns the solved layout."""
        validate_container(config.container_size)
        if config.seed < 0:
            raise InvalidConfigError(f"seed must be >= 0, got {config.seed!r}")
        if not 0 <= config.empty_space <= 100:
            raise InvalidConfigError(f"empty_space must be within 0-100, got {config.empty_space!r}")
        if not config.shape_palette:
            raise InvalidPaletteError("Shape palette must not be empty")
        if not config.color_palette:
            raise InvalidPaletteError("Color palette must not be empty")
        unknown = [s for s in config.shape_palette if s not in self.catalog]
        if unknown:
            raise UnknownShapeError(f"Unknown shape(s) in palette: {', '.join(unknown)}")
        return self.registry.layout(config)

    def generate(
        self,
        config: PatternConfig,
        overrides: ManualOverrideMap | None = None,
    ) -> ResolvedDocument:
        start = time.perf_counter()
        layout = self.validate(config)
        valid_overrides = validate_overrides(overrides, layout, self.catalog)

        base = self.cache.cells_for(config)
        rng = SeededRandom(config.seed + DECORATION_SEED_OFFSET)

        parts: list[DrawablePart] = []
        occupied: dict[CellKey, str] = {}
        for key, shape_id in resolve_cells(layout, base, valid_overrides):
            # Draw for every cell so edits elsewhere never shift this one
            decoration = draw_decoration(config, key.row, key.col, rng)
            if shape_id is None:
                continue
            cx, cy = cell_center(layout, key.row, key.col)
            raw = self.catalog.render(
                shape_id, cx, cy, layout.tile_size, decoration.flip_h, decoration.flip_v
            )
            parts.extend(
                compose_cell(raw, cx=cx, cy=cy, decoration=decoration, palette=config.color_palette)
            )
            occupied[key] = shape_id

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Generated seed=%s %s %dx%d: %d/%d cells, %d parts in %.1fms",
            config.seed,
            config.pattern_type,
            layout.rows,
            layout.cols,
            len(occupied),
            layout.rows * layout.cols,
            len(parts),
            elapsed,
        )
        return ResolvedDocument(
            parts=tuple(parts),
            canvas_size=(float(config.container_size[0]), float(config.container_size[1])),
            background_color=config.background_color,
            seed=config.seed,
            layout=layout,
            occupied=occupied,
        )

    def render(self, config: PatternConfig, overrides: ManualOverrideMap | None = None) -> str:
        return serialize_document(self.generate(config, overrides))

    async def generate_async(
        self,
        config: PatternConfig,
        overrides: ManualOverrideMap | None = None,
    ) -> ResolvedDocument:
        return await asyncio.to_thread(self.generate, config, overrides)


class GenerationSession:
    """Latest-request-wins wrapper for interactive hosts.

    Each submit() supersedes every submission still in flight; superseded
    calls raise GenerationSupersededError instead of returning a stale document.
    """

    def __init__(self, engine: PatternEngine | None = None) -> None:
        self.engine = engine or create_engine()
        self._lock = threading.Lock()
        self._token = 0

    @property
    def latest_token(self) -> int:
        return self._token

    async def submit(
        self,
        config: PatternConfig,
        overrides: ManualOverrideMap | None = None,
    ) -> ResolvedDocument:
        with self._lock:
            self._token += 1
            token = self._token

        doc = await self.engine.generate_async(config, overrides)

        if token != self._token:
            logger.debug("Discarding superseded generation %d (latest %d)", token, self._token)
            raise GenerationSupersededError(f"Generation {token} superseded by {self._token}")
        return doc


def create_engine() -> PatternEngine:
    """Factory: an engine over the built-in catalog and pattern types."""
    return PatternEngine(catalog=load_builtin_shapes())

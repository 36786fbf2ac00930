"""Shared test fixtures."""

from __future__ import annotations

import pytest

from patternforge.catalog import load_builtin_shapes
from patternforge.engine.config import PatternConfig
from patternforge.engine.pipeline import PatternEngine


# The 800/16/8/4 scenario: tile = (800 - 2*16 - 3*8) / 4 = 186
SCENARIO_CONFIG = {
    "seed": 42,
    "container_size": [800, 800],
    "grid_size": 4,
    "border_padding": 16,
    "line_spacing": 8,
    "shape_palette": ["circle_01", "square_01", "hexagon_01"],
    "color_palette": ["#FF6B6B", "#4ECDC4", "#45B7D1"],
}

SINGLE_PART_SHAPES = ("circle_01", "square_01", "hexagon_01", "triangle_01")

FLAG_SHAPES = (
    "flag_cross_01",
    "flag_diagonal_01",
    "flag_quarters_01",
    "flag_border_01",
    "flag_disc_01",
    "flag_pennant_01",
)

# Builtin catalog sizes: 5 primitives, 12 blocks, 6 flags
BUILTIN_SHAPE_COUNT = 23


def fills_by_cell(doc) -> dict:
    """Cell -> fill for documents built from single-part shapes only."""
    return dict(zip(doc.occupied, (p.fill for p in doc.parts)))


@pytest.fixture
def catalog():
    return load_builtin_shapes()


@pytest.fixture
def engine(catalog) -> PatternEngine:
    return PatternEngine(catalog=catalog)


@pytest.fixture
def config() -> PatternConfig:
    return PatternConfig(
        seed=42,
        container_size=(800.0, 800.0),
        grid_size=4,
        border_padding=16.0,
        line_spacing=8.0,
        shape_palette=SINGLE_PART_SHAPES,
        color_palette=("#FF6B6B", "#4ECDC4", "#45B7D1"),
    )

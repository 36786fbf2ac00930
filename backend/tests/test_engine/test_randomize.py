"""Tests for randomize-all."""

import colorsys
import random
import re

import pytest

from patternforge.catalog import ShapeCatalog, SinglePartShape, shape_set
from patternforge.catalog.primitives import circle
from patternforge.engine.config import COLOR_PALETTES
from patternforge.engine.randomize import (
    BORDER_PADDING_OPTIONS,
    LINE_SPACING_OPTIONS,
    MIRROR_OPTIONS,
    hsl_to_hex,
    random_colors,
    randomize_config,
)
from tests.conftest import FLAG_SHAPES


def test_values_drawn_from_option_lists(catalog):
    rng = random.Random(11)
    for _ in range(30):
        config = randomize_config(catalog, rng, seed=5)
        assert config.seed == 5
        assert 3 <= config.grid_size <= 8
        assert config.border_padding in BORDER_PADDING_OPTIONS
        assert config.line_spacing in LINE_SPACING_OPTIONS
        assert 0 <= config.empty_space <= 100
        assert config.mirror in MIRROR_OPTIONS
        assert config.color_palette in COLOR_PALETTES.values()
        assert config.background_color in ("#ffffff", "#000000")
        assert 1 <= len(config.shape_palette) <= 6
        assert set(config.shape_palette) <= set(FLAG_SHAPES)
        assert config.preserve_layout


def test_same_rng_seed_same_config(catalog):
    assert randomize_config(catalog, random.Random(3), seed=1) == randomize_config(
        catalog, random.Random(3), seed=1
    )


def test_randomized_config_generates(engine, catalog):
    config = randomize_config(catalog, random.Random(8), seed=123)
    doc = engine.generate(config)
    assert doc.seed == 123


def test_without_seed_uses_clock(catalog):
    assert randomize_config(catalog, random.Random(0)).seed > 0


def test_falls_back_to_enabled_shapes():
    catalog = ShapeCatalog()
    shape_set(id="misc", name="Misc", catalog=catalog)
    catalog.register(SinglePartShape(id="circle_01", shape_set="misc", fn=circle))
    config = randomize_config(catalog, random.Random(1), seed=1)
    assert config.shape_palette == ("circle_01",)


class TestRandomColors:
    def test_count_and_format(self):
        rng = random.Random(4)
        for _ in range(50):
            colors = random_colors(rng)
            assert 3 <= len(colors) <= 5
            assert all(re.fullmatch(r"#[0-9a-f]{6}", c) for c in colors)

    def test_seeded_rng_reproduces(self):
        assert random_colors(random.Random(21)) == random_colors(random.Random(21))

    def test_odd_positions_near_complement(self):
        colors = random_colors(random.Random(2))
        hues = [colorsys.rgb_to_hls(*(int(c[i:i + 2], 16) / 255 for i in (1, 3, 5)))[0] * 360 for c in colors]
        # Position 1 sits 195 degrees from the base hue at position 0
        assert (hues[1] - hues[0]) % 360 == pytest.approx(195, abs=2)

    @pytest.mark.parametrize(
        "hsl, hex_color",
        [((0, 100, 50), "#ff0000"), ((120, 100, 25), "#008000"), ((240, 100, 50), "#0000ff"), ((0, 0, 50), "#808080")],
    )
    def test_hsl_to_hex(self, hsl, hex_color):
        assert hsl_to_hex(*hsl) == hex_color

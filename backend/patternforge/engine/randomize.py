"""Randomization: randomize-all configs and harmonious color palettes."""

from __future__ import annotations

import colorsys
import logging
import random
import time

from patternforge.catalog import ShapeCatalog
from patternforge.engine.config import COLOR_PALETTES, DEFAULT_PATTERN_TYPE, MirrorConfig, PatternConfig
from patternforge.errors import InvalidPaletteError

logger = logging.getLogger(__name__)

BACKGROUND_OPTIONS = ("#ffffff", "#000000")
MIRROR_OPTIONS = (
    MirrorConfig(horizontal=False, vertical=False),
    MirrorConfig(horizontal=False, vertical=True),
    MirrorConfig(horizontal=True, vertical=False),
    MirrorConfig(horizontal=True, vertical=True),
)
BORDER_PADDING_OPTIONS = (0, 16, 32, 48)
LINE_SPACING_OPTIONS = (0, 16, 32, 48, 64)
GRID_SIZE_RANGE = (3, 8)
MAX_RANDOM_SHAPES = 9

RANDOM_COLOR_COUNT = (3, 5)
RANDOM_SATURATION = (60.0, 90.0)
RANDOM_LIGHTNESS = (40.0, 70.0)

# Preferred shape set; falls back to every enabled shape when absent
PREFERRED_SHAPE_SET = "flags"


def _candidate_shapes(catalog: ShapeCatalog) -> list[str]:
    preferred = [s.id for s in catalog.shapes_in_set(PREFERRED_SHAPE_SET)]
    return preferred or catalog.enabled_ids()


def randomize_config(
    catalog: ShapeCatalog,
    rng: random.Random | None = None,
    *,
    seed: int | None = None,
    container_size: tuple[float, float] = (800.0, 800.0),
) -> PatternConfig:
    rng = rng or random.Random()
    candidates = _candidate_shapes(catalog)
    if not candidates:
        raise InvalidPaletteError("Shape catalog has no enabled shapes to pick from")

    num_shapes = rng.randint(1, min(MAX_RANDOM_SHAPES, len(candidates)))
    palette_name = rng.choice(sorted(COLOR_PALETTES))

    config = PatternConfig(
        seed=seed if seed is not None else int(time.time() * 1000),
        container_size=container_size,
        grid_size=rng.randint(*GRID_SIZE_RANGE),
        border_padding=float(rng.choice(BORDER_PADDING_OPTIONS)),
        line_spacing=float(rng.choice(LINE_SPACING_OPTIONS)),
        empty_space=float(rng.randint(0, 100)),
        shape_palette=tuple(rng.sample(candidates, num_shapes)),
        color_palette=COLOR_PALETTES[palette_name],
        mirror=rng.choice(MIRROR_OPTIONS),
        preserve_layout=True,
        rotation_enabled=rng.random() > 0.5,
        background_color=rng.choice(BACKGROUND_OPTIONS),
        pattern_type=DEFAULT_PATTERN_TYPE,
    )
    logger.debug("Randomized config seed=%s palette=%s shapes=%d", config.seed, palette_name, num_shapes)
    return config


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Hue in degrees, saturation and lightness in percent -> "#rrggbb"."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)
    return "#" + "".join(f"{int(c * 255 + 0.5):02x}" for c in (r, g, b))


def random_colors(rng: random.Random | None = None) -> tuple[str, ...]:
    """3-5 harmonious colors around a random base hue.

    Even positions stay analogous to the base hue, odd positions sit near its
    complement; saturation and lightness are kept in a vivid mid range.
    """
    rng = rng or random.Random()
    count = rng.randint(*RANDOM_COLOR_COUNT)
    base_hue = rng.random() * 360

    colors = []
    for i in range(count):
        if i % 2 == 0:
            hue = (base_hue + (i * 20) % 60) % 360
        else:
            hue = (base_hue + 180 + i * 15) % 360
        saturation = rng.uniform(*RANDOM_SATURATION)
        lightness = rng.uniform(*RANDOM_LIGHTNESS)
        colors.append(hsl_to_hex(hue, saturation, lightness))
    return tuple(colors)

"""PNG export: delegates rasterization to cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def svg_to_png(svg: str, scale: float = 1.0) -> bytes:
    """Render SVG markup to PNG bytes at `scale` times its declared size."""
    if scale <= 0:
        raise ValueError(f"PNG scale must be positive, got {scale!r}")

    import cairosvg

    png_bytes = cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    logger.info("Rasterized SVG to PNG: %d bytes at scale %.2f", len(png_bytes), scale)
    return png_bytes

"""Write SVG markup from a resolved pattern document."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from html import escape
from typing import Any

from patternforge.engine.context import DrawablePart, ResolvedDocument
from patternforge.errors import InvalidCanvasSizeError
from patternforge.utils.math_helpers import format_number

DEFAULT_BACKGROUND = "#ffffff"


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return escape(str(value), quote=True)


def _attr_string(attrs: dict[str, Any]) -> str:
    return " ".join(f'{k}="{_attr_value(v)}"' for k, v in attrs.items())


def _validate_canvas(canvas_size: Sequence[float] | None) -> tuple[float, float]:
    if canvas_size is None or len(canvas_size) != 2:
        raise InvalidCanvasSizeError(f"Invalid canvas size {canvas_size!r}: expected (width, height)")
    try:
        width, height = float(canvas_size[0]), float(canvas_size[1])
    except (TypeError, ValueError) as e:
        raise InvalidCanvasSizeError(f"Invalid canvas size {canvas_size!r}: {e}") from e
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidCanvasSizeError(f"Invalid canvas size {canvas_size!r}: dimensions must be positive")
    return width, height


def part_to_tag(part: DrawablePart) -> str:
    """One part as a self-closing element: geometry, then fill, then transform."""
    attrs = {k: v for k, v in part.attrs.items() if k not in ("fill", "transform")}
    if part.fill:
        attrs["fill"] = part.fill
    if part.transform:
        attrs["transform"] = part.transform.to_svg()
    return f"<{part.kind} {_attr_string(attrs)} />"


def serialize_svg(
    parts: Iterable[DrawablePart],
    canvas_size: Sequence[float] | None,
    background_color: str | None = DEFAULT_BACKGROUND,
) -> str:
    """Generate SVG markup: background rect then every part, viewBox = canvas."""
    width, height = _validate_canvas(canvas_size)
    w, h = format_number(width), format_number(height)
    background = background_color or DEFAULT_BACKGROUND

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}"'
        f' preserveAspectRatio="xMidYMid meet" xmlns="http://www.w3.org/2000/svg">',
        f'  <rect width="{w}" height="{h}" fill="{_attr_value(background)}" />',
    ]
    for part in parts:
        lines.append(f"  {part_to_tag(part)}")
    lines.append("</svg>")
    return "\n".join(lines)


def serialize_document(doc: ResolvedDocument) -> str:
    return serialize_svg(doc.parts, doc.canvas_size, doc.background_color)

"""Pattern configuration: one immutable value object per generation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

# Preset palettes offered to clients
COLOR_PALETTES: dict[str, tuple[str, ...]] = {
    "vibrant": ("#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A", "#98D8C8"),
    "pastel": ("#FFB3BA", "#BAFFC9", "#BAE1FF", "#FFFFBA", "#FFD4BA"),
    "monochrome": ("#1a1a1a", "#4a4a4a", "#7a7a7a", "#aaaaaa", "#dadada"),
    "sunset": ("#FF6B9D", "#C06C84", "#6C5B7B", "#355C7D", "#2A9D8F"),
    "forest": ("#2D4A3E", "#4A7C59", "#8FC93A", "#C9E265", "#E8F5C8"),
    "ocean": ("#05668D", "#028090", "#00A896", "#02C39A", "#F0F3BD"),
    "autumn": ("#8D5524", "#C68642", "#E0AC69", "#F1C27D", "#FFDBAC"),
    "berry": ("#5D001E", "#9A1750", "#C1666B", "#D4A5A5", "#E4C1C1"),
    "neon": ("#FF10F0", "#00F0FF", "#F0FF00", "#FF00F0", "#00FF10"),
    "earth": ("#3D2A1D", "#6B4423", "#8B6635", "#B8915E", "#D4B896"),
}

DEFAULT_PATTERN_TYPE = "gridCentered"

# Offset between the base-layer stream and the per-pass decoration stream.
# Both are derived from the same seed; the offset keeps shape and color
# choices from being drawn from the same positions of the sequence.
DECORATION_SEED_OFFSET = 104729

# Native coordinate box of catalog path shapes (half-size is the re-centering offset)
NATIVE_BOX = 64.0


@dataclass(frozen=True)
class MirrorConfig:
    horizontal: bool = False
    vertical: bool = False


@dataclass(frozen=True)
class PatternConfig:
    """Everything a generation pass needs besides manual overrides."""

    seed: int
    container_size: tuple[float, float] = (800.0, 800.0)
    grid_size: int = 4
    border_padding: float = 0.0
    line_spacing: float = 8.0
    # Percent chance (0-100) that a cell is left empty in the base layer
    empty_space: float = 0.0
    shape_palette: tuple[str, ...] = ("circle_01", "hexagon_01")
    color_palette: tuple[str, ...] = COLOR_PALETTES["vibrant"][:3]
    mirror: MirrorConfig = field(default_factory=MirrorConfig)
    # Deterministic per-cell flips: toggling mirror flags never reshuffles occupancy
    preserve_layout: bool = True
    rotation_enabled: bool = False
    background_color: str = "#ffffff"
    pattern_type: str = DEFAULT_PATTERN_TYPE

    def __post_init__(self) -> None:
        # Accept lists from callers; keep the stored value hashable
        for name in ("container_size", "shape_palette", "color_palette"):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))
        if isinstance(self.mirror, dict):
            object.__setattr__(self, "mirror", MirrorConfig(**self.mirror))

    def with_changes(self, **changes: Any) -> PatternConfig:
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, MirrorConfig):
                value = {"horizontal": value.horizontal, "vertical": value.vertical}
            elif isinstance(value, tuple):
                value = list(value)
            out[f.name] = value
        return out

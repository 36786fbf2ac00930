"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from patternforge.engine.cells import CellOverride, parse_overrides
from patternforge.engine.config import COLOR_PALETTES, DEFAULT_PATTERN_TYPE, MirrorConfig, PatternConfig
from patternforge.engine.context import CellKey


class MirrorModel(BaseModel):
    horizontal: bool = False
    vertical: bool = False


class PatternConfigModel(BaseModel):
    seed: int = Field(..., ge=0, description="Random seed")
    container_size: tuple[float, float] = Field(
        default=(800.0, 800.0), description="Canvas width and height"
    )
    grid_size: int = Field(default=4, ge=1, le=64, description="Tiles per row and column")
    border_padding: float = Field(default=0.0, ge=0)
    line_spacing: float = Field(default=8.0, ge=0)
    empty_space: float = Field(default=0.0, ge=0, le=100, description="Percent chance a cell stays empty")
    shape_palette: list[str] = Field(default_factory=lambda: ["circle_01", "hexagon_01"])
    color_palette: list[str] = Field(default_factory=lambda: list(COLOR_PALETTES["vibrant"][:3]))
    mirror: MirrorModel = Field(default_factory=MirrorModel)
    preserve_layout: bool = True
    rotation_enabled: bool = False
    background_color: str = "#ffffff"
    pattern_type: str = DEFAULT_PATTERN_TYPE

    def to_config(self) -> PatternConfig:
        return PatternConfig(
            seed=self.seed,
            container_size=self.container_size,
            grid_size=self.grid_size,
            border_padding=self.border_padding,
            line_spacing=self.line_spacing,
            empty_space=self.empty_space,
            shape_palette=tuple(self.shape_palette),
            color_palette=tuple(self.color_palette),
            mirror=MirrorConfig(horizontal=self.mirror.horizontal, vertical=self.mirror.vertical),
            preserve_layout=self.preserve_layout,
            rotation_enabled=self.rotation_enabled,
            background_color=self.background_color,
            pattern_type=self.pattern_type,
        )


class GenerateRequest(BaseModel):
    config: PatternConfigModel
    overrides: dict[str, str | None] = Field(
        default_factory=dict,
        description='Manual edits keyed "row_col"; null deletes the cell',
    )

    @field_validator("overrides")
    @classmethod
    def _check_keys(cls, value: dict[str, str | None]) -> dict[str, str | None]:
        for key in value:
            CellKey.parse(key)
        return value

    def to_overrides(self) -> dict[CellKey, CellOverride]:
        return parse_overrides(self.overrides)


class PngRequest(GenerateRequest):
    scale: float = Field(default=1.0, gt=0, description="Output size multiplier")


class CellRequest(BaseModel):
    config: PatternConfigModel
    x: float = Field(..., description="Point x in canvas coordinates")
    y: float = Field(..., description="Point y in canvas coordinates")


class RandomizeRequest(BaseModel):
    seed: int | None = Field(default=None, ge=0, description="Seed for the new pattern (default: now)")
    container_size: tuple[float, float] | None = None


class RandomColorsRequest(BaseModel):
    seed: int | None = Field(default=None, description="Seed for reproducible colors (default: unseeded)")

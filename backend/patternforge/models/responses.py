"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from patternforge.models.requests import PatternConfigModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes_registered: int = 0
    pattern_types_registered: int = 0


class ShapeInfo(BaseModel):
    id: str
    multi_color: bool = False


class ShapeSetInfo(BaseModel):
    id: str
    name: str
    description: str = ""
    multi_color: bool = False
    enabled: bool = True
    shapes: list[ShapeInfo] = Field(default_factory=list)


class ShapesResponse(BaseModel):
    sets: list[ShapeSetInfo] = Field(default_factory=list)
    pattern_types: list[str] = Field(default_factory=list)


class PalettesResponse(BaseModel):
    palettes: dict[str, list[str]] = Field(default_factory=dict)


class LayoutInfo(BaseModel):
    tile_size: float
    offset_x: float
    offset_y: float
    rows: int
    cols: int
    line_spacing: float = 0.0
    row_shift: float = 0.0


class GenerateResponse(BaseModel):
    svg: str
    seed: int
    tile_size: float
    layout: LayoutInfo
    occupied_cells: dict[str, str] = Field(default_factory=dict)
    num_parts: int = 0
    processing_time_ms: float = 0.0


class CellResponse(BaseModel):
    row: int
    col: int
    key: str


class RandomizeResponse(BaseModel):
    config: PatternConfigModel


class RandomColorsResponse(BaseModel):
    colors: list[str]

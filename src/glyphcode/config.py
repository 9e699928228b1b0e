"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, field_validator


class FontConfig(BaseModel):
    font_size: float = 60.0
    spacing: float = 0.1
    corner_radius: float = 2.0 / 60.0
    chord_tolerance: float = 1.0
    dot_size: float = 0.025
    round_corners: bool = False
    origin_x: float = 0.0
    origin_y: float = 0.0

    @field_validator("font_size", "chord_tolerance", "dot_size")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be positive")
        return value


class GcodeConfig(BaseModel):
    feed_speed: float = 500.0
    precision: int = 3
    engage: str = "M3"
    disengage: str = "M5"

    @field_validator("feed_speed")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be positive")
        return value


class WorkAreaConfig(BaseModel):
    left: float = -500.0
    right: float = 500.0
    top: float = 500.0
    bottom: float = -500.0


class Config(BaseModel):
    font: FontConfig = FontConfig()
    gcode: GcodeConfig = GcodeConfig()
    work_area: WorkAreaConfig = WorkAreaConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/glyphcode.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/glyphcode.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)

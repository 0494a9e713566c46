from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

CONFIG_SCHEMA_VERSION = 1
FONT_TYPES = {"antialiased", "solid"}

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
MAP_WIDTH = 80
MAP_HEIGHT = 45
LIMIT_FPS = 60
WINDOW_TITLE = "Rouge?"
DEFAULT_FONT = "consolas"
DEFAULT_FONT_TYPE = "antialiased"
DEFAULT_TILE_SIZE = 12


@dataclass(frozen=True)
class GameConfig:
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    map_width: int = MAP_WIDTH
    map_height: int = MAP_HEIGHT
    limit_fps: int = LIMIT_FPS
    title: str = WINDOW_TITLE
    font: str = DEFAULT_FONT
    font_type: str = DEFAULT_FONT_TYPE
    tile_size: int = DEFAULT_TILE_SIZE
    map_generator: str = "empty"
    fullscreen: bool = False

    def __post_init__(self) -> None:
        for name in ("screen_width", "screen_height", "map_width", "map_height", "limit_fps", "tile_size"):
            _require_positive_int(getattr(self, name), field_name=name)
        for name in ("title", "font", "map_generator"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string")
        if self.font_type not in FONT_TYPES:
            raise ValueError(f"font_type must be one of: {', '.join(sorted(FONT_TYPES))}")
        if not isinstance(self.fullscreen, bool):
            raise ValueError("fullscreen must be a boolean")
        if self.map_width > self.screen_width or self.map_height > self.screen_height:
            raise ValueError("map must fit inside the screen")

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def _require_positive_int(value: Any, *, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    if value <= 0:
        raise ValueError(f"{field_name} must be > 0")
    return value


def load_game_config_json(path: str | Path) -> GameConfig:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return game_config_from_payload(payload)


def game_config_from_payload(payload: Any) -> GameConfig:
    if not isinstance(payload, dict):
        raise ValueError("config payload must be an object")

    overrides = dict(payload)
    schema_version = overrides.pop("schema_version", CONFIG_SCHEMA_VERSION)
    if schema_version != CONFIG_SCHEMA_VERSION:
        raise ValueError(f"unsupported config schema_version: {schema_version}")

    known_fields = {item.name for item in fields(GameConfig)}
    unknown = sorted(key for key in overrides if key not in known_fields)
    if unknown:
        raise ValueError(f"unknown config fields: {', '.join(unknown)}")
    return GameConfig(**overrides)

import json
from pathlib import Path

import pytest

from tilecrawler.content.config import GameConfig, game_config_from_payload, load_game_config_json


def test_defaults_match_classic_constants() -> None:
    config = GameConfig()

    assert (config.screen_width, config.screen_height) == (80, 50)
    assert (config.map_width, config.map_height) == (80, 45)
    assert config.limit_fps == 60
    assert config.title == "Rouge?"
    assert config.map_generator == "empty"
    assert config.fullscreen is False


def test_load_config_overrides_subset_of_fields(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"schema_version": 1, "tile_size": 16, "map_generator": "pillars"}), encoding="utf-8")

    config = load_game_config_json(path)

    assert config.tile_size == 16
    assert config.map_generator == "pillars"
    assert config.map_width == 80


@pytest.mark.parametrize(
    "payload,message",
    [
        ([], "must be an object"),
        ({"schema_version": 2}, "schema_version"),
        ({"colour": "red"}, "unknown config fields: colour"),
        ({"map_width": "80"}, "map_width must be an integer"),
        ({"limit_fps": 0}, "limit_fps must be > 0"),
        ({"font_type": "bitmap"}, "font_type"),
        ({"title": ""}, "title"),
        ({"fullscreen": 1}, "fullscreen"),
        ({"map_width": 81}, "fit inside the screen"),
    ],
)
def test_invalid_payloads_are_rejected(payload, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        game_config_from_payload(payload)


def test_with_overrides_skips_none() -> None:
    config = GameConfig().with_overrides(map_generator=None, fullscreen=True)

    assert config.map_generator == "empty"
    assert config.fullscreen is True

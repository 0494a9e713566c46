from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilecrawler.sim.entity import Entity
from tilecrawler.sim.world import TileMap

if TYPE_CHECKING:
    from tilecrawler.sim.display import Display

KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_CHAR = "char"
KEY_NONE = "none"
KEY_OTHER = "other"
KEY_CODES = {KEY_ENTER, KEY_ESCAPE, KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_CHAR, KEY_NONE, KEY_OTHER}

ACTION_CONTINUE = "continue"
ACTION_EXIT = "exit"

MOVE_DELTAS: dict[str, tuple[int, int]] = {
    KEY_UP: (0, -1),
    KEY_DOWN: (0, 1),
    KEY_LEFT: (-1, 0),
    KEY_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class KeyEvent:
    code: str
    alt: bool = False
    char: str = ""

    def __post_init__(self) -> None:
        if self.code not in KEY_CODES:
            raise ValueError(f"unsupported key code: {self.code}")


def handle_input(event: KeyEvent, tile_map: TileMap, player: Entity, display: Display) -> str:
    """Apply one key event and report whether the loop should keep going."""
    if event.code == KEY_ENTER and event.alt:
        display.set_fullscreen(not display.is_fullscreen())
        return ACTION_CONTINUE
    if event.code == KEY_ESCAPE:
        return ACTION_EXIT

    delta = MOVE_DELTAS.get(event.code)
    if delta is not None:
        player.move_by(delta[0], delta[1], tile_map)
    return ACTION_CONTINUE

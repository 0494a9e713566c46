from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tilecrawler.sim.console import Color, OffscreenConsole
from tilecrawler.sim.entity import Entity
from tilecrawler.sim.world import TileMap

if TYPE_CHECKING:
    from tilecrawler.sim.core import GameSession
    from tilecrawler.sim.display import Display

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_DARK_GROUND: Color = (50, 50, 150)


def render_all(console: OffscreenConsole, tile_map: TileMap, entities: Iterable[Entity]) -> None:
    """Draw entities, then paint terrain backgrounds for every map cell."""
    for entity in entities:
        entity.draw(console)

    for x, y, tile in tile_map.iter_cells():
        background = COLOR_DARK_WALL if tile.block_sight else COLOR_DARK_GROUND
        console.set_char_background(x, y, background)


def render_frame(display: Display, console: OffscreenConsole, session: GameSession) -> None:
    # Present after drawing so the window always shows the frame just built.
    console.clear()
    render_all(console, session.tile_map, session.entities)
    display.blit(
        console,
        (0, 0),
        (session.tile_map.width, session.tile_map.height),
        (0, 0),
        fg_alpha=1.0,
        bg_alpha=1.0,
    )
    display.present()

from __future__ import annotations

from dataclasses import dataclass

from tilecrawler.sim.console import Color, OffscreenConsole
from tilecrawler.sim.world import TileMap


@dataclass
class Entity:
    """Drawable, movable actor placed on a map cell."""

    x: int
    y: int
    glyph: str
    color: Color
    name: str = "entity"

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def move_by(self, dx: int, dy: int, tile_map: TileMap) -> bool:
        """Step by ``(dx, dy)`` unless the destination is off the map or blocked."""
        target_x = self.x + dx
        target_y = self.y + dy
        if not tile_map.in_bounds(target_x, target_y):
            return False
        if tile_map.is_blocked(target_x, target_y):
            return False
        self.x, self.y = target_x, target_y
        return True

    def draw(self, console: OffscreenConsole) -> None:
        console.set_default_foreground(self.color)
        console.put_char(self.x, self.y, self.glyph)

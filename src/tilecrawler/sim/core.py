from __future__ import annotations

from dataclasses import dataclass, field

from tilecrawler.content.config import GameConfig
from tilecrawler.sim.console import OffscreenConsole, WHITE, YELLOW
from tilecrawler.sim.display import Display
from tilecrawler.sim.entity import Entity
from tilecrawler.sim.input import ACTION_EXIT, handle_input
from tilecrawler.sim.render import render_frame
from tilecrawler.sim.world import TileMap, generate_map

LOOP_RUNNING = "running"
LOOP_TERMINATED = "terminated"
PLAYER_GLYPH = "@"
NPC_GLYPH = "@"
NPC_OFFSET_X = -5


@dataclass
class GameSession:
    """Owns the map plus the player and the other entities for one run."""

    tile_map: TileMap
    player: Entity
    others: list[Entity] = field(default_factory=list)

    def __post_init__(self) -> None:
        for entity in self.entities:
            if not self.tile_map.in_bounds(entity.x, entity.y):
                raise ValueError(
                    f"entity '{entity.name}' at ({entity.x}, {entity.y}) is outside the "
                    f"{self.tile_map.width}x{self.tile_map.height} map"
                )

    @property
    def entities(self) -> list[Entity]:
        """Draw order: player first, then the others as added."""
        return [self.player, *self.others]


def build_session(config: GameConfig) -> GameSession:
    tile_map = generate_map(config.map_width, config.map_height, config.map_generator)
    center_x = config.screen_width // 2
    center_y = config.screen_height // 2
    player = Entity(center_x, center_y, PLAYER_GLYPH, WHITE, name="player")
    npc = Entity(center_x + NPC_OFFSET_X, center_y, NPC_GLYPH, YELLOW, name="npc")
    return GameSession(tile_map=tile_map, player=player, others=[npc])


class GameLoop:
    """Clear, render, present, wait for a key, dispatch; repeat until exit."""

    def __init__(
        self,
        display: Display,
        session: GameSession,
        console: OffscreenConsole | None = None,
        *,
        limit_fps: int | None = None,
    ) -> None:
        self.display = display
        self.session = session
        self.console = console or OffscreenConsole(session.tile_map.width, session.tile_map.height)
        self.limit_fps = limit_fps
        self.state = LOOP_RUNNING
        self.frames_rendered = 0

    def render(self) -> None:
        render_frame(self.display, self.console, self.session)
        self.frames_rendered += 1

    def step(self) -> str:
        if self.state == LOOP_TERMINATED:
            return self.state
        if self.display.window_closed():
            self.state = LOOP_TERMINATED
            return self.state

        self.render()
        event = self.display.wait_for_keypress()
        action = handle_input(event, self.session.tile_map, self.session.player, self.display)
        if action == ACTION_EXIT or self.display.window_closed():
            self.state = LOOP_TERMINATED
        return self.state

    def run(self) -> int:
        if self.limit_fps is not None:
            self.display.set_fps(self.limit_fps)
        while self.step() == LOOP_RUNNING:
            pass
        return self.frames_rendered

from __future__ import annotations

from dataclasses import dataclass

from tilecrawler.sim.world import OutOfBoundsError

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
BLANK_GLYPH = " "


def _validate_color(value: Color, *, field_name: str) -> Color:
    if not isinstance(value, tuple) or len(value) != 3:
        raise ValueError(f"{field_name} must be an (r, g, b) tuple")
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ValueError(f"{field_name} channels must be integers in 0..255")
    return value


@dataclass
class ConsoleCell:
    glyph: str = BLANK_GLYPH
    fg: Color = WHITE
    bg: Color = BLACK


class OffscreenConsole:
    """Character buffer composed each frame before it is blitted to the window.

    ``put_char`` only touches glyph and foreground; ``set_char_background`` only
    touches the background, so terrain and entity passes can run in any order.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("console width and height must be > 0")
        self.width = width
        self.height = height
        self.default_fg: Color = WHITE
        self.default_bg: Color = BLACK
        self._cells: list[list[ConsoleCell]] = []
        self.clear()

    def clear(self) -> None:
        self._cells = [
            [ConsoleCell(fg=self.default_fg, bg=self.default_bg) for _ in range(self.height)]
            for _ in range(self.width)
        ]

    def _cell(self, x: int, y: int) -> ConsoleCell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[x][y]

    def set_default_foreground(self, color: Color) -> None:
        self.default_fg = _validate_color(color, field_name="foreground")

    def put_char(self, x: int, y: int, glyph: str) -> None:
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError("glyph must be a single character")
        cell = self._cell(x, y)
        cell.glyph = glyph
        cell.fg = self.default_fg

    def set_char_background(self, x: int, y: int, color: Color) -> None:
        self._cell(x, y).bg = _validate_color(color, field_name="background")

    def get_char(self, x: int, y: int) -> str:
        return self._cell(x, y).glyph

    def get_fg(self, x: int, y: int) -> Color:
        return self._cell(x, y).fg

    def get_bg(self, x: int, y: int) -> Color:
        return self._cell(x, y).bg

from __future__ import annotations

from pathlib import Path
from typing import Any

from tilecrawler.sim.console import BLANK_GLYPH, BLACK, Color, OffscreenConsole
from tilecrawler.sim.display import Display
from tilecrawler.sim.input import (
    KEY_CHAR,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_NONE,
    KEY_OTHER,
    KEY_RIGHT,
    KEY_UP,
    KeyEvent,
)

FONT_FILE_SUFFIXES = {".ttf", ".otf", ".fon"}

pygame: Any | None = None


def _ensure_pygame_imported() -> Any:
    global pygame
    if pygame is None:
        import pygame as pygame_module

        pygame = pygame_module
    return pygame


def _alpha_byte(alpha: float) -> int:
    return max(0, min(255, int(round(alpha * 255))))


def _load_font(font: str, size: int) -> Any:
    pygame_module = _ensure_pygame_imported()
    font_path = Path(font)
    if font_path.suffix.lower() in FONT_FILE_SUFFIXES or len(font_path.parts) > 1:
        if not font_path.is_file():
            raise FileNotFoundError(f"font file not found: {font}")
        return pygame_module.font.Font(str(font_path), size)
    return pygame_module.font.SysFont(font, size)


def translate_key(key: int, mod: int = 0, unicode: str = "") -> KeyEvent:
    """Map a pygame key code + modifier mask onto a ``KeyEvent``."""
    pygame_module = _ensure_pygame_imported()
    alt = bool(mod & pygame_module.KMOD_ALT)
    named = {
        pygame_module.K_RETURN: KEY_ENTER,
        pygame_module.K_KP_ENTER: KEY_ENTER,
        pygame_module.K_ESCAPE: KEY_ESCAPE,
        pygame_module.K_UP: KEY_UP,
        pygame_module.K_DOWN: KEY_DOWN,
        pygame_module.K_LEFT: KEY_LEFT,
        pygame_module.K_RIGHT: KEY_RIGHT,
    }
    code = named.get(key)
    if code is not None:
        return KeyEvent(code=code, alt=alt)
    if len(unicode) == 1 and unicode.isprintable():
        return KeyEvent(code=KEY_CHAR, alt=alt, char=unicode)
    return KeyEvent(code=KEY_OTHER, alt=alt)


class PygameDisplay(Display):
    """Window, glyph rendering and blocking key input on top of pygame.

    Blits land on a logical surface sized ``cells * tile_size``; ``present``
    letterboxes that surface onto the real display, which only differs in
    size while fullscreen.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str,
        font: str,
        font_type: str = "antialiased",
        tile_size: int = 12,
        fullscreen: bool = False,
    ) -> None:
        pygame_module = _ensure_pygame_imported()
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.pixel_size = (width * tile_size, height * tile_size)
        self.antialias = font_type == "antialiased"
        self.fps = 0
        self._fullscreen = False
        self._closed = False
        self._released = False
        self._glyph_cache: dict[tuple[str, Color], Any] = {}

        pygame_module.display.set_caption(title)
        self.screen = pygame_module.display.set_mode(self.pixel_size)
        self.surface = pygame_module.Surface(self.pixel_size)
        self.surface.fill(BLACK)
        self.font = _load_font(font, tile_size)
        self.clock = pygame_module.time.Clock()
        print(
            "[tilecrawler.display] initialized "
            f"driver={pygame_module.display.get_driver()} cells={width}x{height} pixels={self.pixel_size}"
        )
        if fullscreen:
            self.set_fullscreen(True)

    def _render_glyph(self, glyph: str, color: Color) -> Any:
        key = (glyph, color)
        cached = self._glyph_cache.get(key)
        if cached is None:
            cached = self.font.render(glyph, self.antialias, color)
            self._glyph_cache[key] = cached
        return cached

    def set_fps(self, fps: int) -> None:
        self.fps = max(0, int(fps))

    def blit(
        self,
        console: OffscreenConsole,
        src_xy: tuple[int, int],
        size: tuple[int, int],
        dest_xy: tuple[int, int],
        fg_alpha: float = 1.0,
        bg_alpha: float = 1.0,
    ) -> None:
        pygame_module = _ensure_pygame_imported()
        src_x, src_y = src_xy
        width = max(0, min(size[0], console.width - src_x))
        height = max(0, min(size[1], console.height - src_y))
        if width == 0 or height == 0:
            return

        tile = self.tile_size
        bg_layer = pygame_module.Surface((width * tile, height * tile))
        fg_layer = pygame_module.Surface((width * tile, height * tile), pygame_module.SRCALPHA)
        for cell_x in range(width):
            for cell_y in range(height):
                x = src_x + cell_x
                y = src_y + cell_y
                rect = pygame_module.Rect(cell_x * tile, cell_y * tile, tile, tile)
                bg_layer.fill(console.get_bg(x, y), rect)
                glyph = console.get_char(x, y)
                if glyph == BLANK_GLYPH:
                    continue
                glyph_surface = self._render_glyph(glyph, console.get_fg(x, y))
                fg_layer.blit(glyph_surface, glyph_surface.get_rect(center=rect.center))

        bg_layer.set_alpha(_alpha_byte(bg_alpha))
        fg_layer.set_alpha(_alpha_byte(fg_alpha))
        dest_px = (dest_xy[0] * tile, dest_xy[1] * tile)
        self.surface.blit(bg_layer, dest_px)
        self.surface.blit(fg_layer, dest_px)

    def present(self) -> None:
        pygame_module = _ensure_pygame_imported()
        display_w, display_h = self.screen.get_size()
        surface_w, surface_h = self.surface.get_size()
        scale = min(display_w / surface_w, display_h / surface_h)
        scaled_size = (int(surface_w * scale), int(surface_h * scale))
        offset = (max(0, (display_w - scaled_size[0]) // 2), max(0, (display_h - scaled_size[1]) // 2))

        self.screen.fill(BLACK)
        if scaled_size != (surface_w, surface_h):
            self.screen.blit(pygame_module.transform.smoothscale(self.surface, scaled_size), offset)
        else:
            self.screen.blit(self.surface, offset)
        pygame_module.display.flip()
        if self.fps:
            self.clock.tick(self.fps)

    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def set_fullscreen(self, fullscreen: bool) -> None:
        pygame_module = _ensure_pygame_imported()
        if fullscreen == self._fullscreen:
            return
        if fullscreen:
            self.screen = pygame_module.display.set_mode((0, 0), pygame_module.FULLSCREEN)
        else:
            self.screen = pygame_module.display.set_mode(self.pixel_size)
        self._fullscreen = fullscreen
        print(f"[tilecrawler.display] fullscreen={fullscreen} window={self.screen.get_size()}")

    def window_closed(self) -> bool:
        return self._closed

    def wait_for_keypress(self) -> KeyEvent:
        pygame_module = _ensure_pygame_imported()
        while True:
            event = pygame_module.event.wait()
            if event.type == pygame_module.QUIT:
                self._closed = True
                return KeyEvent(code=KEY_NONE)
            if event.type == pygame_module.KEYDOWN:
                return translate_key(event.key, event.mod, getattr(event, "unicode", ""))

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        self._glyph_cache.clear()
        _ensure_pygame_imported().display.quit()

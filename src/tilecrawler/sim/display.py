from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tilecrawler.sim.console import OffscreenConsole
    from tilecrawler.sim.input import KeyEvent


class Display:
    """Display capability consumed by the render pipeline and game loop.

    Concrete displays own the window, font and event queue. The simulation
    side only ever talks to this surface, so tests can drive the loop with a
    scripted implementation.
    """

    def set_fps(self, fps: int) -> None:
        """Request a target frame rate; a hint, not a guarantee."""
        raise NotImplementedError

    def blit(
        self,
        console: OffscreenConsole,
        src_xy: tuple[int, int],
        size: tuple[int, int],
        dest_xy: tuple[int, int],
        fg_alpha: float = 1.0,
        bg_alpha: float = 1.0,
    ) -> None:
        """Composite a region of ``console`` onto the window surface."""
        raise NotImplementedError

    def present(self) -> None:
        """Flush the window surface to the screen."""
        raise NotImplementedError

    def is_fullscreen(self) -> bool:
        raise NotImplementedError

    def set_fullscreen(self, fullscreen: bool) -> None:
        raise NotImplementedError

    def window_closed(self) -> bool:
        raise NotImplementedError

    def wait_for_keypress(self) -> KeyEvent:
        """Block until one key event is available and return it."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the window; safe to call more than once."""

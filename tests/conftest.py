from __future__ import annotations

from typing import Callable

import pytest

from tilecrawler.sim.console import OffscreenConsole
from tilecrawler.sim.display import Display
from tilecrawler.sim.input import KEY_NONE, KeyEvent


class ScriptedDisplay(Display):
    """Display double that replays a fixed list of key events."""

    def __init__(self, events: list[KeyEvent], *, close_after: int | None = None) -> None:
        self.events = list(events)
        self.close_after = close_after
        self.calls: list[str] = []
        self.blits: list[tuple[tuple[int, int], tuple[int, int], tuple[int, int], float, float]] = []
        self.snapshots: list[list[str]] = []
        self.fps: int | None = None
        self.fullscreen = False
        self.closed = False
        self.keys_consumed = 0

    def set_fps(self, fps: int) -> None:
        self.fps = fps

    def blit(self, console: OffscreenConsole, src_xy, size, dest_xy, fg_alpha=1.0, bg_alpha=1.0) -> None:
        self.calls.append("blit")
        self.blits.append((src_xy, size, dest_xy, fg_alpha, bg_alpha))
        self.snapshots.append(
            ["".join(console.get_char(x, y) for x in range(console.width)) for y in range(console.height)]
        )

    def present(self) -> None:
        self.calls.append("present")

    def is_fullscreen(self) -> bool:
        return self.fullscreen

    def set_fullscreen(self, fullscreen: bool) -> None:
        self.calls.append(f"fullscreen={fullscreen}")
        self.fullscreen = fullscreen

    def window_closed(self) -> bool:
        return self.closed

    def wait_for_keypress(self) -> KeyEvent:
        self.calls.append("wait")
        self.keys_consumed += 1
        if self.close_after is not None and self.keys_consumed > self.close_after:
            self.closed = True
            return KeyEvent(code=KEY_NONE)
        if not self.events:
            self.closed = True
            return KeyEvent(code=KEY_NONE)
        return self.events.pop(0)


@pytest.fixture
def scripted_display() -> Callable[..., ScriptedDisplay]:
    def build(events: list[KeyEvent], **kwargs) -> ScriptedDisplay:
        return ScriptedDisplay(events, **kwargs)

    return build

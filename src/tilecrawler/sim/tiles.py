from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A single map cell and its movement/sight flags."""

    blocked: bool = False
    block_sight: bool = False

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

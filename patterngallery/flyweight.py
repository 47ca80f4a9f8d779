"""Fonts shared through a pool keyed by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Font:
    """A font identified by its key."""

    key: str


class FontFactory:
    """Hands out one shared Font per key."""

    def __init__(self) -> None:
        self._pool: dict[str, Font] = {}

    def get_font(self, key: str) -> Font:
        font = self._pool.get(key)
        if font is None:
            font = Font(key)
            self._pool[key] = font
        return font

    def clear(self) -> None:
        self._pool.clear()

    def __len__(self) -> int:
        return len(self._pool)
"""Saving and restoring an object's state through mementos."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Memento:
    """A snapshot of an originator's state."""

    state: str


class Originator:
    """An object whose state can be captured and restored."""

    def __init__(self, state: str = "") -> None:
        self.state = state

    def create_memento(self) -> Memento:
        return Memento(self.state)

    def set_memento(self, memento: Memento) -> None:
        self.state = memento.state
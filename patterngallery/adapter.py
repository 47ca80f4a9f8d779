"""Adapting an old interface to the one clients now expect."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Target(ABC):
    """The interface clients call."""

    @abstractmethod
    def process(self):
        """Do the work."""


class Adaptee(ABC):
    """The older interface that already does the work."""

    @abstractmethod
    def foo(self, data: int):
        """Consume a value."""

    @abstractmethod
    def bar(self) -> int:
        """Produce a value."""


class Adapter(Target):
    """Presents an Adaptee as a Target by combining its two calls."""

    def __init__(self, adaptee: Adaptee) -> None:
        self.adaptee = adaptee

    def process(self):
        """Take a value from bar, pass it to foo and return foo's result."""
        data = self.adaptee.bar()
        return self.adaptee.foo(data)
"""Trees of components processed uniformly, nodes and leaves alike."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A part of a tree."""

    @abstractmethod
    def process(self) -> list[str]:
        """Process this part and return the names processed, in order."""


class Composite(Component):
    """A tree node holding other components."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.elements: list[Component] = []

    def add(self, element: Component) -> None:
        self.elements.append(element)

    def remove(self, element: Component) -> None:
        """Remove every occurrence of the element; absent elements are ignored."""
        self.elements = [item for item in self.elements if item is not element]

    def process(self) -> list[str]:
        processed = [self.name]
        for element in self.elements:
            processed.extend(element.process())
        return processed


class Leaf(Component):
    """A tree node with no children."""

    def __init__(self, name: str) -> None:
        self.name = name

    def process(self) -> list[str]:
        return [self.name]


def invoke(component: Component) -> list[str]:
    """Process any component, whether node or leaf."""
    return component.process()
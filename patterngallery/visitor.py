"""Elements that accept visitors, dispatching on both element and visitor."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class Element(ABC):
    """Something a visitor can process."""

    @abstractmethod
    def accept(self, visitor: Visitor):
        """Hand this element to the visitor's matching method."""


class ElementA(Element):
    def accept(self, visitor: Visitor):
        return visitor.visit_element_a(self)


class ElementB(Element):
    def accept(self, visitor: Visitor):
        return visitor.visit_element_b(self)


class Visitor(ABC):
    """An operation over every kind of element."""

    @abstractmethod
    def visit_element_a(self, element: ElementA):
        """Process an ElementA."""

    @abstractmethod
    def visit_element_b(self, element: ElementB):
        """Process an ElementB."""


class Visitor1(Visitor):
    def visit_element_a(self, element: ElementA) -> str:
        return _say("Visitor1 is processing ElementA")

    def visit_element_b(self, element: ElementB) -> str:
        return _say("Visitor1 is processing ElementB")


class Visitor2(Visitor):
    def visit_element_a(self, element: ElementA) -> str:
        return _say("Visitor2 is processing ElementA")

    def visit_element_b(self, element: ElementB) -> str:
        return _say("Visitor2 is processing ElementB")


def main(argv: list[str] | None = None) -> int:
    """Visit an ElementB and then an ElementA."""
    if argv is None:
        argv = sys.argv[1:]
    visitor = Visitor2()
    ElementB().accept(visitor)
    ElementA().accept(visitor)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
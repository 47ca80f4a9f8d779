"""Beverages whose price and description grow with condiments."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Beverage(ABC):
    """A drink with a description and a cost."""

    def description(self) -> str:
        return "Unkown Beverage"

    @abstractmethod
    def cost(self) -> float:
        """Price of the drink."""


class Espresso(Beverage):
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> float:
        return 1.99


class HouseBlend(Beverage):
    def description(self) -> str:
        return "House Blend Coffee"

    def cost(self) -> float:
        return 0.89


class CondimentDecorator(Beverage):
    """A beverage that wraps another beverage."""

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage


class Mocha(CondimentDecorator):
    def description(self) -> str:
        return self.beverage.description() + ", Mocha"

    def cost(self) -> float:
        return 0.20 + self.beverage.cost()


def main(argv: list[str] | None = None) -> int:
    """Print two drinks with mocha added."""
    if argv is None:
        argv = sys.argv[1:]
    for drink in (Mocha(Espresso()), Mocha(HouseBlend())):
        print(f"{drink.description()} ${drink.cost():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Drinks prepared by a fixed recipe with replaceable steps."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Callable


def _say(text: str) -> str:
    print(text)
    return text


def _read_answer() -> str:
    try:
        return input()
    except EOFError:
        return ""


def _answer_is_yes(answer: str) -> bool:
    stripped = answer.strip()
    return stripped[:1] == "y"


class CaffeineBeverage(ABC):
    """A hot drink made by the same sequence of steps."""

    def prepare_recipe(self) -> list[str]:
        """Run the recipe and return the steps taken."""
        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        if self.customer_wants_condiments():
            steps.append(self.add_condiments())
        return steps

    @abstractmethod
    def brew(self) -> str:
        """Brew the drink."""

    @abstractmethod
    def add_condiments(self) -> str:
        """Add whatever goes with the drink."""

    def boil_water(self) -> str:
        return _say("Boiling water")

    def pour_in_cup(self) -> str:
        return _say("Pouring into cup")

    def customer_wants_condiments(self) -> bool:
        return True


class _AskingBeverage(CaffeineBeverage):
    def __init__(self, ask: Callable[[], str] | None = None) -> None:
        self.ask = ask if ask is not None else _read_answer

    def customer_wants_condiments(self) -> bool:
        print("Do you want to add condiments?")
        return _answer_is_yes(self.ask())


class Coffee(_AskingBeverage):
    """Coffee; asks before adding sugar and milk."""

    def __init__(self, ask: Callable[[], str] | None = None) -> None:
        super().__init__(ask)

    def brew(self) -> str:
        return _say("Dripping Coffee through filter")

    def add_condiments(self) -> str:
        return _say("Adding Sugar and Milk")

    def customer_wants_condiments(self) -> bool:
        return super().customer_wants_condiments()


class Tea(_AskingBeverage):
    """Tea; asks before adding lemon."""

    def __init__(self, ask: Callable[[], str] | None = None) -> None:
        super().__init__(ask)

    def brew(self) -> str:
        return _say("Steeping the tea")

    def add_condiments(self) -> str:
        return _say("Adding Lemon")

    def customer_wants_condiments(self) -> bool:
        return super().customer_wants_condiments()


def main(argv: list[str] | None = None) -> int:
    """Make tea and then coffee, asking about condiments on stdin."""
    if argv is None:
        argv = sys.argv[1:]
    tea = Tea()
    coffee = Coffee()
    print("\nMaking tea...")
    tea.prepare_recipe()
    print("\nMaking coffee...")
    coffee.prepare_recipe()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
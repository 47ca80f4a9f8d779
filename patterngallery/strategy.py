"""Ducks whose flying and quacking are pluggable behaviours."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class FlyBehavior(ABC):
    """How a duck flies."""

    @abstractmethod
    def fly(self) -> str:
        """Fly, print what happened and return it."""


class FlyWithWings(FlyBehavior):
    def fly(self) -> str:
        return _say("I'm flying")


class FlyNoWay(FlyBehavior):
    def fly(self) -> str:
        return _say("I can't fly")


class QuackBehavior(ABC):
    """How a duck quacks."""

    @abstractmethod
    def quack(self) -> str:
        """Quack, print the sound and return it."""


class Quack(QuackBehavior):
    def quack(self) -> str:
        return _say("Quack")


class MuteQuack(QuackBehavior):
    def quack(self) -> str:
        return _say("Mute Quack")


class Squeak(QuackBehavior):
    def quack(self) -> str:
        return _say("Squeak")


class Duck:
    """A duck that delegates flying and quacking to its behaviours."""

    def __init__(self, fly_behavior: FlyBehavior, quack_behavior: QuackBehavior) -> None:
        self.fly_behavior = fly_behavior
        self.quack_behavior = quack_behavior

    def perform_fly(self) -> str:
        return self.fly_behavior.fly()

    def perform_quack(self) -> str:
        return self.quack_behavior.quack()

    def swim(self) -> str:
        return _say("All ducks swim!")

    def display(self) -> str:
        """A plain duck has nothing to show."""
        return ""


class MallardDuck(Duck):
    def __init__(self) -> None:
        super().__init__(FlyWithWings(), Quack())

    def display(self) -> str:
        return _say("I'm a real mallard duck")


class RedHeadDuck(Duck):
    def __init__(self) -> None:
        super().__init__(FlyWithWings(), Quack())

    def display(self) -> str:
        return _say("I'm a real red head duck")


class DecoyDuck(Duck):
    def __init__(self) -> None:
        super().__init__(FlyNoWay(), MuteQuack())

    def display(self) -> str:
        return _say("I'm a real decoy duck")


class RubberDuck(Duck):
    def __init__(self) -> None:
        super().__init__(FlyNoWay(), Squeak())

    def display(self) -> str:
        return _say("I'm a real rubber duck")


def main(argv: list[str] | None = None) -> int:
    """Show every kind of duck in turn."""
    if argv is None:
        argv = sys.argv[1:]
    for duck in (MallardDuck(), RedHeadDuck(), DecoyDuck(), RubberDuck()):
        duck.display()
        duck.swim()
        duck.perform_quack()
        duck.perform_fly()
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Building a house step by step under the direction of a director."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class House:
    """A house; records the parts built into it, in order."""

    parts: list[str] = field(default_factory=list)


class StoneHouse(House):
    """A house built of stone."""


class HouseBuilder(ABC):
    """Builds the parts of a house; the director decides the order."""

    house: House

    def result(self) -> House:
        """Return the house being built."""
        return self.house

    @abstractmethod
    def build_part1(self) -> None:
        """Build the first part."""

    @abstractmethod
    def build_part2(self) -> None:
        """Build the second part."""

    @abstractmethod
    def build_part3(self) -> bool:
        """Build the third part; return whether the fourth is wanted."""

    @abstractmethod
    def build_part4(self) -> None:
        """Build the fourth part."""

    @abstractmethod
    def build_part5(self) -> None:
        """Build the fifth part."""


class StoneHouseBuilder(HouseBuilder):
    """Builds a StoneHouse."""

    def __init__(self) -> None:
        self.house = StoneHouse()

    def build_part1(self) -> None:
        self.house.parts.append("part1")

    def build_part2(self) -> None:
        self.house.parts.append("part2")

    def build_part3(self) -> bool:
        self.house.parts.append("part3")
        return True

    def build_part4(self) -> None:
        self.house.parts.append("part4")

    def build_part5(self) -> None:
        self.house.parts.append("part5")


class HouseDirector:
    """Runs a builder through the fixed construction sequence."""

    def __init__(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def construct(self) -> House:
        """Build part 1, part 2 four times, part 3, part 4 if wanted, then part 5."""
        self.builder.build_part1()
        for _ in range(4):
            self.builder.build_part2()
        if self.builder.build_part3():
            self.builder.build_part4()
        self.builder.build_part5()
        return self.builder.result()
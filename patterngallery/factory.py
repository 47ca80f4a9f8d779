"""Pizza stores that decide which pizza to make for an order."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Pizza:
    """A pizza with its dough, sauce and toppings."""

    name: str = ""
    dough: str = ""
    sauce: str = ""
    toppings: list[str] = field(default_factory=list)

    def prepare(self) -> list[str]:
        """Print the preparation steps and return them."""
        lines = [
            f"Preparing {self.name}",
            "Tossing dough...",
            "Adding sauce...",
            "Adding toppings: ",
        ]
        lines.extend(f"  {topping}" for topping in self.toppings)
        for line in lines:
            print(line)
        return lines

    def bake(self) -> str:
        text = "Baking for 25 min at 350 degrees "
        print(text)
        return text

    def cut(self) -> str:
        text = "Cut the pizza into diagonal slices "
        print(text)
        return text

    def box(self) -> str:
        text = "Boxing in official PizzaStore boxes"
        print(text)
        return text

    def __str__(self) -> str:
        toppings = "".join(f"  {topping}\n" for topping in self.toppings)
        return f"\n---- {self.name}----\n{self.dough}\n{self.sauce}\n{toppings}\n"


class NYStyleCheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(
            name="NY Style sauce and cheese pizza",
            dough="Thin crust dough",
            sauce="Marinara sauce",
            toppings=["Gratted reggiano cheese"],
        )


class NYStylePepperoniPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(
            name="NY style pepperoni pizza",
            dough="Thin crust dough",
            sauce="Marinara sauce",
            toppings=[
                "Grated reggiano cheese",
                "Sliced pepperoni",
                "Garlic",
                "Onion",
                "Mushrooms",
                "Red pepper",
            ],
        )


class ChicagoStyleCheesePizza(Pizza):
    def __init__(self) -> None:
        super().__init__(
            name="Chicago Style Deep Dish Pizza",
            dough="Extra thick crust dough",
            sauce="Plum tomato sauce",
            toppings=["Shredded mozzarella"],
        )


class ChicagoStylePepperoniPizza(Pizza):
    def __init__(self) -> None:
        super().__init__(
            name="Chicago Style Pepperoni Pizza",
            dough="Extra thick crust dough",
            sauce="Plum tomato sauce",
            toppings=[
                "Shredded mozzarella",
                "Sliced pepperoni",
                "No olives or eggplant because that should not go on a pizza",
            ],
        )


class PizzaStore(ABC):
    """A store that takes orders; subclasses choose the pizza style."""

    def order_pizza(self, kind: str) -> Pizza | None:
        """Make and box a pizza of the given kind, or return None if unknown."""
        pizza = self.create_pizza(kind)
        if pizza is not None:
            print(f"\n--- Making a {pizza.name} ---\n ")
            pizza.prepare()
            pizza.bake()
            pizza.cut()
            pizza.box()
        return pizza

    @abstractmethod
    def create_pizza(self, kind: str) -> Pizza | None:
        """Return a new pizza of the given kind, or None if there is none."""


class NYPizzaStore(PizzaStore):
    _MENU: dict[str, type[Pizza]] = {
        "cheese": NYStyleCheesePizza,
        "pepperoni": NYStylePepperoniPizza,
    }

    def create_pizza(self, kind: str) -> Pizza | None:
        pizza_class = self._MENU.get(kind)
        return pizza_class() if pizza_class is not None else None


class ChicagoPizzaStore(PizzaStore):
    _MENU: dict[str, type[Pizza]] = {
        "cheese": ChicagoStyleCheesePizza,
        "pepperoni": ChicagoStylePepperoniPizza,
    }

    def create_pizza(self, kind: str) -> Pizza | None:
        pizza_class = self._MENU.get(kind)
        return pizza_class() if pizza_class is not None else None


def main(argv: list[str] | None = None) -> int:
    """Order a cheese pizza from each store."""
    if argv is None:
        argv = sys.argv[1:]
    NYPizzaStore().order_pizza("cheese")
    ChicagoPizzaStore().order_pizza("cheese")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
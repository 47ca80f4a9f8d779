import pytest

from patterngallery.factory import (
    ChicagoPizzaStore,
    ChicagoStyleCheesePizza,
    ChicagoStylePepperoniPizza,
    NYPizzaStore,
    NYStyleCheesePizza,
    NYStylePepperoniPizza,
    PizzaStore,
    main,
)


@pytest.mark.parametrize(
    "store, kind, expected",
    [
        (NYPizzaStore(), "cheese", NYStyleCheesePizza),
        (NYPizzaStore(), "pepperoni", NYStylePepperoniPizza),
        (ChicagoPizzaStore(), "cheese", ChicagoStyleCheesePizza),
        (ChicagoPizzaStore(), "pepperoni", ChicagoStylePepperoniPizza),
    ],
)
def test_create_pizza_picks_style(store, kind, expected):
    assert type(store.create_pizza(kind)) is expected


def test_ny_cheese_fields():
    pizza = NYPizzaStore().create_pizza("cheese")
    assert pizza.name == "NY Style sauce and cheese pizza"
    assert pizza.dough == "Thin crust dough"
    assert pizza.sauce == "Marinara sauce"
    assert pizza.toppings == ["Gratted reggiano cheese"]


def test_unknown_kind_gives_none(capsys):
    assert NYPizzaStore().create_pizza("veggie") is None
    assert ChicagoPizzaStore().order_pizza("veggie") is None
    assert capsys.readouterr().out == ""


def test_order_pizza_prints_steps(capsys):
    pizza = ChicagoPizzaStore().order_pizza("cheese")
    out = capsys.readouterr().out
    assert pizza.name == "Chicago Style Deep Dish Pizza"
    assert "--- Making a Chicago Style Deep Dish Pizza ---" in out
    assert out.index("Preparing") < out.index("Baking") < out.index("Cut") < out.index("Boxing")


def test_prepare_lists_every_topping():
    pizza = NYStylePepperoniPizza()
    lines = pizza.prepare()
    assert lines[0] == "Preparing NY style pepperoni pizza"
    assert lines[-len(pizza.toppings):] == ["  " + t for t in pizza.toppings]


def test_fixed_steps():
    pizza = ChicagoStylePepperoniPizza()
    assert pizza.bake() == "Baking for 25 min at 350 degrees "
    assert pizza.cut() == "Cut the pizza into diagonal slices "
    assert pizza.box() == "Boxing in official PizzaStore boxes"


def test_str_format():
    text = str(ChicagoStyleCheesePizza())
    assert text.startswith("\n---- Chicago Style Deep Dish Pizza----\n")
    assert "Extra thick crust dough\nPlum tomato sauce\n" in text
    assert text.endswith("  Shredded mozzarella\n\n")


def test_pizza_store_is_abstract():
    with pytest.raises(TypeError):
        PizzaStore()


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "NY Style sauce and cheese pizza" in out
    assert "Chicago Style Deep Dish Pizza" in out
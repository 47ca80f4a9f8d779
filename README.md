# patterngallery

A gallery of classic object-oriented design patterns, each one a small
module you can read, import and run. No third-party libraries are needed.

| Module | Pattern |
| --- | --- |
| `patterngallery.strategy` | Strategy: ducks with interchangeable fly and quack behaviours |
| `patterngallery.command` | Command: a one-slot remote control and a macro command |
| `patterngallery.decorator` | Decorator: beverages wrapped in condiments |
| `patterngallery.template` | Template method: brewing tea and coffee |
| `patterngallery.factory` | Factory method: New York and Chicago pizza stores |
| `patterngallery.observer` | Observer: a weather station, and a file splitter with progress listeners |
| `patterngallery.interpreter` | Interpreter: a tiny `+`/`-` language over one-letter variables |
| `patterngallery.visitor` | Visitor: double dispatch over two element types |
| `patterngallery.state` | State: a network processor moving between `OPEN`, `CLOSE` and `CONNECT` |
| `patterngallery.singleton` | Singleton: one lazily created, thread-safe instance |
| `patterngallery.prototype` | Prototype: splitters that clone themselves |
| `patterngallery.flyweight` | Flyweight: a factory handing out one shared `Font` per key |
| `patterngallery.memento` | Memento: saving and restoring an originator's state |
| `patterngallery.composite` | Composite: a tree of composites and leaves |
| `patterngallery.adapter` | Adapter: presenting an `Adaptee` as a `Target` |
| `patterngallery.builder` | Builder: a director assembling a stone house |
| `patterngallery.bridge` | Bridge: messager features kept apart from their platform |

Most methods that print something also return what they printed, so the
examples can be inspected and tested as well as watched.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each of these commands runs the demonstration for one pattern and prints
what happens:

```
patterngallery-strategy
patterngallery-command
patterngallery-decorator
patterngallery-template
patterngallery-factory
patterngallery-observer
patterngallery-interpreter
patterngallery-visitor
```

`patterngallery-template` asks on standard input whether you want
condiments for each drink; an answer starting with `y` adds them.

## Using the modules

Strategy, where behaviour is chosen by composition:

```python
from patterngallery.strategy import MallardDuck, RubberDuck

duck = MallardDuck()
duck.display()        # I'm a real mallard duck
duck.perform_fly()    # I'm flying
duck.perform_quack()  # Quack

RubberDuck().perform_quack()  # Squeak
```

Command, with a remote and a macro:

```python
from patterngallery.command import (
    ConcreteCommand1, ConcreteCommand2, LightOnCommand, MacroCommand, SimpleRemoteControl,
)

remote = SimpleRemoteControl()
remote.set_command(LightOnCommand("my light"))
remote.button_was_pressed()   # my light was turned on

macro = MacroCommand()
macro.add_command(ConcreteCommand1("Arg ###"))
macro.add_command(ConcreteCommand2("Arg $$$"))
macro.execute()
```

Pressing the button before a command is set raises `RuntimeError`.

Decorator, wrapping one beverage in another:

```python
from patterngallery.decorator import Espresso, Mocha

drink = Mocha(Espresso())
print(f"{drink.description()} ${drink.cost():g}")   # Espresso, Mocha $2.19
```

Template method, with the question answered by a function instead of
standard input:

```python
from patterngallery.template import Tea

steps = Tea(ask=lambda: "y").prepare_recipe()
# ['Boiling water', 'Steeping the tea', 'Pouring into cup', 'Adding Lemon']
```

Factory method, ordering from a store:

```python
from patterngallery.factory import NYPizzaStore

pizza = NYPizzaStore().order_pizza("cheese")
print(pizza)
```

`order_pizza` returns `None` for a kind the store does not make.

Observer, registering a display with a weather station:

```python
from patterngallery.observer import WeatherData, CurrentConditionsDisplay

weather = WeatherData()
display = CurrentConditionsDisplay(weather)
display.register()
weather.set_measurements(80, 65, 30.4)
# Current condidions: 80F degrees and 65% humidity
```

`FileSplitter(path, parts).split()` sends the fractions `1/parts` up to
`1.0` to every listener added with `add_progress` and returns them.

Interpreter, parsing and evaluating an expression:

```python
from patterngallery.interpreter import analyse

expression = analyse("a+b-c+d-e")
print(expression.interpret({"a": 5, "b": 2, "c": 1, "d": 6, "e": 10}))   # 2
```

Unknown variables count as zero; an operator without an operand, or an
empty text, raises `ValueError`.

State:

```python
from patterngallery.state import NetworkProcessor, NetworkState

processor = NetworkProcessor(NetworkState.OPEN)
processor.operation1()   # NetworkState.CLOSE
processor.operation2()   # NetworkState.OPEN
processor.operation3()   # NetworkState.OPEN (unchanged)
```

Singleton, flyweight, composite and builder:

```python
from patterngallery.singleton import Singleton
from patterngallery.flyweight import FontFactory
from patterngallery.composite import Composite, Leaf, invoke
from patterngallery.builder import HouseDirector, StoneHouseBuilder

assert Singleton.get_instance() is Singleton.get_instance()   # Singleton() raises TypeError

fonts = FontFactory()
assert fonts.get_font("Arial") is fonts.get_font("Arial")
len(fonts)   # 1

root = Composite("root")
root.add(Leaf("leaf1"))
invoke(root)   # ['root', 'leaf1']

HouseDirector(StoneHouseBuilder()).construct().parts
# ['part1', 'part2', 'part2', 'part2', 'part2', 'part3', 'part4', 'part5']
```

## What the package does not do

The examples model their domains rather than act on them. `FileSplitter`
does not read or write files; it only reports progress. The bridge
messagers do not connect to any network or play any sound; the platform
classes record each action in their `log` list. The prototype splitters
return a description instead of splitting anything.
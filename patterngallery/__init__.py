"""Runnable examples of classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "bridge",
    "builder",
    "command",
    "composite",
    "decorator",
    "factory",
    "flyweight",
    "interpreter",
    "memento",
    "observer",
    "prototype",
    "singleton",
    "state",
    "strategy",
    "template",
    "visitor",
]
"""Commands that wrap an action behind a single execute call."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class Command(ABC):
    """An action that can be run later."""

    @abstractmethod
    def execute(self):
        """Run the action."""


class LightOnCommand(Command):
    def __init__(self, light: str) -> None:
        self.light = light

    def execute(self) -> str:
        return _say(f"{self.light} was turned on")


class GarageDoorOpen(Command):
    def __init__(self, door: str) -> None:
        self.door = door

    def execute(self) -> str:
        return _say(f"{self.door} was opened")


class SimpleRemoteControl:
    """A remote with one slot holding a command."""

    def __init__(self) -> None:
        self.slot: Command | None = None

    def set_command(self, command: Command) -> None:
        self.slot = command

    def button_was_pressed(self):
        if self.slot is None:
            raise RuntimeError("no command is set on the remote")
        return self.slot.execute()


class ConcreteCommand1(Command):
    def __init__(self, arg: str) -> None:
        self.arg = arg

    def execute(self) -> str:
        return _say(f"#1 process...{self.arg}")


class ConcreteCommand2(Command):
    def __init__(self, arg: str) -> None:
        self.arg = arg

    def execute(self) -> str:
        return _say(f"#2 process...{self.arg}")


class MacroCommand(Command):
    """A command that runs other commands in the order they were added."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        self.commands.append(command)

    def execute(self) -> list:
        return [command.execute() for command in self.commands]


def main(argv: list[str] | None = None) -> int:
    """Press the remote for two commands, then run a macro."""
    if argv is None:
        argv = sys.argv[1:]
    remote = SimpleRemoteControl()
    remote.set_command(LightOnCommand("my light"))
    remote.button_was_pressed()
    remote.set_command(GarageDoorOpen("my garage door"))
    remote.button_was_pressed()

    macro = MacroCommand()
    macro.add_command(ConcreteCommand1("Arg ###"))
    macro.add_command(ConcreteCommand2("Arg $$$"))
    macro.execute()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
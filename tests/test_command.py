import pytest

from patterngallery.command import (
    Command,
    ConcreteCommand1,
    ConcreteCommand2,
    GarageDoorOpen,
    LightOnCommand,
    MacroCommand,
    SimpleRemoteControl,
    main,
)


def test_light_on(capsys):
    assert LightOnCommand("my light").execute() == "my light was turned on"
    assert capsys.readouterr().out == "my light was turned on\n"


def test_garage_door(capsys):
    assert GarageDoorOpen("my garage door").execute() == "my garage door was opened"
    assert capsys.readouterr().out == "my garage door was opened\n"


def test_remote_runs_current_slot():
    remote = SimpleRemoteControl()
    remote.set_command(LightOnCommand("my light"))
    assert remote.button_was_pressed() == "my light was turned on"
    remote.set_command(GarageDoorOpen("my garage door"))
    assert remote.button_was_pressed() == "my garage door was opened"


def test_remote_without_command_raises():
    with pytest.raises(RuntimeError):
        SimpleRemoteControl().button_was_pressed()


def test_concrete_commands():
    assert ConcreteCommand1("Arg ###").execute() == "#1 process...Arg ###"
    assert ConcreteCommand2("Arg $$$").execute() == "#2 process...Arg $$$"


def test_macro_runs_in_order(capsys):
    macro = MacroCommand()
    macro.add_command(ConcreteCommand1("Arg ###"))
    macro.add_command(ConcreteCommand2("Arg $$$"))
    assert macro.execute() == ["#1 process...Arg ###", "#2 process...Arg $$$"]
    assert capsys.readouterr().out == "#1 process...Arg ###\n#2 process...Arg $$$\n"


def test_empty_macro_does_nothing(capsys):
    assert MacroCommand().execute() == []
    assert capsys.readouterr().out == ""


def test_nested_macro():
    inner = MacroCommand()
    inner.add_command(ConcreteCommand1("Arg ###"))
    outer = MacroCommand()
    outer.add_command(inner)
    outer.add_command(ConcreteCommand2("Arg $$$"))
    assert outer.execute() == [["#1 process...Arg ###"], "#2 process...Arg $$$"]


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "my light was turned on",
        "my garage door was opened",
        "#1 process...Arg ###",
        "#2 process...Arg $$$",
    ]
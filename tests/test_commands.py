import pytest

from calcpad.commands import Command, CommandKind, key_to_command, keys_to_commands


@pytest.mark.parametrize(
    "key, expected",
    [
        pytest.param("7", Command.digit(7)),
        pytest.param("0", Command.digit("0")),
        pytest.param(".", Command.decimal()),
        pytest.param("+", Command.operator("+")),
        pytest.param("-", Command.operator("-")),
        pytest.param("*", Command.operator("*")),
        pytest.param("x", Command.operator("*")),
        pytest.param("×", Command.operator("*")),
        pytest.param("/", Command.operator("/")),
        pytest.param("÷", Command.operator("/")),
        pytest.param("=", Command.evaluate()),
        pytest.param("\n", Command.evaluate()),
        pytest.param("\r", Command.evaluate()),
        pytest.param("\b", Command.delete_last()),
        pytest.param("\x7f", Command.delete_last()),
        pytest.param("\x1b", Command.reset()),
        pytest.param("c", Command.reset()),
        pytest.param("C", Command.reset()),
        pytest.param(" ", None),
        pytest.param("a", None),
        pytest.param("٣", None),
    ],
)
def test_key_to_command(key: str, expected: Command | None) -> None:
    assert key_to_command(key) == expected


def test_keys_to_commands_skips_unknown_keys() -> None:
    commands = list(keys_to_commands("1 + 2 ="))
    assert [c.kind for c in commands] == [
        CommandKind.DIGIT,
        CommandKind.OPERATOR,
        CommandKind.DIGIT,
        CommandKind.EVALUATE,
    ]
    assert [c.char for c in commands] == ["1", "+", "2", ""]


@pytest.mark.parametrize("bad", ["", "10", "a", "-1"])
def test_digit_rejects_non_digits(bad: str) -> None:
    with pytest.raises(ValueError):
        Command.digit(bad)


@pytest.mark.parametrize("bad", ["", "^", "++", "x"])
def test_operator_rejects_non_operators(bad: str) -> None:
    with pytest.raises(ValueError):
        Command.operator(bad)


def test_command_str() -> None:
    assert str(Command.operator("+")) == "<OPERATOR>+"
    assert str(Command.reset()) == "<RESET>"

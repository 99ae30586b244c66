import enum
from dataclasses import dataclass
from typing import Iterator, Optional

from calcpad.logging_config import get_logger
from calcpad.utils import PrintableEnum, is_operator

logger = get_logger("commands")


class CommandKind(PrintableEnum):
    DIGIT = enum.auto()
    DECIMAL = enum.auto()
    OPERATOR = enum.auto()
    EVALUATE = enum.auto()
    DELETE_LAST = enum.auto()
    RESET = enum.auto()


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    char: str = ""

    def __str__(self) -> str:
        return f"<{self.kind}>{self.char}" if self.char else f"<{self.kind}>"

    @classmethod
    def digit(cls, d: int | str) -> "Command":
        char = str(d)
        if len(char) != 1 or char not in "0123456789":
            raise ValueError(f"Not a digit: {d!r}")
        return cls(CommandKind.DIGIT, char)

    @classmethod
    def decimal(cls) -> "Command":
        return cls(CommandKind.DECIMAL, ".")

    @classmethod
    def operator(cls, op: str) -> "Command":
        if not is_operator(op):
            raise ValueError(f"Not an operator: {op!r}")
        return cls(CommandKind.OPERATOR, op)

    @classmethod
    def evaluate(cls) -> "Command":
        return cls(CommandKind.EVALUATE)

    @classmethod
    def delete_last(cls) -> "Command":
        return cls(CommandKind.DELETE_LAST)

    @classmethod
    def reset(cls) -> "Command":
        return cls(CommandKind.RESET)


OPERATOR_KEYS = {
    "+": "+",
    "-": "-",
    "*": "*",
    "x": "*",
    "×": "*",
    "/": "/",
    "÷": "/",
}
EVALUATE_KEYS = {"=", "\n", "\r"}
DELETE_LAST_KEYS = {"\b", "\x7f"}
RESET_KEYS = {"\x1b", "c", "C"}


def key_to_command(key: str) -> Optional[Command]:
    if len(key) == 1 and key.isdigit() and key.isascii():
        return Command.digit(key)
    elif key == ".":
        return Command.decimal()
    elif key in OPERATOR_KEYS:
        return Command.operator(OPERATOR_KEYS[key])
    elif key in EVALUATE_KEYS:
        return Command.evaluate()
    elif key in DELETE_LAST_KEYS:
        return Command.delete_last()
    elif key in RESET_KEYS:
        return Command.reset()
    logger.debug("Ignoring key %r", key)
    return None


def keys_to_commands(text: str) -> Iterator[Command]:
    for key in text:
        command = key_to_command(key)
        if command is not None:
            yield command

import math
import sys
from typing import Protocol, TextIO

from calcpad import config


class DisplaySink(Protocol):
    def show(self, text: str) -> None:
        ...


class TextSink:
    """Keeps what was shown, for tests and headless drivers."""

    def __init__(self) -> None:
        self.text = ""
        self.history: list[str] = []

    def show(self, text: str) -> None:
        self.text = text
        self.history.append(text)


class ConsoleSink:
    def __init__(self, label: str, stream: TextIO | None = None) -> None:
        self.label = label
        self.stream = stream if stream is not None else sys.stdout

    def show(self, text: str) -> None:
        print(f"{self.label}: {text}", file=self.stream)


def format_result(value: float) -> str:
    """Text shown in the result display.

    Values whose fractional part is within ``config.INTEGER_TOLERANCE`` of zero
    are shown truncated to an integer, anything else gets at most
    ``config.RESULT_FRACTION_DIGITS`` fractional digits with trailing zeros
    dropped.
    """
    if not math.isfinite(value):
        return str(value)
    if abs(math.fmod(value, 1)) < config.INTEGER_TOLERANCE:
        return str(int(value))
    text = f"{value:.{config.RESULT_FRACTION_DIGITS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text

import enum
import math
from decimal import Decimal

from calcpad import config


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in config.OPERATORS


def display_glyph(ch: str) -> str:
    return config.DISPLAY_GLYPHS.get(ch, ch)


def plain_decimal(value: float) -> str:
    """Float as a positional decimal literal the tokenizer can read back (no exponent)."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    # repr is the shortest round-tripping form, Decimal drops the exponent
    return format(Decimal(repr(value)), "f")

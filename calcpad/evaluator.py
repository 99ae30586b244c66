import enum
from dataclasses import dataclass
from typing import Callable, Optional

from calcpad import config
from calcpad.tokenizer import Token, TokenizerError, TokenType, tokenize, untokenize
from calcpad.utils import PrintableEnum, plain_decimal


@dataclass
class MalformedExpressionError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        preceding = untokenize(self.tokens[: self.error_token_idx])
        return "\n".join([f"Malformed expression: {self.errmsg}", untokenize(self.tokens), " " * len(preceding) + "^"])


class EvalErrorKind(PrintableEnum):
    MALFORMED = enum.auto()
    TRAILING_OPERATOR = enum.auto()


@dataclass(frozen=True)
class EvalResult:
    """Outcome of a single evaluation: either ``value`` or ``error`` is set."""

    value: Optional[float] = None
    error: Optional[EvalErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok_result(cls, value: float) -> "EvalResult":
        return cls(value=value)

    @classmethod
    def error_result(cls, kind: EvalErrorKind, message: str) -> "EvalResult":
        return cls(error=kind, message=message)


BinaryOperationImpl = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if abs(b) < config.NEAR_ZERO_DIVISOR:
        return 0.0
    return a / b


mul_div_impls: dict[TokenType, BinaryOperationImpl] = {
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: _divide,
}
add_sub_impls: dict[TokenType, BinaryOperationImpl] = {
    TokenType.PLUS: lambda a, b: a + b,
    TokenType.MINUS: lambda a, b: a - b,
}


def evaluate(code: str) -> EvalResult:
    try:
        return EvalResult.ok_result(reduce(tokenize(code)))
    except (TokenizerError, MalformedExpressionError) as e:
        return EvalResult.error_result(EvalErrorKind.MALFORMED, str(e))


def reduce(tokens: list[Token]) -> float:
    """Reduce a token list in two passes: ``*`` and ``/`` first, then ``+`` and ``-``.

    The list passed in is not modified.
    """
    tokens = list(tokens)
    if not tokens:
        raise MalformedExpressionError("Empty expression", tokens=tokens, error_token_idx=0)
    _reduce_mul_div(tokens)
    return _fold_add_sub(tokens)


def _reduce_mul_div(tokens: list[Token]) -> None:
    """Mutates passed tokens list"""
    i = 0
    while i < len(tokens):
        impl = mul_div_impls.get(tokens[i].type)
        if impl is None:
            i += 1
            continue
        if i == 0 or i == len(tokens) - 1:
            raise MalformedExpressionError(
                f"Operator {tokens[i].lexeme!r} is missing an operand", tokens=tokens, error_token_idx=i
            )
        left = _parse_number(tokens, i - 1)
        right = _parse_number(tokens, i + 1)
        tokens[i - 1 : i + 2] = [Token(type=TokenType.NUMBER, lexeme=plain_decimal(impl(left, right)))]
        # the spliced number now sits at i - 1, so i already points past it


def _fold_add_sub(tokens: list[Token]) -> float:
    result = _parse_number(tokens, 0)
    for i in range(1, len(tokens), 2):
        impl = add_sub_impls.get(tokens[i].type)
        if impl is None:
            raise MalformedExpressionError(
                f"Binary operator expected, found {tokens[i].type}", tokens=tokens, error_token_idx=i
            )
        if i + 1 >= len(tokens):
            raise MalformedExpressionError("Right operand expected", tokens=tokens, error_token_idx=i + 1)
        result = impl(result, _parse_number(tokens, i + 1))
    return result


def _parse_number(tokens: list[Token], i: int) -> float:
    token = tokens[i]
    if token.type is not TokenType.NUMBER:
        raise MalformedExpressionError(f"Number expected, found {token.type}", tokens=tokens, error_token_idx=i)
    try:
        return float(token.lexeme)
    except ValueError:
        raise MalformedExpressionError(f"Invalid number {token.lexeme!r}", tokens=tokens, error_token_idx=i)

import enum
from dataclasses import dataclass

from calcpad.utils import PrintableEnum, is_operator


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"

    @property
    def is_operator(self) -> bool:
        return self.type is not TokenType.NUMBER


OPERATOR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


def _is_unary_sign(code: str, i: int) -> bool:
    return code[i] in "+-" and (i == 0 or is_operator(code[i - 1]))


def tokenize(code: str) -> list[Token]:
    tokens: list[Token] = []
    number_buffer = ""
    for i, char in enumerate(code):
        if _is_valid_in_number(char):
            number_buffer += char
        elif _is_unary_sign(code, i):
            number_buffer += char
        elif char in OPERATOR_TOKENS:
            if number_buffer:
                tokens.append(Token(type=TokenType.NUMBER, lexeme=number_buffer))
                number_buffer = ""
            tokens.append(Token(type=OPERATOR_TOKENS[char], lexeme=char))
        else:
            raise TokenizerError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)

    if number_buffer:
        tokens.append(Token(type=TokenType.NUMBER, lexeme=number_buffer))

    return tokens


def untokenize(tokens: list[Token]) -> str:
    return "".join(t.lexeme for t in tokens)

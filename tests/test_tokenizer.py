import pytest

from calcpad.tokenizer import TokenizerError, TokenType, tokenize, untokenize


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("5", ["5"]),
        pytest.param("12.5", ["12.5"]),
        pytest.param("2+3", ["2", "+", "3"]),
        pytest.param("2+3*4", ["2", "+", "3", "*", "4"]),
        pytest.param("-1", ["-1"]),
        pytest.param("-1-1", ["-1", "-", "1"]),
        pytest.param("5*-3", ["5", "*", "-3"]),
        pytest.param("5/+3", ["5", "/", "+3"]),
        pytest.param("5--3", ["5", "-", "-3"]),
        pytest.param("5+", ["5", "+"]),
        pytest.param("5++", ["5", "+", "+"]),
        pytest.param("*5", ["*", "5"]),
        pytest.param("5**2", ["5", "*", "*", "2"]),
        pytest.param("1.2.3", ["1.2.3"]),
        pytest.param("", []),
    ],
)
def test_tokenize(code: str, expected: list[str]) -> None:
    tokens = tokenize(code)
    assert [t.lexeme for t in tokens] == expected
    assert untokenize(tokens) == code


def test_token_types() -> None:
    tokens = tokenize("-1+2-3*4/5")
    assert [t.type for t in tokens] == [
        TokenType.NUMBER,
        TokenType.PLUS,
        TokenType.NUMBER,
        TokenType.MINUS,
        TokenType.NUMBER,
        TokenType.STAR,
        TokenType.NUMBER,
        TokenType.SLASH,
        TokenType.NUMBER,
    ]
    assert [t.is_operator for t in tokens[:2]] == [False, True]


@pytest.mark.parametrize("code, error_idx", [("2 + 3", 1), ("1e5", 1), ("4^2", 1), ("2×3", 1)])
def test_tokenize_unexpected_character(code: str, error_idx: int) -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_idx
    assert str(exc_info.value).splitlines()[-1] == " " * error_idx + "^"

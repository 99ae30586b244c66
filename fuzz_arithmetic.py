import math
import random

from calcpad.evaluator import evaluate
from calcpad.tokenizer import tokenize
from calcpad.utils import is_operator


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    result = evaluate(code)
    return result.value if result.ok and result.value is not None else result.message


def generate(length: int) -> str:
    """Random text shaped like what the keypad produces: no doubled operators, no trailing operator."""
    chars: list[str] = []
    for _ in range(length):
        if chars and not is_operator(chars[-1]) and random.random() < 0.3:
            chars.append(random.choice("+-*/"))
        else:
            chars.append(random.choice("0123456789."))
    while chars and is_operator(chars[-1]):
        chars.pop()
    return "".join(chars) or "0"


def divides_by_near_zero(code: str) -> bool:
    tokens = tokenize(code)
    for prev, curr in zip(tokens, tokens[1:]):
        if prev.lexeme == "/":
            try:
                if abs(float(curr.lexeme)) < 1e-6:
                    return True
            except ValueError:
                return False
    return False


if __name__ == "__main__":
    while True:
        code = generate(10)

        if divides_by_near_zero(code):
            continue  # defined as 0 here, ZeroDivisionError in python

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")

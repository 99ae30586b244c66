from dataclasses import dataclass
from typing import Iterable, Optional

from calcpad import config
from calcpad.commands import Command, CommandKind
from calcpad.display import DisplaySink, format_result
from calcpad.evaluator import EvalErrorKind, EvalResult, evaluate
from calcpad.logging_config import get_logger
from calcpad.utils import display_glyph, is_operator, plain_decimal

logger = get_logger("edit_buffer")

EMPTY_EXPRESSION = "0"


@dataclass
class ExpressionState:
    canonical: str = EMPTY_EXPRESSION
    rendered: str = EMPTY_EXPRESSION
    just_evaluated: bool = False

    def append(self, char: str) -> None:
        self.canonical += char
        self.rendered += display_glyph(char)

    def replace_last(self, char: str) -> None:
        self.canonical = self.canonical[:-1] + char
        self.rendered = self.rendered[:-1] + display_glyph(char)

    def drop_last(self) -> None:
        self.canonical = self.canonical[:-1]
        self.rendered = self.rendered[:-1]

    def set_text(self, canonical: str) -> None:
        self.canonical = canonical
        self.rendered = "".join(display_glyph(c) for c in canonical)


class EditBuffer:
    """Applies edit commands to the live expression and pushes it to the two displays.

    The expression display always receives ``state.rendered`` after an edit. The
    result display receives the formatted result, ``config.ERROR_TEXT`` or an
    empty string when cleared. After a successful evaluation the expression
    display is cleared until the next edit.
    """

    def __init__(
        self,
        expression_sink: DisplaySink,
        result_sink: DisplaySink,
        state: Optional[ExpressionState] = None,
    ) -> None:
        self.expression_sink = expression_sink
        self.result_sink = result_sink
        self.state = state if state is not None else ExpressionState()
        self.expression_sink.show(self.state.rendered)
        self.result_sink.show("")

    def apply(self, command: Command) -> None:
        logger.debug("Applying %s to %r", command, self.state.canonical)
        if command.kind in (CommandKind.DIGIT, CommandKind.DECIMAL):
            self.append_digit_or_dot(command.char)
        elif command.kind is CommandKind.OPERATOR:
            self.append_operator(command.char)
        elif command.kind is CommandKind.EVALUATE:
            self.evaluate()
        elif command.kind is CommandKind.DELETE_LAST:
            self.delete_last()
        elif command.kind is CommandKind.RESET:
            self.reset()
        else:
            raise ValueError(f"Unexpected command: {command}")

    def feed(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.apply(command)

    def append_digit_or_dot(self, char: str) -> None:
        if len(char) != 1 or not (char.isdigit() or char == "."):
            raise ValueError(f"Digit or '.' expected, got {char!r}")
        self._leave_evaluated(char)

        if self.state.canonical == EMPTY_EXPRESSION and char.isdigit():
            self.state.set_text("")

        self.state.append(char)
        self.expression_sink.show(self.state.rendered)

    def append_operator(self, op: str) -> None:
        if not is_operator(op):
            raise ValueError(f"Operator expected, got {op!r}")
        self._leave_evaluated(op)

        if self.state.canonical and is_operator(self.state.canonical[-1]):
            self.state.replace_last(op)
        else:
            self.state.append(op)
        self.expression_sink.show(self.state.rendered)

    def delete_last(self) -> None:
        if self.state.just_evaluated:
            self.reset()
            return

        if self.state.canonical:
            self.state.drop_last()
            if not self.state.canonical:
                self.state.set_text(EMPTY_EXPRESSION)
        self.expression_sink.show(self.state.rendered)

    def reset(self) -> None:
        self.state.set_text(EMPTY_EXPRESSION)
        self.state.just_evaluated = False
        self.expression_sink.show(self.state.rendered)
        self.result_sink.show("")

    def evaluate(self) -> Optional[EvalResult]:
        canonical = self.state.canonical
        if not canonical:
            return None

        if is_operator(canonical[-1]):
            result = EvalResult.error_result(
                EvalErrorKind.TRAILING_OPERATOR, f"Expression ends with operator {canonical[-1]!r}"
            )
        else:
            result = evaluate(canonical)

        self.state.just_evaluated = True
        if not result.ok:
            logger.warning("Evaluation of %r failed (%s): %s", canonical, result.error, result.message)
            self.result_sink.show(config.ERROR_TEXT)
            return result

        assert result.value is not None
        self.expression_sink.show("")
        self.result_sink.show(format_result(result.value))
        self.state.set_text(plain_decimal(result.value))
        logger.debug("Evaluated %r to %r", canonical, result.value)
        return result

    def _leave_evaluated(self, char: str) -> None:
        if not self.state.just_evaluated:
            return
        if char.isdigit():
            self.state.set_text("")
            self.result_sink.show("")
        self.expression_sink.show("")
        self.state.just_evaluated = False

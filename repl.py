import sys

from calcpad import config
from calcpad.commands import Command, keys_to_commands
from calcpad.display import ConsoleSink
from calcpad.edit_buffer import EditBuffer
from calcpad.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging(config.LOG_LEVEL)
    buffer = EditBuffer(expression_sink=ConsoleSink("expr"), result_sink=ConsoleSink("result"))

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        if not line:
            # plain Enter
            buffer.apply(Command.evaluate())
            continue

        if line.strip() in {"q", "quit", "exit"}:
            break

        buffer.feed(keys_to_commands(line))

    sys.exit(0)

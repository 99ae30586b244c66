from calcpad.commands import keys_to_commands
from calcpad.display import TextSink
from calcpad.edit_buffer import EditBuffer
from calcpad.tokenizer import TokenizerError, tokenize

for keys in [
    "5",
    "05",
    "2+3=",
    "2+3*4=",
    "10/0=",
    "10/3=",
    "5+*2=",
    "5+=",
    "7=+3=",
    "7=3",
    "-4*-2=",
    "1.2.3+1=",
    "12\b\b\b",
    "9x9c",
]:
    print("=" * 10)
    print(f"keys: {keys!r}")
    expression_sink, result_sink = TextSink(), TextSink()
    buffer = EditBuffer(expression_sink, result_sink)
    # evaluation replaces the expression, look at it before the last "="
    canonical = buffer.state.canonical
    for command in keys_to_commands(keys):
        canonical = buffer.state.canonical
        buffer.apply(command)

    try:
        tokens = tokenize(canonical)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
    except TokenizerError as e:
        print(e)

    print(f"canonical: {buffer.state.canonical!r}  rendered: {buffer.state.rendered!r}")
    print(f"expression display: {expression_sink.text!r}  result display: {result_sink.text!r}")
    print(f"just evaluated: {buffer.state.just_evaluated}")

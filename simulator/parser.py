"""
Parsers for the two input formats.

Both files share one lexical grammar (tokens separated by spaces and
newlines). A program is a flat run of five-token rules
`STATE READ WRITE (-> | <-) NEXT`; a tape is a flat run of symbols.
"""

from simulator.errors import InvalidStep
from simulator.symbols import Case, Step
from simulator.tokenizer import TokenStream, tokenize

STEPS = {step.value: step for step in Step}


def _as_stream(source):
    if isinstance(source, TokenStream):
        return source
    if isinstance(source, str):
        source = tokenize(source)
    return TokenStream(source)


def parse_symbol(stream):
    return stream.next_token()


def parse_step(stream):
    name = parse_symbol(stream)
    if name not in STEPS:
        raise InvalidStep(name)
    return STEPS[name]


def parse_case(stream):
    state = parse_symbol(stream)
    read = parse_symbol(stream)
    write = parse_symbol(stream)
    step = parse_step(stream)
    next_state = parse_symbol(stream)
    return Case(state, read, write, step, next_state)


def parse_cases(source):
    """Parse rules until the input runs out, keeping file order."""
    stream = _as_stream(source)
    cases = []
    while not stream.at_end():
        cases.append(parse_case(stream))
    return cases


def parse_tape(source):
    """Parse tape symbols until the input runs out. May return an empty list."""
    stream = _as_stream(source)
    symbols = []
    while not stream.at_end():
        symbols.append(parse_symbol(stream))
    return symbols


def parse_program(text):
    return parse_cases(tokenize(text))


def parse_tape_text(text):
    return parse_tape(tokenize(text))

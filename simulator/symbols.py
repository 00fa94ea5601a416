from enum import Enum
from typing import NamedTuple

# Symbols are plain strings compared by text.
Symbol = str

START_STATE: Symbol = "Inc"


class Step(Enum):
    LEFT = "<-"
    RIGHT = "->"


class Case(NamedTuple):
    """One transition rule: in `state` reading `read`, write, move, go to `next`."""
    state: Symbol
    read: Symbol
    write: Symbol
    step: Step
    next: Symbol

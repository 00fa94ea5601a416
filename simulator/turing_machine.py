import sys

from simulator.errors import EmptyTape, TapeOverflow, TapeUnderflow
from simulator.symbols import START_STATE, Step

OVERFLOW_POLICIES = ("error", "extend")


class TuringMachine:
    def __init__(self, tape, state=START_STATE, head=0, tape_overflow="error"):
        if tape_overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"Unknown tape overflow policy: {tape_overflow}")
        self.state = state
        self.tape = list(tape)
        self.tape_default = self.tape[-1] if self.tape else None
        self.head = head
        self.halt = False
        self.steps = 0
        self.tape_overflow = tape_overflow

    @classmethod
    def from_tape(cls, tape, tape_overflow="error"):
        """Build a machine in the start state with the head on the first cell."""
        if not tape:
            raise EmptyTape()
        return cls(tape, tape_overflow=tape_overflow)

    def read(self):
        if self.head >= len(self.tape):
            raise TapeOverflow(self.head)
        return self.tape[self.head]

    def step(self, cases):
        """
        Apply the first rule matching (state, current cell), in rule order.

        Clears `halt` when a rule fires. When nothing matches the call is a
        no-op, so a `halt` set by the caller stays set.
        """
        for case in cases:
            # The cell is only read once a rule for this state turns up.
            if case.state == self.state and case.read == self.read():
                self.tape[self.head] = case.write
                if case.step is Step.LEFT:
                    if self.head == 0:
                        raise TapeUnderflow()
                    self.head -= 1
                else:
                    self.head += 1
                    if self.tape_overflow == "extend" and self.head == len(self.tape):
                        self.tape.append(self.tape_default)
                self.state = case.next
                self.halt = False
                self.steps += 1
                break

    def render(self):
        """Two lines: `STATE: sym sym ... ` and a caret under the head's cell."""
        line = f"{self.state}: "
        # Past the last cell the caret stays in column 0.
        caret = 0
        for index, symbol in enumerate(self.tape):
            if index == self.head:
                caret = len(line)
            line += f"{symbol} "
        return f"{line}\n{' ' * caret}^"

    def show(self, out=None):
        out = out if out is not None else sys.stdout
        out.write(self.render() + "\n")

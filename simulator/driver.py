import sys

from simulator.errors import StepLimitExceeded


def run(machine, cases, out=None, max_steps=0):
    """
    Print the machine, then step it, until a step finds no matching rule.

    Returns the number of transitions applied. Errors raised by a step end
    the run with everything printed so far left in place.
    """
    out = out if out is not None else sys.stdout
    while not machine.halt:
        machine.show(out)
        machine.halt = True
        machine.step(cases)
        if not machine.halt and max_steps and machine.steps > max_steps:
            raise StepLimitExceeded(max_steps)
    return machine.steps

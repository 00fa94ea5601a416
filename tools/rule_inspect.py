import argparse
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from logger.console import report_error
from simulator.errors import AlanError
from simulator.parser import parse_program
from simulator.source import read_source

console = Console()

def find_shadowed(cases):
    """Map rule index -> index of the earlier rule with the same (state, read) that always wins."""
    first_seen = {}
    shadowed = {}
    for idx, case in enumerate(cases):
        key = (case.state, case.read)
        if key in first_seen:
            shadowed[idx] = first_seen[key]
        else:
            first_seen[key] = idx
    return shadowed

def build_rule_table(cases, title="Rules"):
    """Rules in priority order, with rules that can never fire marked."""
    shadowed = find_shadowed(cases)

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("State")
    table.add_column("Read")
    table.add_column("Write")
    table.add_column("Step", justify="center")
    table.add_column("Next")
    table.add_column("Note")

    for idx, case in enumerate(cases):
        note = Text(f"shadowed by #{shadowed[idx]}", style="yellow") if idx in shadowed else Text("")
        # Symbols are user text and must not be read as markup
        cells = [Text(name) for name in (case.state, case.read, case.write, case.step.value, case.next)]
        table.add_row(str(idx), *cells, note)
    return table

def inspect_program(path):
    cases = parse_program(read_source(path))
    console.print(build_rule_table(cases, title=f"Rules in {path}"))
    shadowed = find_shadowed(cases)
    console.print(f"[INFO] {len(cases)} rules, {len(shadowed)} shadowed.", markup=False, highlight=False)
    return cases

def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the rule table of an alan program")
    parser.add_argument("program", help="Path to the .alan program")
    args = parser.parse_args(argv)

    try:
        inspect_program(args.program)
    except AlanError as err:
        report_error(err.message)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

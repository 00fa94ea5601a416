# app.py

import argparse
import sys

from config.config_loader import load_config
from logger.console import report_error, report_usage
from logger.logger import RunLogger
from simulator.driver import run
from simulator.errors import AlanError, MissingArgument, UsageError
from simulator.parser import parse_program, parse_tape_text
from simulator.source import read_source
from simulator.turing_machine import TuringMachine

class ArgumentParser(argparse.ArgumentParser):
    """Reports bad command lines through AlanError instead of exiting."""

    def error(self, message):
        report_usage(self.format_usage())
        raise UsageError(message)

def create_parser(prog):
    parser = ArgumentParser(
        prog=prog,
        usage="%(prog)s <input.alan> <input.tape>",
        description="Run an alan Turing machine program over a tape, printing every step."
    )
    parser.add_argument("program", nargs="?", help="Rule table, five tokens per rule: STATE READ WRITE (-> | <-) NEXT")
    parser.add_argument("tape", nargs="?", help="Initial tape symbols, left to right")
    parser.add_argument("--config", help="Path to a JSON runtime configuration")
    parser.add_argument("--log-dir", help="Write a JSON-lines run log into this directory")
    return parser

# === Run ===
def start(argv, prog):
    parser = create_parser(prog)
    # Positionals are taken in order; anything extra is ignored.
    args, _ = parser.parse_known_intermixed_args(argv)

    config = load_config(args.config)
    if args.log_dir:
        config["output_directory"] = args.log_dir
        config["log_runs"] = True

    if args.program is None:
        report_usage(parser.format_usage())
        raise MissingArgument("input.alan")
    cases = parse_program(read_source(args.program))

    if args.tape is None:
        report_usage(parser.format_usage())
        raise MissingArgument("input.tape")
    tape = parse_tape_text(read_source(args.tape))

    machine = TuringMachine.from_tape(tape, tape_overflow=config["tape_overflow"])
    logger = None
    if config["log_runs"]:
        logger = RunLogger(config["output_directory"], config["log_file_prefix"])

    try:
        steps = run(machine, cases, max_steps=config["max_steps"])
    except AlanError as err:
        if logger:
            try:
                logger.log_run(args.program, args.tape, machine, machine.steps, error=err)
            except AlanError as log_err:
                # The run's own failure is the one main reports.
                report_error(log_err.message)
        raise
    if logger:
        logger.log_run(args.program, args.tape, machine, steps)
    return steps

def main(argv=None, prog=None):
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "alan"

    try:
        start(argv, prog)
    except AlanError as err:
        report_error(err.message)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

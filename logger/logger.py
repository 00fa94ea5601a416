import json
from datetime import datetime, timezone
from pathlib import Path

from simulator.errors import LogWriteError

class RunLogger:
    """Appends one JSON line per simulated run to `{prefix}{YYYY-MM-DD}.jsonl`."""

    def __init__(self, output_directory="logs/", log_file_prefix="alan_"):
        self.output_directory = Path(output_directory)
        try:
            self.output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise LogWriteError(self.output_directory, err.strerror or err) from err
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self.output_directory / f"{log_file_prefix}{self.today}.jsonl"

    def log(self, entry: dict):
        try:
            with open(self.current_log, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as err:
            raise LogWriteError(self.current_log, err.strerror or err) from err
        return entry

    def log_run(self, program, tape, machine, steps, error=None):
        """Record how one run ended, successful or not."""
        return self.log({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "program": str(program),
            "tape": str(tape),
            "steps": steps,
            "outcome": "error" if error else "halted",
            "error": error.message if error else None,
            "final_state": machine.state,
            "head": machine.head,
            "final_tape": list(machine.tape)
        })

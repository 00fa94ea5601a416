class AlanError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingArgument(AlanError):
    def __init__(self, name):
        super().__init__(f"no {name} provided.")
        self.name = name


class FileReadError(AlanError):
    def __init__(self, path, reason):
        super().__init__(f"could not read file {path}: {reason}")
        self.path = path
        self.reason = reason


class UnexpectedEnd(AlanError):
    def __init__(self):
        super().__init__("expected symbol but reached end of input")


class InvalidStep(AlanError):
    def __init__(self, got):
        super().__init__(f"expected '->' or '<-' but got {got}")
        self.got = got


class EmptyTape(AlanError):
    def __init__(self):
        super().__init__("tape file may not be empty.")


class TapeUnderflow(AlanError):
    def __init__(self):
        super().__init__("tape underflow.")


class TapeOverflow(AlanError):
    def __init__(self, head):
        super().__init__(f"tape overflow at cell {head}.")
        self.head = head


class StepLimitExceeded(AlanError):
    def __init__(self, max_steps):
        super().__init__(f"step limit of {max_steps} exceeded.")
        self.max_steps = max_steps


class ConfigError(AlanError):
    def __init__(self, reason):
        super().__init__(f"invalid configuration: {reason}")
        self.reason = reason


class LogWriteError(AlanError):
    def __init__(self, path, reason):
        super().__init__(f"could not write run log {path}: {reason}")
        self.path = path
        self.reason = reason


class UsageError(AlanError):
    """Bad command line, as reported by argparse."""

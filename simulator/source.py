from pathlib import Path

from simulator.errors import FileReadError


def read_source(path):
    """Whole file as text; any I/O or decoding failure becomes FileReadError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise FileReadError(path, err.strerror or err) from err
    except UnicodeDecodeError as err:
        raise FileReadError(path, err) from err

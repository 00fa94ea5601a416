import json
import os

from simulator.errors import ConfigError
from simulator.turing_machine import OVERFLOW_POLICIES

DEFAULT_CONFIG = {
    "tape_overflow": "error",
    "max_steps": 0,
    "log_runs": False,
    "output_directory": "logs/",
    "log_file_prefix": "alan_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "tape_overflow": str,
    "max_steps": int,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key in config:
        if key not in CONFIG_SCHEMA:
            raise ConfigError(f"unknown configuration key '{key}'")
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ConfigError(f"missing required configuration key '{key}'")
        value = config[key]
        # bool is a subclass of int, so True must not pass as a step count
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise ConfigError(f"key '{key}' expected {expected_type.__name__}, got {type(value).__name__}")

    if config["tape_overflow"] not in OVERFLOW_POLICIES:
        raise ConfigError(f"tape_overflow must be one of {', '.join(OVERFLOW_POLICIES)}")
    if config["max_steps"] < 0:
        raise ConfigError("max_steps may not be negative")

def load_config(path=None):
    config = DEFAULT_CONFIG.copy()
    if path is None:
        return config

    if not os.path.exists(path):
        raise ConfigError(f"configuration file not found at {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
    except (OSError, json.JSONDecodeError) as err:
        raise ConfigError(f"could not load {path}: {err}") from err

    if not isinstance(user_config, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    # Merge defaults with overrides
    config.update(user_config)

    validate_config(config)
    return config

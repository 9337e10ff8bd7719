"""YAML-backed defaults for the command line front end."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .engine import DEFAULT_SCRAMBLE_MOVES

OUTPUT_FORMATS = ("net", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a config file has unknown keys or bad values."""


@dataclass
class CubeConfig:
    scramble_moves: int = DEFAULT_SCRAMBLE_MOVES
    seed: int | None = None
    output: str = "net"
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.scramble_moves, bool) or not isinstance(self.scramble_moves, int):
            raise ConfigError("scramble_moves must be an integer")
        if self.scramble_moves < 0:
            raise ConfigError("scramble_moves must be non-negative")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError("seed must be an integer or null")
        if self.output not in OUTPUT_FORMATS:
            raise ConfigError(f"output must be one of {', '.join(OUTPUT_FORMATS)}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(path: str | Path) -> CubeConfig:
    """Load YAML config. An empty file gives the defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping")

    known = {field.name for field in fields(CubeConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return CubeConfig(**data)

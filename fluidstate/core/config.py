"""Library settings and their JSON persistence.

Settings are a single process-wide dataclass. ``configure`` replaces fields
in place; ``load_settings``/``save_settings`` move them to and from disk.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from fluidstate.utils.constants import FRACTION_TOLERANCE, PRESSURE_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Tunable behavior of states and processes."""

    pressure_tolerance: float = PRESSURE_TOLERANCE  # Pa, mixing pressure equality
    fraction_tolerance: float = FRACTION_TOLERANCE  # fluid identity for mixing
    mixture_backend: str = "HEOS"
    json_indent: int = 2
    log_level: str = "WARNING"


_settings = Settings()


def get_settings() -> Settings:
    """Return the active settings instance."""
    return _settings


def configure(**overrides: Any) -> Settings:
    """Update fields of the active settings.

    Raises:
        TypeError: On an unknown field name.
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    for name, value in overrides.items():
        setattr(_settings, name, value)
    logger.debug("Settings updated: %s", overrides)
    return _settings


def reset_settings() -> Settings:
    """Restore the defaults."""
    return configure(**asdict(Settings()))


def load_settings(path: str | Path, apply: bool = True) -> Settings:
    """Load settings from a JSON file.

    Missing fields keep their defaults.

    Args:
        path: JSON file path.
        apply: Make the loaded settings the active ones.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    known = {f.name for f in fields(Settings)}
    ignored = set(data) - known
    if ignored:
        logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(sorted(ignored)))
    settings = Settings(**{k: v for k, v in data.items() if k in known})

    if apply:
        configure(**asdict(settings))
    logger.info("Loaded settings from %s", path)
    return settings


def save_settings(settings: Settings, path: str | Path) -> None:
    """Save settings to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(asdict(settings), f, indent=2)
    logger.info("Saved settings to %s", path)

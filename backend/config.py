"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T", int, float, str)

_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_BLANK_MARKERS = ("0", "_")


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw.strip())
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    blank_marker: str = "0"


def load_settings() -> Settings:
    """Build settings from ``SUDOKU_*`` environment variables.

    Raises ``ValueError`` for values that cannot be used.
    """
    log_level = _env("SUDOKU_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown SUDOKU_LOG_LEVEL: {log_level}")

    origins = tuple(
        origin.strip()
        for origin in _env("SUDOKU_CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )
    if not origins:
        raise ValueError("SUDOKU_CORS_ORIGINS must name at least one origin")

    blank_marker = _env("SUDOKU_BLANK_MARKER", "0")
    if blank_marker not in _BLANK_MARKERS:
        raise ValueError(
            f"SUDOKU_BLANK_MARKER must be one of {', '.join(_BLANK_MARKERS)}, "
            f"got {blank_marker!r}"
        )

    return Settings(log_level=log_level, cors_origins=origins, blank_marker=blank_marker)


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    if debug:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName((level or "INFO").upper())
    logging.basicConfig(level=resolved, format=_LOG_FORMAT, force=True)

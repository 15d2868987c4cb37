"""Runtime settings resolved from the environment.

CLI options override these; unset or unparseable variables fall back to the
defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TOLERANCE = 1e-10
DEFAULT_PRECISION = 17


def _read(env: Mapping[str, str], key: str, parse: Callable[[str], T], default: T) -> T:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid value, using %r", key, raw, default)
        return default


def _tolerance(raw: str) -> float:
    value = float(raw)
    if not value >= 0.0:
        raise ValueError(f"tolerance must be non-negative: {raw}")
    return value


def _precision(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise ValueError(f"precision must be positive: {raw}")
    return value


@dataclass
class Settings:
    """Evaluation and display settings."""

    tolerance: float = DEFAULT_TOLERANCE
    precision: int = DEFAULT_PRECISION

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from YARDCALC_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            tolerance=_read(env, "YARDCALC_TOLERANCE", _tolerance, DEFAULT_TOLERANCE),
            precision=_read(env, "YARDCALC_PRECISION", _precision, DEFAULT_PRECISION),
        )

    def format_value(self, value: float) -> str:
        """Format a result with ``precision`` significant digits."""
        return f"{value:.{self.precision}g}"

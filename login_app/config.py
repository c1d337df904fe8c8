"""Application configuration and constants.

Holds the project root, the simulated service latency and the demo
credentials the login view controller submits.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# User service: stand-in latency for the remote call
USER_SERVICE_DELAY_S = 3.0
SERVICE_DELAY_ENV = "LOGIN_APP_SERVICE_DELAY_S"

# Hard-coded action of the login screen
DEMO_NICK = "test"
DEMO_PASSWORD = "123"


def _coerce_delay(raw: object) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


@dataclass(frozen=True, slots=True)
class AppConfig:
    service_delay_s: float = USER_SERVICE_DELAY_S

    @classmethod
    def from_env(cls) -> AppConfig:
        """Build config from environment, falling back to defaults on bad values."""
        delay = _coerce_delay(os.getenv(SERVICE_DELAY_ENV))
        if delay is None:
            return cls()
        return cls(service_delay_s=delay)

"""
Library settings, read from environment variables.

- TIMESHIFT_SPOT_DYNAMICS: default spot dynamics for time bumps
  ("sticky_forward" or "sticky_spot"; default "sticky_forward").
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from timeshift.bumps import SpotDynamics

ENV_SPOT_DYNAMICS = "TIMESHIFT_SPOT_DYNAMICS"


@dataclass(frozen=True)
class Settings:
    spot_dynamics: SpotDynamics = SpotDynamics.STICKY_FORWARD


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ). Raises ValueError on bad values."""
    env = os.environ if environ is None else environ
    raw = env.get(ENV_SPOT_DYNAMICS, "")
    if not raw.strip():
        return Settings()
    return Settings(spot_dynamics=SpotDynamics.parse(raw))

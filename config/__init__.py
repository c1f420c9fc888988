"""
config/
-------
Runtime settings, read once from the environment.

    from config import get_settings
    settings = get_settings()

Every variable is prefixed with ALGOVIZ_ so the app can share a shell
with other services.
"""

import os
import random
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "ALGOVIZ_"

DEFAULT_INPUT = "[5, 3, 8, 4, 2, 1, 9, 7, 6]"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level:     str           = "WARNING"
    log_file:      Optional[str] = None
    log_console:   bool          = False
    host:          str           = "0.0.0.0"
    port:          int           = 5000
    debug:         bool          = False
    seed:          Optional[int] = None      # reproducible API runs when set
    default_input: str           = DEFAULT_INPUT

    def make_rng(self) -> Optional[random.Random]:
        """A seeded Random when ALGOVIZ_SEED is set, else None (unseeded runs)."""
        if self.seed is None:
            return None
        return random.Random(self.seed)


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def load_settings() -> Settings:
    """Build a fresh Settings from the current environment."""
    return Settings(
        log_level=_env("LOG_LEVEL", "WARNING"),
        log_file=_env("LOG_FILE"),
        log_console=_env_bool("LOG_CONSOLE"),
        host=_env("HOST", "0.0.0.0"),
        port=_env_int("PORT", 5000),
        debug=_env_bool("DEBUG"),
        seed=_env_int("SEED", None),
        default_input=_env("DEFAULT_INPUT", DEFAULT_INPUT),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide Settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


__all__ = [
    "Settings",
    "DEFAULT_INPUT",
    "load_settings",
    "get_settings",
]

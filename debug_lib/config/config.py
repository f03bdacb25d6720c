"""Process configuration read from the environment.

The server accepts a single setting: the TCP port to listen on, taken from
the `PORT` environment variable.
"""
from __future__ import annotations
import os
from typing import Mapping, Optional

PORT_ENV = "PORT"
DEFAULT_PORT = 80


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


def get_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the listening port from `PORT`, or `DEFAULT_PORT` if unset or empty."""
    env = os.environ if environ is None else environ
    raw = (env.get(PORT_ENV) or '').strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"{PORT_ENV} must be an integer, got {raw!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"{PORT_ENV} out of range: {port}")
    return port

"""Configuration constants, token type tags, and .env loading.

WHY: Centralizes the configurable values (default separator, server
address, log level) and the token type tags so both the filter and the
outer surfaces agree on them.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values, each overridable via an environment variable.
Values that need parsing (port, log level) are read by load_* functions
when used, so a malformed value never breaks importing the package.

RULES:
- CONCATENATED_TOKEN_TYPE tags every merged token; it must differ from
  DEFAULT_TOKEN_TYPE
- ConfigError is the only exception raised for bad configuration
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Token type tags
# ---------------------------------------------------------------------------

DEFAULT_TOKEN_TYPE = "word"
"""Type tag of ordinary whitespace-delimited tokens."""

CONCATENATED_TOKEN_TYPE = "shingle"
"""Type tag of synthetic tokens produced by concatenation."""

# ---------------------------------------------------------------------------
# Filter defaults
# ---------------------------------------------------------------------------

DEFAULT_SEPARATOR = os.getenv("CONCAT_SEPARATOR", " ")

# ---------------------------------------------------------------------------
# Server and logging
# ---------------------------------------------------------------------------

SERVER_HOST = os.getenv("CONCAT_HOST", "127.0.0.1")


class ConfigError(ValueError):
    """Raised for unknown filter options or invalid configuration values."""


def load_server_port() -> int:
    """Read the server port from CONCAT_PORT (default 8000).

    RULES:
    - Read on demand, so a bad value never breaks importing the library
    - Raises ConfigError unless the value is an integer in 1..65535
    """
    raw = os.getenv("CONCAT_PORT", "8000").strip()
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError("CONCAT_PORT must be an integer, got {!r}".format(raw)) from None
    if not 0 < port < 65536:
        raise ConfigError("CONCAT_PORT must be between 1 and 65535, got {}".format(port))
    return port


def load_log_level() -> int:
    """Read the logging level name from CONCAT_LOG_LEVEL (default WARNING).

    Raises:
        ConfigError: If the name is not a standard logging level.
    """
    name = os.getenv("CONCAT_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError("CONCAT_LOG_LEVEL must be a logging level name, got {!r}".format(name))
    return level

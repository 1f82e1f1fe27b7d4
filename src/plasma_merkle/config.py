"""
Global configuration for the checkpoint commitment tools.

This module contains environment-specific settings. Protocol constants that
the on-chain verifier depends on live in `plasma_merkle.merkle.constants`
and are deliberately not configurable.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVEL = os.environ.get("PLASMA_MERKLE_LOG_LEVEL", "INFO").upper()
"""Default CLI log level. `--verbose` always switches to DEBUG."""

if LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid PLASMA_MERKLE_LOG_LEVEL environment variable: '{LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )

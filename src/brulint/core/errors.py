"""Exception types raised by brulint."""

from __future__ import annotations


class BruLintError(Exception):
    """Base class for brulint failures that abort a run."""


class ConfigError(BruLintError):
    """Raised when brulint.toml cannot be parsed or has invalid values."""

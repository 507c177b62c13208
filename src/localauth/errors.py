"""Exceptions raised by auth strategies."""

from pathlib import Path
from typing import Optional


class AuthStrategyError(Exception):
    """Base class for auth strategy failures."""

    pass


class ConfigurationConflictError(AuthStrategyError):
    """The launch options already name a different user data directory."""

    def __init__(self, requested: str, expected: Path):
        self.requested = requested
        self.expected = expected
        super().__init__(
            f"LocalAuth is not compatible with a user-supplied user_data_dir "
            f"({requested}); expected {expected}"
        )


class TeardownError(AuthStrategyError):
    """Removing the session directory failed, or there was none to remove."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)

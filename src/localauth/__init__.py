"""
localauth - persistent browser session directories for automation clients.
"""

from localauth.config import LocalAuthConfig, resolve_session_dir
from localauth.errors import (
    AuthStrategyError,
    ConfigurationConflictError,
    TeardownError,
)
from localauth.models import BrowserLaunchOptions
from localauth.strategies import AuthStrategy, LocalAuth, NoAuth, SessionState
from localauth.validation import ValidationError

__all__ = [
    "AuthStrategy",
    "AuthStrategyError",
    "BrowserLaunchOptions",
    "ConfigurationConflictError",
    "LocalAuth",
    "LocalAuthConfig",
    "NoAuth",
    "SessionState",
    "TeardownError",
    "ValidationError",
    "resolve_session_dir",
]

__version__ = "0.1.0"

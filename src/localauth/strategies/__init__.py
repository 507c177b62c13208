"""
Authentication strategies.

- base:       AuthStrategy hooks called by the owning client
- no_auth:    nothing persisted between runs
- local_auth: browser profile kept in a local session directory
"""

from localauth.strategies.base import AuthenticationNeeded, AuthStrategy
from localauth.strategies.local_auth import LocalAuth, SessionState
from localauth.strategies.no_auth import NoAuth

__all__ = [
    "AuthStrategy",
    "AuthenticationNeeded",
    "LocalAuth",
    "NoAuth",
    "SessionState",
]

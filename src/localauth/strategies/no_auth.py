"""Strategy that keeps no session between runs."""

from localauth.strategies.base import AuthStrategy


class NoAuth(AuthStrategy):
    """Every launch starts logged out; nothing is written to disk."""

    pass

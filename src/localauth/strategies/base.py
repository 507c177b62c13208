"""
Base class for authentication strategies.

A strategy is plugged into the client that owns the browser. The client
calls these hooks at fixed points of its lifecycle; only the pre-launch hook
and ``logout`` do any real work in the strategies shipped here.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any

from localauth.models import BrowserLaunchOptions


@dataclass
class AuthenticationNeeded:
    """What the client should do when the page asks for a fresh login."""

    failed: bool = False
    restart: bool = False
    failure_event_payload: Any = None


class AuthStrategy(ABC):
    """
    Abstract base for auth strategies.

    Every hook has a harmless default so subclasses only override what
    they need.
    """

    def __init__(self):
        self.client: Any = None

    def setup(self, client: Any) -> None:
        """Attach the owning client."""
        self.client = client

    async def before_browser_initialized(
        self, options: BrowserLaunchOptions
    ) -> BrowserLaunchOptions:
        """Return the launch options the browser should start with."""
        return options

    async def after_browser_initialized(self) -> None:
        pass

    async def on_authentication_needed(self) -> AuthenticationNeeded:
        return AuthenticationNeeded()

    async def get_auth_event_payload(self) -> Any:
        return None

    async def after_auth_ready(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def destroy(self) -> None:
        pass

    async def logout(self) -> None:
        pass

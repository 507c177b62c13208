"""
Local directory based authentication.

The browser keeps its profile (cookies, local storage, caches) in a
directory under ``data_path``; reusing that directory on the next launch
resumes the logged-in session. ``logout`` deletes it.

Layout::

    <data_path>/session            # no client_id
    <data_path>/session-<client>   # with client_id

What the browser writes inside the directory is its own business.
"""

import asyncio
import shutil
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from localauth.config import LocalAuthConfig, PathLike
from localauth.errors import ConfigurationConflictError, TeardownError
from localauth.logger import get_logger
from localauth.models import BrowserLaunchOptions
from localauth.strategies.base import AuthStrategy

logger = get_logger(__name__)


class SessionState(str, Enum):
    UNPREPARED = "unprepared"
    PREPARED = "prepared"
    REMOVED = "removed"


def _remove_entry(path: Path) -> None:
    """Remove a file, link or directory tree. A missing entry is not an error."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        pass


def _remove_empty_dir(path: Path) -> None:
    try:
        path.rmdir()
    except FileNotFoundError:
        pass


class LocalAuth(AuthStrategy):
    """
    Persist the browser session in a local directory.

    Args:
        client_id: Separates several sessions sharing one ``data_path``.
        data_path: Base directory for session folders (default ``./.wwebjs_auth``).
        cwd: Root that a relative ``data_path`` is resolved against.

    Raises:
        ValidationError: If ``client_id`` has characters outside ``[A-Za-z0-9_-]``.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        data_path: Optional[PathLike] = None,
        cwd: Optional[PathLike] = None,
    ):
        super().__init__()
        self.config = LocalAuthConfig.create(
            client_id=client_id, data_path=data_path, cwd=cwd
        )
        self._user_data_dir: Optional[Path] = None
        self._state = SessionState.UNPREPARED

    @property
    def client_id(self) -> Optional[str]:
        return self.config.client_id

    @property
    def data_path(self) -> Path:
        return self.config.data_path

    @property
    def user_data_dir(self) -> Optional[Path]:
        """Session directory, once ``prepare_for_launch`` has run."""
        return self._user_data_dir

    @property
    def state(self) -> SessionState:
        return self._state

    def prepare_for_launch(
        self, options: "BrowserLaunchOptions | Mapping[str, Any] | None" = None
    ) -> BrowserLaunchOptions:
        """
        Create the session directory and point the launch options at it.

        Must run once, before the browser starts. Calling it again is safe:
        an existing directory is left as it is.

        Returns:
            A new ``BrowserLaunchOptions``; the caller's options are not modified.

        Raises:
            ConfigurationConflictError: If ``options`` already name another
                user data directory. Nothing is created in that case.
        """
        options = BrowserLaunchOptions.coerce(options)
        dir_path = self._user_data_dir or self.config.session_dir

        requested = options.user_data_dir
        if requested and Path(requested) != dir_path:
            raise ConfigurationConflictError(requested, dir_path)

        existed = dir_path.is_dir()
        dir_path.mkdir(parents=True, exist_ok=True)
        if not existed:
            logger.info(f"Created session directory: {dir_path}")

        self._user_data_dir = dir_path
        self._state = SessionState.PREPARED
        return options.with_user_data_dir(str(dir_path))

    async def before_browser_initialized(
        self, options: "BrowserLaunchOptions | Mapping[str, Any] | None" = None
    ) -> BrowserLaunchOptions:
        return await asyncio.to_thread(self.prepare_for_launch, options)

    async def teardown(self) -> None:
        """
        Delete the session directory and everything in it.

        Entries are removed concurrently; the directory itself goes last. The
        operation is not atomic: on failure some entries may already be gone.

        Raises:
            TeardownError: If no directory was ever prepared, or on any
                filesystem error other than an entry already being absent.
        """
        dir_path = self._user_data_dir
        if dir_path is None:
            raise TeardownError("No session directory associated with this LocalAuth")

        try:
            exists = await asyncio.to_thread(dir_path.exists)
            if not exists:
                logger.warning(f"Session directory does not exist: {dir_path}")
                self._state = SessionState.REMOVED
                return

            entries = await asyncio.to_thread(lambda: list(dir_path.iterdir()))
            if entries:
                logger.debug(f"Removing {len(entries)} entries from {dir_path}")

            results = await asyncio.gather(
                *(asyncio.to_thread(_remove_entry, entry) for entry in entries),
                return_exceptions=True,
            )
            failures = [r for r in results if isinstance(r, Exception)]
            if failures:
                if len(failures) > 1:
                    logger.debug(
                        f"{len(failures)} entries of {dir_path} could not be removed"
                    )
                raise failures[0]

            await asyncio.to_thread(_remove_empty_dir, dir_path)
        except Exception as e:
            logger.error(f"Failed to remove session directory {dir_path}: {e}")
            raise TeardownError(
                f"Failed to remove session directory {dir_path}: {e}", path=dir_path
            ) from e

        self._state = SessionState.REMOVED
        logger.info(f"Session directory removed: {dir_path}")

    async def logout(self) -> None:
        await self.teardown()

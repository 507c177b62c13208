"""
Configuration for the local session store.

A ``LocalAuthConfig`` is built once, before the browser starts, and never
changes afterwards. Building one touches neither the filesystem nor the
browser: paths are resolved lexically.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from localauth.validation import ValidationError, validate_client_id

DEFAULT_DATA_DIR_NAME = ".wwebjs_auth"
DATA_PATH_ENV = "LOCALAUTH_DATA_PATH"

PathLike = Union[str, os.PathLike]


def _resolve(path: PathLike, cwd: Optional[PathLike] = None) -> Path:
    """Make ``path`` absolute against ``cwd`` without touching the filesystem."""
    root = os.path.abspath(os.fspath(cwd)) if cwd is not None else os.getcwd()
    path = os.path.expanduser(os.fspath(path))
    return Path(os.path.normpath(os.path.join(root, path)))


def default_data_path(cwd: Optional[PathLike] = None) -> Path:
    """
    Base directory used when the caller does not pass one.

    ``$LOCALAUTH_DATA_PATH`` wins; otherwise ``.wwebjs_auth`` under ``cwd``
    (the process working directory when ``cwd`` is None).
    """
    env_path = os.getenv(DATA_PATH_ENV)
    if env_path:
        return _resolve(env_path, cwd)
    return _resolve(DEFAULT_DATA_DIR_NAME, cwd)


def session_dir_name(client_id: Optional[str] = None) -> str:
    return f"session-{client_id}" if client_id else "session"


def resolve_session_dir(data_path: PathLike, client_id: Optional[str] = None) -> Path:
    """
    Derive the session directory for a base path and client ID.

    Pure: the client ID is validated, nothing on disk is created or read.
    """
    client_id = validate_client_id(client_id)
    return _resolve(data_path) / session_dir_name(client_id)


@dataclass(frozen=True)
class LocalAuthConfig:
    """Resolved base path and client ID of one persisted browser session."""

    data_path: Path
    client_id: Optional[str] = None

    def __post_init__(self):
        data_path = Path(self.data_path)
        if not data_path.is_absolute():
            raise ValidationError(f"data_path must be absolute, got {str(data_path)!r}")
        object.__setattr__(self, "data_path", data_path)
        object.__setattr__(self, "client_id", validate_client_id(self.client_id))

    @classmethod
    def create(
        cls,
        client_id: Optional[str] = None,
        data_path: Optional[PathLike] = None,
        cwd: Optional[PathLike] = None,
    ) -> "LocalAuthConfig":
        """
        Validate inputs and build a config.

        Args:
            client_id: Optional ID separating sessions that share ``data_path``.
            data_path: Base directory for session folders.
            cwd: Root that relative paths are resolved against.

        Raises:
            ValidationError: If ``client_id`` contains disallowed characters.
        """
        client_id = validate_client_id(client_id)
        if data_path:
            resolved = _resolve(data_path, cwd)
        else:
            resolved = default_data_path(cwd)
        return cls(data_path=resolved, client_id=client_id)

    @property
    def session_dir_name(self) -> str:
        return session_dir_name(self.client_id)

    @property
    def session_dir(self) -> Path:
        return self.data_path / self.session_dir_name

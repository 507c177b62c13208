"""
CLI commands for a single session directory.

Usage:
    localauth path    [--client-id ID] [--data-path DIR]
    localauth prepare [--client-id ID] [--data-path DIR]
    localauth logout  [--client-id ID] [--data-path DIR] [--yes]
"""

import asyncio
from typing import Optional

import typer

from localauth.errors import AuthStrategyError
from localauth.strategies.local_auth import LocalAuth
from localauth.validation import ValidationError

CLIENT_ID_OPTION = typer.Option(
    None, "--client-id", "-c", help="Client ID separating sessions"
)
DATA_PATH_OPTION = typer.Option(
    None, "--data-path", "-d", help="Base directory for session folders"
)


def _build_auth(client_id: Optional[str], data_path: Optional[str]) -> LocalAuth:
    try:
        return LocalAuth(client_id=client_id, data_path=data_path)
    except ValidationError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)


def register_commands(app: typer.Typer):
    """Register session commands on the given Typer app."""

    @app.command()
    def path(
        client_id: Optional[str] = CLIENT_ID_OPTION,
        data_path: Optional[str] = DATA_PATH_OPTION,
    ):
        """Print the session directory for a client ID."""
        auth = _build_auth(client_id, data_path)
        typer.echo(str(auth.config.session_dir))

    @app.command()
    def prepare(
        client_id: Optional[str] = CLIENT_ID_OPTION,
        data_path: Optional[str] = DATA_PATH_OPTION,
    ):
        """Create the session directory ahead of a browser launch."""
        auth = _build_auth(client_id, data_path)
        try:
            options = auth.prepare_for_launch()
        except (AuthStrategyError, OSError) as e:
            typer.echo(f"❌ {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(options.user_data_dir)

    @app.command()
    def logout(
        client_id: Optional[str] = CLIENT_ID_OPTION,
        data_path: Optional[str] = DATA_PATH_OPTION,
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    ):
        """Delete the session directory and everything in it."""
        auth = _build_auth(client_id, data_path)
        session_dir = auth.config.session_dir

        if not session_dir.exists():
            typer.echo(f"Nothing to remove: {session_dir} does not exist")
            return

        if not yes and not typer.confirm(f"Delete {session_dir}?"):
            typer.echo("Aborted.")
            raise typer.Exit(code=1)

        # The directory already exists, so preparing only records its path.
        try:
            auth.prepare_for_launch()
            asyncio.run(auth.logout())
        except (AuthStrategyError, OSError) as e:
            typer.echo(f"❌ {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"✅ Removed {session_dir}")

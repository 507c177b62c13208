"""
localauth CLI - inspect and clear persisted browser sessions.

Commands live in focused modules:
- main:    logging/environment setup
- session: path, prepare, logout
"""

import typer

from localauth.cli.main import configure_logging, load_environment
from localauth.cli.session import register_commands

app = typer.Typer(help="localauth CLI - manage persisted browser sessions")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    localauth CLI - manage persisted browser sessions.
    """
    load_environment()
    configure_logging(verbose)


register_commands(app)

if __name__ == "__main__":
    app()

"""
Process-level setup shared by CLI commands.
"""

import os

from dotenv import load_dotenv


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from localauth.logger import setup_logging

    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING")
    setup_logging(level=log_level, log_file=os.getenv("LOG_FILE"))


def load_environment():
    """Load a .env file from the working directory, without overriding real env vars."""
    load_dotenv(override=False)

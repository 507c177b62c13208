"""
Input validation for localauth.

Client IDs end up as part of a directory name, so they are restricted to a
character set that cannot escape the base data path.
"""

import re
from typing import Optional

CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def validate_client_id(client_id: Optional[str]) -> Optional[str]:
    """
    Validate a client ID.

    ``None`` and the empty string both mean "the default session" and are
    returned as ``None``.
    """
    if not client_id:
        return None

    if not isinstance(client_id, str) or not CLIENT_ID_PATTERN.fullmatch(client_id):
        raise ValidationError(
            f"Invalid client ID {client_id!r}: only letters, numbers, "
            "underscores and hyphens are allowed"
        )

    return client_id

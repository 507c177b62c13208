"""Unit tests for client ID validation (localauth.validation)."""

import pytest

from localauth.validation import ValidationError, validate_client_id


class TestValidateClientId:
    @pytest.mark.parametrize(
        "client_id", ["bot1", "BOT_2", "a-b-c", "_", "-", "0123456789"]
    )
    def test_accepts_allowed_characters(self, client_id):
        assert validate_client_id(client_id) == client_id

    @pytest.mark.parametrize("client_id", [None, ""])
    def test_empty_means_default_session(self, client_id):
        assert validate_client_id(client_id) is None

    @pytest.mark.parametrize(
        "client_id",
        ["../etc", "a b", "id/2", "id\\2", "dot.ted", "tab\t", "bot1\n", "émoji"],
    )
    def test_rejects_other_characters(self, client_id):
        with pytest.raises(ValidationError):
            validate_client_id(client_id)

    def test_error_names_offending_id(self):
        with pytest.raises(ValidationError, match="id/2"):
            validate_client_id("id/2")

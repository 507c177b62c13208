"""Tests for logging setup (localauth.logger)."""

from localauth.logger import get_logger, setup_logging


def test_log_file_receives_messages(tmp_path):
    log_file = tmp_path / "localauth.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("tests.logger").info("session directory created")

    content = log_file.read_text(encoding="utf-8")
    assert "session directory created" in content
    assert "tests.logger" in content


def test_level_filters_messages(tmp_path):
    log_file = tmp_path / "localauth.log"
    setup_logging(level="warning", log_file=str(log_file))

    logger = get_logger("tests.logger")
    logger.info("hidden")
    logger.warning("shown")

    content = log_file.read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "shown" in content

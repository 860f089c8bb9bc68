"""Tests for the loguru file sink setup."""

import pytest
from loguru import logger

from emoji_picker.Logging_Config import LOG_LEVEL_ENV_VAR, configure_logging, get_log_file, get_log_level


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()


def test_level_from_config():
    assert get_log_level({"logging": {"level": "debug"}}) == "DEBUG"
    assert get_log_level(None) == "INFO"


def test_env_overrides_config(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
    assert get_log_level({"logging": {"level": "DEBUG"}}) == "WARNING"


def test_default_log_file_lives_in_data_dir(isolate_test_environment):
    expected = isolate_test_environment / "data" / "emoji-picker" / "emoji-picker.log"
    assert get_log_file() == expected


def test_configured_file_is_used(tmp_path):
    assert get_log_file({"logging": {"file": str(tmp_path / "x.log")}}) == tmp_path / "x.log"


def test_configure_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "picker.log"
    returned = configure_logging({"logging": {"file": str(log_file), "level": "DEBUG"}})
    logger.debug("hello from the test")
    logger.remove()

    assert returned == log_file
    text = log_file.read_text(encoding="utf-8")
    assert "Logging configured: level=DEBUG" in text
    assert "hello from the test" in text


def test_level_filters_messages(tmp_path):
    log_file = tmp_path / "picker.log"
    configure_logging({"logging": {"file": str(log_file), "level": "WARNING"}})
    logger.info("quiet")
    logger.warning("loud")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text


def test_unknown_level_falls_back_to_info(tmp_path):
    log_file = tmp_path / "picker.log"
    configure_logging({"logging": {"file": str(log_file), "level": "VERBOSE"}})
    logger.info("still logging")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging configured: level=INFO" in text
    assert "still logging" in text


def test_unknown_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    assert get_log_level({}) == "INFO"


def test_logging_section_that_is_not_a_table(isolate_test_environment):
    returned = configure_logging({"logging": "loud"})
    logger.remove()

    assert returned == isolate_test_environment / "data" / "emoji-picker" / "emoji-picker.log"
    assert get_log_level({"logging": "loud"}) == "INFO"


def test_bad_rotation_uses_defaults(tmp_path):
    log_file = tmp_path / "picker.log"
    configure_logging({"logging": {"file": str(log_file), "rotation": "whenever"}})
    logger.remove()

    assert "Invalid rotation/retention" in log_file.read_text(encoding="utf-8")


def test_default_log_file_follows_cache_data_dir(tmp_path):
    config = {"cache": {"data_dir": str(tmp_path / "emojis")}}
    assert get_log_file(config) == tmp_path / "emojis" / "emoji-picker.log"

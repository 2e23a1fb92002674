"""Tests for configuration and logging setup."""
import logging
import sys

import pytest
from pydantic import ValidationError

from aceternity_mcp.logging_config import setup_logging
from aceternity_mcp.settings import ServerSettings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for key in ("ACETERNITY_MCP_SERVER_NAME", "ACETERNITY_MCP_LOG_LEVEL", "ACETERNITY_MCP_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    settings = ServerSettings()
    assert settings.server_name == "aceternity-ui"
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_settings_from_environment(clean_env) -> None:
    clean_env.setenv("ACETERNITY_MCP_LOG_LEVEL", "DEBUG")
    clean_env.setenv("ACETERNITY_MCP_SERVER_NAME", "ui-catalog")
    settings = ServerSettings()
    assert settings.log_level == "DEBUG"
    assert settings.server_name == "ui-catalog"


def test_settings_from_env_file(clean_env, tmp_path) -> None:
    (tmp_path / ".env").write_text("ACETERNITY_MCP_LOG_FILE=server.log\n", encoding="utf-8")
    assert ServerSettings().log_file == "server.log"


@pytest.fixture()
def fresh_logger(request: pytest.FixtureRequest):
    """An unconfigured named logger, emptied again after the test."""
    logger = logging.getLogger(f"aceternity_mcp.tests.{request.node.name}")
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_writes_to_stderr(fresh_logger) -> None:
    setup_logging("debug", logger_name=fresh_logger.name)
    assert fresh_logger.level == logging.DEBUG
    assert len(fresh_logger.handlers) == 1
    assert fresh_logger.handlers[0].stream is sys.stderr


def test_setup_logging_runs_once(fresh_logger, tmp_path) -> None:
    logfile = tmp_path / "server.log"
    setup_logging("INFO", str(logfile), logger_name=fresh_logger.name)
    setup_logging("INFO", str(logfile), logger_name=fresh_logger.name)
    assert len(fresh_logger.handlers) == 2
    fresh_logger.info("hello")
    assert "hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_unknown_level_falls_back(fresh_logger) -> None:
    setup_logging("chatty", logger_name=fresh_logger.name)
    assert fresh_logger.level == logging.INFO


def test_non_level_attribute_name_falls_back(fresh_logger) -> None:
    setup_logging("basic_format", logger_name=fresh_logger.name)
    assert fresh_logger.level == logging.INFO


def test_settings_log_level_is_case_insensitive(clean_env) -> None:
    clean_env.setenv("ACETERNITY_MCP_LOG_LEVEL", "warning")
    assert ServerSettings().log_level == "WARNING"


@pytest.mark.parametrize("level", ["basic_format", "chatty"])
def test_settings_reject_unknown_log_level(clean_env, level) -> None:
    clean_env.setenv("ACETERNITY_MCP_LOG_LEVEL", level)
    with pytest.raises(ValidationError):
        ServerSettings()

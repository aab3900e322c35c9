import logging

import pytest

from messages_api.core import logging_config
from messages_api.core.config import get_settings


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "propagate", True)
    get_settings.cache_clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    get_settings.cache_clear()


def test_get_logger_does_not_configure_anything(package_logger):
    root_handlers = list(logging.getLogger().handlers)

    logging_config.get_logger("messages_api.llm.services.http_message_client")

    assert package_logger.handlers == []
    assert logging.getLogger().handlers == root_handlers


def test_configure_logging_only_touches_package_logger(package_logger):
    root_handlers = list(logging.getLogger().handlers)

    configured = logging_config.configure_logging()
    logging_config.configure_logging()

    assert configured is package_logger
    assert len(package_logger.handlers) == 1
    assert package_logger.propagate is False
    assert logging.getLogger().handlers == root_handlers


def test_configure_logging_writes_plain_text_file(package_logger, monkeypatch, tmp_path):
    log_path = tmp_path / "logs" / "messages.log"
    monkeypatch.setenv("MESSAGES_API_LOG_FILE", str(log_path))
    monkeypatch.setenv("MESSAGES_API_LOG_LEVEL", "DEBUG")

    logging_config.configure_logging()
    logging_config.get_logger("messages_api.tests").info("request_sent", model="claude-3")
    for handler in package_logger.handlers:
        handler.flush()

    line = log_path.read_text(encoding="utf-8").strip()
    assert "[INFO]" in line
    assert "messages_api.tests request_sent" in line
    assert "model=claude-3" in line

import logging

import pytest

from jobintake import logging_config
from jobintake.config import Settings
from jobintake.db.session import engine_options


def test_engine_echoes_sql_only_at_debug() -> None:
    assert engine_options(Settings(log_level="DEBUG"))["echo"] is True
    assert engine_options(Settings(log_level="info"))["echo"] is False


def test_sqlite_engine_allows_cross_thread_sessions() -> None:
    options = engine_options(Settings(database_url="sqlite:///./x.db"))
    assert options["connect_args"] == {"check_same_thread": False}
    assert engine_options(Settings(database_url="postgresql://db/jobs"))["connect_args"] == {}


def test_configure_logging_quiets_multipart_parser(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_config, "_LOG_CONFIGURED", False)
    monkeypatch.setattr(logging_config, "get_settings", lambda: Settings(log_level="DEBUG"))
    parser_logger = logging.getLogger("multipart")
    monkeypatch.setattr(parser_logger, "level", logging.NOTSET)

    logging_config.configure_logging()

    assert parser_logger.level == logging.WARNING
    assert logging_config._LOG_CONFIGURED is True

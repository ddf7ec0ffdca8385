import logging

from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import Settings


def test_configure_logging_sets_level_and_single_handler():
    settings = Settings()
    settings.log_level = "DEBUG"
    configure_logging(settings)
    configure_logging(settings)
    logger = logging.getLogger("backend")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_parse_fallback_is_logged_not_raised(caplog):
    from backend.app.core.note_format import parse_note_string

    with caplog.at_level(logging.DEBUG, logger="backend.app.core.note_format"):
        assert parse_note_string("soon;; call back") == (None, "soon;; call back")
    assert "not a timestamp" in caplog.text

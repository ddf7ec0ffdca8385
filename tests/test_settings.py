from backend.app.core.settings import get_settings, reset_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Customer Notes"
    assert isinstance(settings.database_url, str) and settings.database_url
    assert settings.log_level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CUSTOMER_NOTES_DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("CUSTOMER_NOTES_LOG_LEVEL", "debug")
    monkeypatch.setenv("CUSTOMER_NOTES_SQL_ECHO", "true")
    reset_settings()
    try:
        settings = get_settings()
        assert settings.database_url == "sqlite:///./other.db"
        assert settings.log_level == "DEBUG"
        assert settings.sql_echo is True
    finally:
        reset_settings()

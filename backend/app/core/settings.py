import os


def _env(name: str, default: str) -> str:
    value = os.getenv(f"CUSTOMER_NOTES_{name}")
    return default if value is None or value == "" else value


class Settings:
    def __init__(self):
        self.app_name = "Customer Notes"
        self.environment = _env("ENVIRONMENT", "development")
        self.database_url = _env("DATABASE_URL", "sqlite:///./customer_notes.db")
        self.log_level = _env("LOG_LEVEL", "INFO").upper()
        self.sql_echo = _env("SQL_ECHO", "false").lower() in ("1", "true", "yes")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings():
    """Drop the cached Settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None

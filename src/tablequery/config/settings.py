"""Centralized settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Connection and logging configuration backed by environment variables.

    Field names are the lowercased env-var names without the ``TABLEQUERY_``
    prefix; ``pydantic-settings`` maps them automatically (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        host = settings.mysql_host  # TABLEQUERY_MYSQL_HOST
    """

    model_config = SettingsConfigDict(
        env_prefix="TABLEQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- MySQL -------------------------------------------------------------

    mysql_host: str = "localhost"
    """MySQL server hostname."""

    mysql_port: int = 3306
    """MySQL server port."""

    mysql_user: str = ""
    """Login user."""

    mysql_password: str = ""
    """Login password."""

    mysql_database: str = ""
    """Default database (schema) for unqualified table names."""

    odbc_driver: str = "MySQL ODBC 8.0 Unicode Driver"
    """Name of the installed MySQL ODBC driver."""

    # -- Logging -----------------------------------------------------------

    log_level: str = "INFO"
    """Root log level applied by ``configure_logging``."""

    log_statements: bool = False
    """Log bound values alongside SQL (may expose sensitive data)."""


def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The module-level singleton means the ``.env`` file is read at most once
    per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()

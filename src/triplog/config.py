from os import environ

from pydantic import BaseModel, ConfigDict

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    database_url: str
    report_dir: str
    log_level: str = "INFO"
    sql_echo: bool = False
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        database_url=environ.get("TRIPLOG_DATABASE_URL", "sqlite:///triplog.db"),
        report_dir=environ.get("TRIPLOG_REPORT_DIR", "reports"),
        log_level=environ.get("TRIPLOG_LOG_LEVEL", "INFO").upper(),
        sql_echo=environ.get("TRIPLOG_SQL_ECHO", "false").strip().lower() in _TRUTHY,
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config

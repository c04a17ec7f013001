# core/config.py
"""Environment-driven settings for the people/books service.

The database keys mirror the deployment environment (``DIALECT``, ``HOST``,
``DBPORT``, ``USER``, ``NAME``, ``PASSWORD``). ``DATABASE_URL`` overrides the
composed URL entirely, which is how local runs and the test-suite point the
service at SQLite.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import os

from sqlalchemy.engine import URL, make_url

# Pin the psycopg2 driver; the bare "postgresql" name resolves to psycopg v3
# on newer SQLAlchemy releases
DIALECT_ALIASES = {
    "postgres": "postgresql+psycopg2",
    "postgresql": "postgresql+psycopg2",
}

LIBPQ_DRIVERS = {"postgresql+psycopg2"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    dialect: str
    host: str
    db_port: str
    user: str
    db_name: str
    password: str
    database_url_override: Optional[str] = None
    port: int = 8080
    log_level: str = "INFO"

    def _libpq(self, password: str) -> str:
        return (
            f"host={self.host} user={self.user} dbname={self.db_name} "
            f"sslmode=disable password={password} port={self.db_port}"
        )

    @property
    def dsn(self) -> str:
        """libpq style connection string."""
        return self._libpq(self.password)

    @property
    def driver(self) -> str:
        return DIALECT_ALIASES.get(self.dialect, self.dialect)

    @property
    def uses_dsn(self) -> bool:
        """True when the connection is opened through the libpq string"""
        return not self.database_url_override and self.driver in LIBPQ_DRIVERS

    @property
    def database_url(self) -> URL:
        if self.database_url_override:
            return make_url(self.database_url_override)
        if self.uses_dsn:
            # Host, port and credentials travel in the dsn (see connect_args)
            return URL.create(drivername=self.driver)
        return URL.create(
            drivername=self.driver,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=int(self.db_port) if self.db_port else None,
            database=self.db_name or None,
        )

    @property
    def connect_args(self) -> dict:
        """Extra DBAPI connect() arguments for the engine"""
        return {"dsn": self.dsn} if self.uses_dsn else {}

    @property
    def safe_dsn(self) -> str:
        """The dsn with the password masked, for logging"""
        return self._libpq("***")


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: Optional[str], default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        dialect=(os.getenv("DIALECT") or "postgres").strip().lower(),
        host=os.getenv("HOST", "localhost"),
        db_port=os.getenv("DBPORT", "5432"),
        user=os.getenv("USER", ""),
        db_name=os.getenv("NAME", ""),
        password=os.getenv("PASSWORD", ""),
        database_url_override=(os.getenv("DATABASE_URL") or "").strip() or None,
        port=_int(os.getenv("PORT"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "timesheet_db"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Build from a settings `DB_CONFIG` dict; missing keys keep the defaults."""
        defaults = cls()
        return cls(
            host=str(db_config.get("host", defaults.host)),
            port=int(db_config.get("port", defaults.port)),
            user=str(db_config.get("user", defaults.user)),
            password=str(db_config.get("password", defaults.password)),
            database=str(db_config.get("database", defaults.database)),
        )

    def describe(self) -> str:
        # Safe for logs: no password.
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Process-wide factory for short-lived MySQL connections, one per `db_cursor` block."""

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        """Open a connection; `with_database=False` is used to create the database itself."""
        kwargs = {
            "host": self._config.host,
            "port": self._config.port,
            "user": self._config.user,
            "password": self._config.password,
            "use_pure": True,
        }
        if with_database:
            kwargs["database"] = self._config.database
        return mysql.connector.connect(**kwargs)

"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

# Compound writes need at least repeatable-read isolation on their rows.
SUPPORTED_ISOLATION_LEVELS = (
    "SERIALIZABLE",
    "REPEATABLE READ",
)
# SQLite runs every unit of work under BEGIN IMMEDIATE.
SQLITE_ISOLATION_LEVELS = ("SERIALIZABLE",)
SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


def resolve_log_dir() -> Path:
    """Return the directory receiving log files.

    Returns:
        Path: ``BUDGET_LOG_DIR`` when set, otherwise ``logs`` under the
        current working directory.
    """
    dotenv.load_dotenv()
    value = os.getenv("BUDGET_LOG_DIR", "").strip()
    if value:
        return Path(value).expanduser().resolve()
    return Path.cwd() / "logs"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger store.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        isolation_level: Isolation level applied to each unit of work.
        backend: Store backend identifier (sqlalchemy or memory).
    """

    db_url: str = "sqlite:///budget.db"
    isolation_level: str = "SERIALIZABLE"
    backend: str = "sqlalchemy"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the isolation level or backend is unsupported,
                or the isolation level is not available on SQLite.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("BUDGET_DB_URL", cls.db_url).strip()
        isolation_level = (
            os.getenv("BUDGET_ISOLATION_LEVEL", cls.isolation_level)
            .strip()
            .upper()
            .replace("_", " ")
        )
        if isolation_level not in SUPPORTED_ISOLATION_LEVELS:
            raise ValueError(
                f"Unsupported isolation level: {isolation_level}. "
                f"Expected one of {', '.join(SUPPORTED_ISOLATION_LEVELS)}."
            )
        if (
            db_url.startswith("sqlite")
            and isolation_level not in SQLITE_ISOLATION_LEVELS
        ):
            raise ValueError(
                f"Isolation level {isolation_level} is not available on "
                "SQLite. Use SERIALIZABLE."
            )
        backend = os.getenv("BUDGET_STORE_BACKEND", cls.backend).strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported store backend: {backend}. "
                "Expected sqlalchemy or memory."
            )
        return cls(
            db_url=db_url,
            isolation_level=isolation_level,
            backend=backend,
        )


__all__ = ["LedgerSettings", "SUPPORTED_ISOLATION_LEVELS", "resolve_log_dir"]

"""DDL for the ledger store tables."""

from sqlalchemy import text
from sqlalchemy.engine import Engine

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id VARCHAR(36) PRIMARY KEY,
    name TEXT NOT NULL,
    account_type VARCHAR(16) NOT NULL,
    balance BIGINT NOT NULL DEFAULT 0
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id VARCHAR(36) PRIMARY KEY,
    name TEXT NOT NULL,
    group_id VARCHAR(36),
    payment_for_account_id VARCHAR(36) REFERENCES accounts (id)
)
"""

CREATE_ALLOCATIONS_SQL = """
CREATE TABLE IF NOT EXISTS allocations (
    id VARCHAR(36) PRIMARY KEY,
    category_id VARCHAR(36) NOT NULL REFERENCES categories (id),
    period VARCHAR(7) NOT NULL,
    amount BIGINT NOT NULL,
    moved_amount BIGINT NOT NULL DEFAULT 0,
    notes TEXT NOT NULL DEFAULT '',
    CONSTRAINT uq_allocations_category_period UNIQUE (category_id, period)
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id VARCHAR(36) PRIMARY KEY,
    account_id VARCHAR(36) NOT NULL REFERENCES accounts (id),
    category_id VARCHAR(36) REFERENCES categories (id),
    amount BIGINT NOT NULL,
    txn_date VARCHAR(10) NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    transaction_type VARCHAR(16) NOT NULL,
    transfer_account_id VARCHAR(36) REFERENCES accounts (id),
    import_token TEXT
)
"""

CREATE_INDEXES_SQL = (
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_account
    ON transactions (account_id)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_category
    ON transactions (category_id)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_import_token
    ON transactions (account_id, import_token)
    """,
)

SCHEMA_SQL = (
    CREATE_ACCOUNTS_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_ALLOCATIONS_SQL,
    CREATE_TRANSACTIONS_SQL,
    *CREATE_INDEXES_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create the ledger tables if they do not exist yet.

    Args:
        engine: Engine connected to the ledger database.
    """
    with engine.begin() as conn:
        for statement in SCHEMA_SQL:
            conn.execute(text(statement))


__all__ = ["ensure_schema", "SCHEMA_SQL"]

"""SQLAlchemy-backed ledger store.

Each unit of work runs on a single connection inside one database
transaction, with the isolation level configured for the store. Database
failures are logged in full and surfaced to callers as ``InternalError``.
"""

from contextlib import contextmanager
from datetime import date
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from budget_ledger.application.ports.database import DatabaseEnginePort
from budget_ledger.application.ports.ledger_store import (
    LedgerRepositoryPort,
    LedgerStorePort,
)
from budget_ledger.domain.constants import AccountType, TransactionType
from budget_ledger.domain.errors import InternalError
from budget_ledger.domain.models import (
    Account,
    Allocation,
    Category,
    Transaction,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.utils.money import coerce_cents

ACCOUNT_COLUMNS = "id, name, account_type, balance"
CATEGORY_COLUMNS = "id, name, group_id, payment_for_account_id"
ALLOCATION_COLUMNS = "id, category_id, period, amount, moved_amount, notes"
TRANSACTION_COLUMNS = (
    "id, account_id, category_id, amount, txn_date, description, "
    "transaction_type, transfer_account_id, import_token"
)

SELECT_ACCOUNT_SQL = text(
    f"SELECT {ACCOUNT_COLUMNS} FROM accounts WHERE id = :id"
)
SELECT_ACCOUNTS_SQL = text(
    f"SELECT {ACCOUNT_COLUMNS} FROM accounts ORDER BY name, id"
)
INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (id, name, account_type, balance)
    VALUES (:id, :name, :account_type, :balance)
    """
)
UPDATE_ACCOUNT_SQL = text(
    """
    UPDATE accounts
    SET name = :name, account_type = :account_type, balance = :balance
    WHERE id = :id
    """
)
DELETE_ACCOUNT_SQL = (
    text("DELETE FROM transactions WHERE account_id = :id"),
    text(
        "UPDATE transactions SET transfer_account_id = NULL "
        "WHERE transfer_account_id = :id"
    ),
    text(
        "UPDATE categories SET payment_for_account_id = NULL "
        "WHERE payment_for_account_id = :id"
    ),
    text("DELETE FROM accounts WHERE id = :id"),
)

SELECT_CATEGORY_SQL = text(
    f"SELECT {CATEGORY_COLUMNS} FROM categories WHERE id = :id"
)
SELECT_CATEGORIES_SQL = text(
    f"SELECT {CATEGORY_COLUMNS} FROM categories ORDER BY name, id"
)
SELECT_PAYMENT_CATEGORY_SQL = text(
    f"""
    SELECT {CATEGORY_COLUMNS}
    FROM categories
    WHERE payment_for_account_id = :account_id
    """
)
INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO categories (id, name, group_id, payment_for_account_id)
    VALUES (:id, :name, :group_id, :payment_for_account_id)
    """
)
DELETE_CATEGORY_SQL = (
    text("DELETE FROM allocations WHERE category_id = :id"),
    text(
        "UPDATE transactions SET category_id = NULL WHERE category_id = :id"
    ),
    text("DELETE FROM categories WHERE id = :id"),
)

SELECT_ALLOCATION_SQL = text(
    f"""
    SELECT {ALLOCATION_COLUMNS}
    FROM allocations
    WHERE category_id = :category_id AND period = :period
    """
)
SELECT_ALLOCATION_BY_ID_SQL = text(
    f"SELECT {ALLOCATION_COLUMNS} FROM allocations WHERE id = :id"
)
SELECT_ALLOCATIONS_SQL = text(
    f"SELECT {ALLOCATION_COLUMNS} FROM allocations ORDER BY period, category_id"
)
SELECT_PERIOD_ALLOCATIONS_SQL = text(
    f"""
    SELECT {ALLOCATION_COLUMNS}
    FROM allocations
    WHERE period = :period
    ORDER BY category_id
    """
)
INSERT_ALLOCATION_SQL = text(
    """
    INSERT INTO allocations (
        id,
        category_id,
        period,
        amount,
        moved_amount,
        notes
    )
    VALUES (
        :id,
        :category_id,
        :period,
        :amount,
        :moved_amount,
        :notes
    )
    """
)
UPDATE_ALLOCATION_SQL = text(
    """
    UPDATE allocations
    SET amount = :amount, moved_amount = :moved_amount, notes = :notes
    WHERE id = :id
    """
)
DELETE_ALLOCATION_SQL = text("DELETE FROM allocations WHERE id = :id")

SELECT_TRANSACTION_SQL = text(
    f"SELECT {TRANSACTION_COLUMNS} FROM transactions WHERE id = :id"
)
SELECT_TRANSACTION_BY_TOKEN_SQL = text(
    f"""
    SELECT {TRANSACTION_COLUMNS}
    FROM transactions
    WHERE account_id = :account_id AND import_token = :import_token
    """
)
SELECT_TRANSACTIONS_SQL = text(
    f"SELECT {TRANSACTION_COLUMNS} FROM transactions ORDER BY txn_date, id"
)
SELECT_ACCOUNT_TRANSACTIONS_SQL = text(
    f"""
    SELECT {TRANSACTION_COLUMNS}
    FROM transactions
    WHERE account_id = :account_id
    ORDER BY txn_date, id
    """
)
SELECT_CATEGORY_TRANSACTIONS_SQL = text(
    f"""
    SELECT {TRANSACTION_COLUMNS}
    FROM transactions
    WHERE category_id = :category_id
    ORDER BY txn_date, id
    """
)
INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id,
        account_id,
        category_id,
        amount,
        txn_date,
        description,
        transaction_type,
        transfer_account_id,
        import_token
    )
    VALUES (
        :id,
        :account_id,
        :category_id,
        :amount,
        :txn_date,
        :description,
        :transaction_type,
        :transfer_account_id,
        :import_token
    )
    """
)
UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET account_id = :account_id,
        category_id = :category_id,
        amount = :amount,
        txn_date = :txn_date,
        description = :description,
        transaction_type = :transaction_type,
        transfer_account_id = :transfer_account_id,
        import_token = :import_token
    WHERE id = :id
    """
)
DELETE_TRANSACTION_SQL = text("DELETE FROM transactions WHERE id = :id")


def _to_account(row) -> Account:
    return Account(
        id=row.id,
        name=row.name,
        account_type=AccountType(row.account_type),
        balance=coerce_cents(row.balance),
    )


def _to_category(row) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        group_id=row.group_id,
        payment_for_account_id=row.payment_for_account_id,
    )


def _to_allocation(row) -> Allocation:
    return Allocation(
        id=row.id,
        category_id=row.category_id,
        period=row.period,
        amount=coerce_cents(row.amount),
        notes=row.notes or "",
        moved_amount=coerce_cents(row.moved_amount),
    )


def _to_transaction(row) -> Transaction:
    txn_date = row.txn_date
    if isinstance(txn_date, str):
        txn_date = date.fromisoformat(txn_date)
    return Transaction(
        id=row.id,
        account_id=row.account_id,
        amount=coerce_cents(row.amount),
        date=txn_date,
        description=row.description or "",
        category_id=row.category_id,
        transaction_type=TransactionType(row.transaction_type),
        transfer_account_id=row.transfer_account_id,
        import_token=row.import_token,
    )


def _transaction_params(transaction: Transaction) -> dict:
    return {
        "id": transaction.id,
        "account_id": transaction.account_id,
        "category_id": transaction.category_id,
        "amount": transaction.amount,
        "txn_date": transaction.date.isoformat(),
        "description": transaction.description,
        "transaction_type": transaction.transaction_type.value,
        "transfer_account_id": transaction.transfer_account_id,
        "import_token": transaction.import_token,
    }


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger records read and written through one open connection."""

    def __init__(self, conn: Connection) -> None:
        """Initialize the repository.

        Args:
            conn: Connection with an open transaction.
        """
        self._conn = conn

    def _one(self, query, mapper, **params):
        row = self._conn.execute(query, params).first()
        return mapper(row) if row is not None else None

    def _all(self, query, mapper, **params) -> list:
        return [mapper(row) for row in self._conn.execute(query, params).all()]

    def get_account(self, account_id: str) -> Account | None:
        return self._one(SELECT_ACCOUNT_SQL, _to_account, id=account_id)

    def list_accounts(self) -> list[Account]:
        return self._all(SELECT_ACCOUNTS_SQL, _to_account)

    def insert_account(self, account: Account) -> None:
        self._conn.execute(
            INSERT_ACCOUNT_SQL,
            {
                "id": account.id,
                "name": account.name,
                "account_type": account.account_type.value,
                "balance": account.balance,
            },
        )

    def update_account(self, account: Account) -> None:
        self._conn.execute(
            UPDATE_ACCOUNT_SQL,
            {
                "id": account.id,
                "name": account.name,
                "account_type": account.account_type.value,
                "balance": account.balance,
            },
        )

    def delete_account(self, account_id: str) -> None:
        for statement in DELETE_ACCOUNT_SQL:
            self._conn.execute(statement, {"id": account_id})

    def get_category(self, category_id: str) -> Category | None:
        return self._one(SELECT_CATEGORY_SQL, _to_category, id=category_id)

    def list_categories(self) -> list[Category]:
        return self._all(SELECT_CATEGORIES_SQL, _to_category)

    def get_payment_category(self, account_id: str) -> Category | None:
        return self._one(
            SELECT_PAYMENT_CATEGORY_SQL,
            _to_category,
            account_id=account_id,
        )

    def insert_category(self, category: Category) -> None:
        self._conn.execute(
            INSERT_CATEGORY_SQL,
            {
                "id": category.id,
                "name": category.name,
                "group_id": category.group_id,
                "payment_for_account_id": category.payment_for_account_id,
            },
        )

    def delete_category(self, category_id: str) -> None:
        for statement in DELETE_CATEGORY_SQL:
            self._conn.execute(statement, {"id": category_id})

    def get_allocation(
        self,
        category_id: str,
        period: str,
    ) -> Allocation | None:
        return self._one(
            SELECT_ALLOCATION_SQL,
            _to_allocation,
            category_id=category_id,
            period=period,
        )

    def get_allocation_by_id(self, allocation_id: str) -> Allocation | None:
        return self._one(
            SELECT_ALLOCATION_BY_ID_SQL,
            _to_allocation,
            id=allocation_id,
        )

    def list_allocations(self, period: str | None = None) -> list[Allocation]:
        if period is None:
            return self._all(SELECT_ALLOCATIONS_SQL, _to_allocation)
        return self._all(
            SELECT_PERIOD_ALLOCATIONS_SQL,
            _to_allocation,
            period=period,
        )

    def insert_allocation(self, allocation: Allocation) -> None:
        self._conn.execute(
            INSERT_ALLOCATION_SQL,
            {
                "id": allocation.id,
                "category_id": allocation.category_id,
                "period": allocation.period,
                "amount": allocation.amount,
                "moved_amount": allocation.moved_amount,
                "notes": allocation.notes,
            },
        )

    def update_allocation(self, allocation: Allocation) -> None:
        self._conn.execute(
            UPDATE_ALLOCATION_SQL,
            {
                "id": allocation.id,
                "amount": allocation.amount,
                "moved_amount": allocation.moved_amount,
                "notes": allocation.notes,
            },
        )

    def delete_allocation(self, allocation_id: str) -> None:
        self._conn.execute(DELETE_ALLOCATION_SQL, {"id": allocation_id})

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return self._one(
            SELECT_TRANSACTION_SQL,
            _to_transaction,
            id=transaction_id,
        )

    def find_transaction_by_import_token(
        self,
        account_id: str,
        import_token: str,
    ) -> Transaction | None:
        return self._one(
            SELECT_TRANSACTION_BY_TOKEN_SQL,
            _to_transaction,
            account_id=account_id,
            import_token=import_token,
        )

    def list_transactions(self) -> list[Transaction]:
        return self._all(SELECT_TRANSACTIONS_SQL, _to_transaction)

    def list_account_transactions(self, account_id: str) -> list[Transaction]:
        return self._all(
            SELECT_ACCOUNT_TRANSACTIONS_SQL,
            _to_transaction,
            account_id=account_id,
        )

    def list_category_transactions(
        self,
        category_id: str,
    ) -> list[Transaction]:
        return self._all(
            SELECT_CATEGORY_TRANSACTIONS_SQL,
            _to_transaction,
            category_id=category_id,
        )

    def insert_transaction(self, transaction: Transaction) -> None:
        self._conn.execute(
            INSERT_TRANSACTION_SQL,
            _transaction_params(transaction),
        )

    def update_transaction(self, transaction: Transaction) -> None:
        self._conn.execute(
            UPDATE_TRANSACTION_SQL,
            _transaction_params(transaction),
        )

    def delete_transaction(self, transaction_id: str) -> None:
        self._conn.execute(DELETE_TRANSACTION_SQL, {"id": transaction_id})


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store over a SQLAlchemy engine."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        isolation_level: str = "SERIALIZABLE",
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            isolation_level: Isolation level applied to every unit of work.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._isolation_level = isolation_level
        self._logger = logger or get_app_logger()

    @contextmanager
    def unit_of_work(self) -> Iterator[LedgerRepositoryPort]:
        """Open a connection-bound unit of work.

        Yields:
            LedgerRepositoryPort: Repository sharing one database transaction.

        Raises:
            InternalError: If the database rejects any statement or the
                commit.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                conn = conn.execution_options(
                    isolation_level=self._isolation_level
                )
                with conn.begin():
                    yield SqlAlchemyLedgerRepository(conn)
        except SQLAlchemyError as exc:
            self._logger.error(f"Ledger store failure: {exc!r}")
            raise InternalError("Ledger store operation failed") from exc


__all__ = ["SqlAlchemyLedgerRepository", "SqlAlchemyLedgerStore"]

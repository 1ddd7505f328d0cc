"""Use cases for editing and deleting recorded transactions.

Edits keep account balances consistent with the history. They do not replay
credit card fund movement: budget only moves at the time of the charge.
"""

from dataclasses import replace
from datetime import date, datetime

from budget_ledger.application.ports.ledger_store import (
    LedgerRepositoryPort,
    LedgerStorePort,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.models import Transaction
from budget_ledger.domain.policies import validate_identifier
from budget_ledger.infrastructure.logging.logger import get_app_logger


class UpdateTransactionUseCase:
    """Change fields of a transaction and re-balance affected accounts."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing units of work over the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        transaction_id: str,
        account_id: str | None = None,
        category_id: str | None = None,
        amount: int | None = None,
        description: str | None = None,
        txn_date: date | None = None,
        clear_category: bool = False,
    ) -> Transaction:
        """Update a transaction; ``None`` arguments keep the current value.

        Args:
            transaction_id: Transaction to update.
            account_id: New owning account.
            category_id: New category.
            amount: New non-zero signed amount.
            description: New description.
            txn_date: New date.
            clear_category: Remove the category instead of setting one.

        Returns:
            Transaction: The updated transaction.
        """
        validate_identifier(transaction_id, "transaction_id")
        if amount is not None and (
            isinstance(amount, bool) or not isinstance(amount, int) or amount == 0
        ):
            raise InvalidInputError("Amount must be a non-zero integer")
        if isinstance(txn_date, datetime):
            txn_date = txn_date.date()

        with self._store.unit_of_work() as ledger:
            current = ledger.get_transaction(transaction_id)
            if current is None:
                raise NotFoundError("Transaction", transaction_id)

            new_category_id = current.category_id
            if clear_category:
                new_category_id = None
            elif category_id is not None:
                validate_identifier(category_id, "category_id")
                if ledger.get_category(category_id) is None:
                    raise NotFoundError("Category", category_id)
                new_category_id = category_id

            updated = replace(
                current,
                account_id=account_id or current.account_id,
                category_id=new_category_id,
                amount=current.amount if amount is None else amount,
                description=(
                    current.description if description is None else description
                ),
                date=txn_date or current.date,
            )
            if (
                updated.amount < 0
                and not updated.category_id
                and not updated.is_transfer
            ):
                raise InvalidInputError(
                    "Category is required for expense transactions"
                )

            self._rebalance(ledger, current, updated)
            ledger.update_transaction(updated)

        self._logger.info(f"Updated transaction {transaction_id}")
        return updated

    @staticmethod
    def _rebalance(
        ledger: LedgerRepositoryPort,
        current: Transaction,
        updated: Transaction,
    ) -> None:
        """Reverse the old balance effect and apply the new one."""
        old_account = ledger.get_account(current.account_id)
        if old_account is None:
            raise NotFoundError("Account", current.account_id)

        if updated.account_id == current.account_id:
            delta = updated.amount - current.amount
            if delta:
                ledger.update_account(
                    replace(old_account, balance=old_account.balance + delta)
                )
            return

        validate_identifier(updated.account_id, "account_id")
        new_account = ledger.get_account(updated.account_id)
        if new_account is None:
            raise NotFoundError("Account", updated.account_id)
        ledger.update_account(
            replace(old_account, balance=old_account.balance - current.amount)
        )
        ledger.update_account(
            replace(new_account, balance=new_account.balance + updated.amount)
        )


class DeleteTransactionUseCase:
    """Delete a transaction and reverse its effect on the account balance."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str) -> None:
        validate_identifier(transaction_id, "transaction_id")
        with self._store.unit_of_work() as ledger:
            transaction = ledger.get_transaction(transaction_id)
            if transaction is None:
                raise NotFoundError("Transaction", transaction_id)
            account = ledger.get_account(transaction.account_id)
            if account is None:
                raise NotFoundError("Account", transaction.account_id)
            ledger.delete_transaction(transaction_id)
            ledger.update_account(
                replace(account, balance=account.balance - transaction.amount)
            )
        self._logger.info(
            f"Deleted transaction {transaction_id} on account={account.id}"
        )


__all__ = ["UpdateTransactionUseCase", "DeleteTransactionUseCase"]

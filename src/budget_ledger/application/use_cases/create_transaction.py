"""Use case recording transactions and applying their side effects.

Every write path (manual entry, import, transfer linking) goes through this
processor so that account balances and credit card fund movement stay in
step with the transaction history:

* the transaction is persisted and the owning account balance moves by the
  transaction amount;
* inflows need nothing else, Ready to Assign derives income from history;
* a categorized charge on a credit account moves the expense category's
  remaining period budget, capped at the charge, into the card's payment
  category allocation for the same period.

All writes share one unit of work; a failure at any step aborts the unit and
leaves no partial effect.
"""

from dataclasses import replace
from datetime import date, datetime

from budget_ledger.application.ports.ledger_store import (
    LedgerRepositoryPort,
    LedgerStorePort,
)
from budget_ledger.application.use_cases.manage_allocations import (
    increment_allocation,
)
from budget_ledger.domain.constants import TransactionType
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.models import Account, Category, Transaction
from budget_ledger.domain.policies import new_identifier, validate_identifier
from budget_ledger.domain.services import amount_to_move, available_before_charge
from budget_ledger.infrastructure.logging.logger import get_app_logger

MOVEMENT_NOTES = "Moved from credit card spending"


class CreateTransactionUseCase:
    """Record a transaction with its balance and budget side effects."""

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
        account_id: str,
        amount: int,
        description: str,
        txn_date: date,
        category_id: str | None = None,
        transaction_type: TransactionType = TransactionType.NORMAL,
        transfer_account_id: str | None = None,
        import_token: str | None = None,
    ) -> Transaction:
        """Create a transaction in its own unit of work.

        Args:
            account_id: Account the transaction is recorded on.
            amount: Signed amount in minor units; must be non-zero.
            description: Freeform description.
            txn_date: Date the transaction occurred.
            category_id: Category charged; required for normal outflows.
            transaction_type: Normal transaction or transfer.
            transfer_account_id: Paired account of a transfer.
            import_token: Optional de-duplication token from an import.

        Returns:
            Transaction: The persisted transaction, or the previously
            imported one when ``import_token`` was already recorded.

        Raises:
            InvalidInputError: On malformed input.
            NotFoundError: If the account or category does not exist.
        """
        with self._store.unit_of_work() as ledger:
            return self.record(
                ledger,
                account_id=account_id,
                amount=amount,
                description=description,
                txn_date=txn_date,
                category_id=category_id,
                transaction_type=transaction_type,
                transfer_account_id=transfer_account_id,
                import_token=import_token,
            )

    def record(
        self,
        ledger: LedgerRepositoryPort,
        account_id: str,
        amount: int,
        description: str,
        txn_date: date,
        category_id: str | None = None,
        transaction_type: TransactionType = TransactionType.NORMAL,
        transfer_account_id: str | None = None,
        import_token: str | None = None,
    ) -> Transaction:
        """Create a transaction inside an already open unit of work.

        Args:
            ledger: Repository bound to the caller's unit of work.
            account_id: Account the transaction is recorded on.
            amount: Signed amount in minor units; must be non-zero.
            description: Freeform description.
            txn_date: Date the transaction occurred.
            category_id: Category charged; required for normal outflows.
            transaction_type: Normal transaction or transfer.
            transfer_account_id: Paired account of a transfer.
            import_token: Optional de-duplication token from an import.

        Returns:
            Transaction: The persisted (or previously imported) transaction.
        """
        validate_identifier(account_id, "account_id")
        self._validate_amount(amount)
        txn_type = TransactionType(transaction_type)
        txn_date = self._coerce_date(txn_date)

        account = ledger.get_account(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)

        if amount < 0 and not category_id and txn_type is TransactionType.NORMAL:
            raise InvalidInputError(
                "Category is required for expense transactions"
            )
        category = self._resolve_category(ledger, category_id)
        if transfer_account_id is not None:
            validate_identifier(transfer_account_id, "transfer_account_id")
            if ledger.get_account(transfer_account_id) is None:
                raise NotFoundError("Account", transfer_account_id)

        if import_token:
            existing = ledger.find_transaction_by_import_token(
                account_id,
                import_token,
            )
            if existing is not None:
                self._logger.info(
                    f"Skipped duplicate import token={import_token} "
                    f"on account={account_id}"
                )
                return existing

        payment_category = self._resolve_payment_category(
            ledger,
            account,
            category,
            amount,
            txn_type,
        )

        transaction = Transaction(
            id=new_identifier(),
            account_id=account.id,
            amount=amount,
            date=txn_date,
            description=description or "",
            category_id=category.id if category else None,
            transaction_type=txn_type,
            transfer_account_id=transfer_account_id,
            import_token=import_token or None,
        )
        ledger.insert_transaction(transaction)
        ledger.update_account(replace(account, balance=account.balance + amount))
        self._logger.info(
            f"Recorded transaction {transaction.id}: account={account.id}, "
            f"amount={amount}, period={transaction.period}"
        )

        if payment_category is not None:
            self._move_budget(ledger, transaction, category, payment_category)

        return transaction

    def _move_budget(
        self,
        ledger: LedgerRepositoryPort,
        transaction: Transaction,
        expense_category: Category,
        payment_category: Category,
    ) -> int:
        """Move budgeted money from the charged category to the card.

        Args:
            ledger: Repository bound to the current unit of work.
            transaction: The credit card charge just recorded.
            expense_category: Category charged by the transaction.
            payment_category: Payment category of the credit account.

        Returns:
            int: Amount moved; 0 when the category had nothing left.
        """
        period = transaction.period
        available = available_before_charge(
            expense_category.id,
            period,
            ledger.get_allocation(expense_category.id, period),
            ledger.list_category_transactions(expense_category.id),
            exclude_transaction_id=transaction.id,
        )
        moved = amount_to_move(available, transaction.amount)
        if moved == 0:
            self._logger.info(
                f"No budget to move for category={expense_category.id}, "
                f"period={period}, available={available}"
            )
            return 0

        increment_allocation(
            ledger,
            payment_category.id,
            period,
            moved,
            moved=True,
            notes=MOVEMENT_NOTES,
        )
        self._logger.info(
            f"Moved {moved} from category={expense_category.id} "
            f"to payment category={payment_category.id} for {period}"
        )
        return moved

    @staticmethod
    def _resolve_category(
        ledger: LedgerRepositoryPort,
        category_id: str | None,
    ) -> Category | None:
        if not category_id:
            return None
        validate_identifier(category_id, "category_id")
        category = ledger.get_category(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    @staticmethod
    def _resolve_payment_category(
        ledger: LedgerRepositoryPort,
        account: Account,
        category: Category | None,
        amount: int,
        txn_type: TransactionType,
    ) -> Category | None:
        """Return the payment category receiving moved funds, if any."""
        if (
            amount >= 0
            or not account.is_credit
            or category is None
            or category.is_payment
            or txn_type is TransactionType.TRANSFER
        ):
            return None
        payment_category = ledger.get_payment_category(account.id)
        if payment_category is None:
            raise NotFoundError("Payment category for account", account.id)
        return payment_category

    @staticmethod
    def _validate_amount(amount) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidInputError("Amount must be an integer in minor units")
        if amount == 0:
            raise InvalidInputError("Amount must be non-zero")

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        raise InvalidInputError(f"Invalid transaction date: {value!r}")


__all__ = ["CreateTransactionUseCase", "MOVEMENT_NOTES"]

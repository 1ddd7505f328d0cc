"""Use cases managing accounts and categories.

A credit account is always shadowed by exactly one payment category, created
and deleted together with the account.
"""

from datetime import date

from budget_ledger.application.ports.ledger_store import LedgerStorePort
from budget_ledger.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from budget_ledger.domain.constants import (
    PAYMENT_CATEGORY_SUFFIX,
    STARTING_BALANCE_DESCRIPTION,
    AccountType,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.models import Account, Category
from budget_ledger.domain.policies import new_identifier, validate_identifier
from budget_ledger.infrastructure.logging.logger import get_app_logger


def _require_name(name: str | None, entity: str) -> str:
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise InvalidInputError(f"{entity} name is required")
    return cleaned


class CreateAccountUseCase:
    """Create an account, with its payment category for credit accounts."""

    def __init__(
        self,
        store: LedgerStorePort,
        logger=None,
        transaction_processor: CreateTransactionUseCase | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing units of work over the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
            transaction_processor: Processor recording the starting balance.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._transactions = transaction_processor or CreateTransactionUseCase(
            store,
            logger=self._logger,
        )

    def execute(
        self,
        name: str,
        account_type: AccountType | str,
        opening_balance: int = 0,
        opened_on: date | None = None,
    ) -> Account:
        """Create the account.

        A positive opening balance on a non-credit account is recorded as a
        starting balance inflow, so it counts as income. Other opening
        balances, such as existing card debt, are stored directly.

        Args:
            name: Display name.
            account_type: One of the AccountType values.
            opening_balance: Initial balance in minor units.
            opened_on: Date of the starting balance; defaults to today.

        Returns:
            Account: The account as stored after the opening balance.
        """
        name = _require_name(name, "Account")
        try:
            account_type = AccountType(account_type)
        except ValueError as exc:
            raise InvalidInputError(
                f"Invalid account type: {account_type}"
            ) from exc
        if isinstance(opening_balance, bool) or not isinstance(
            opening_balance, int
        ):
            raise InvalidInputError("Opening balance must be an integer")

        as_income = (
            opening_balance > 0 and account_type is not AccountType.CREDIT
        )
        account = Account(
            id=new_identifier(),
            name=name,
            account_type=account_type,
            balance=0 if as_income else opening_balance,
        )

        with self._store.unit_of_work() as ledger:
            ledger.insert_account(account)
            if account.is_credit:
                ledger.insert_category(
                    Category(
                        id=new_identifier(),
                        name=f"{name}{PAYMENT_CATEGORY_SUFFIX}",
                        payment_for_account_id=account.id,
                    )
                )
            if as_income:
                self._transactions.record(
                    ledger,
                    account_id=account.id,
                    amount=opening_balance,
                    description=STARTING_BALANCE_DESCRIPTION,
                    txn_date=opened_on or date.today(),
                )
                account = ledger.get_account(account.id)

        self._logger.info(
            f"Created {account_type.value} account {account.id} ({name})"
        )
        return account


class DeleteAccountUseCase:
    """Delete an account, its transactions and its payment category."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> None:
        validate_identifier(account_id, "account_id")
        with self._store.unit_of_work() as ledger:
            account = ledger.get_account(account_id)
            if account is None:
                raise NotFoundError("Account", account_id)
            payment_category = ledger.get_payment_category(account_id)
            if payment_category is not None:
                ledger.delete_category(payment_category.id)
            ledger.delete_account(account_id)
        self._logger.info(f"Deleted account {account_id}")


class CreateCategoryUseCase:
    """Create a regular spending category."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, name: str, group_id: str | None = None) -> Category:
        category = Category(
            id=new_identifier(),
            name=_require_name(name, "Category"),
            group_id=group_id,
        )
        with self._store.unit_of_work() as ledger:
            ledger.insert_category(category)
        self._logger.info(f"Created category {category.id} ({category.name})")
        return category


__all__ = [
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "CreateCategoryUseCase",
]

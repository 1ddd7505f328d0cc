"""CLI adapter creating the ledger tables in the configured database."""

from sqlalchemy.exc import SQLAlchemyError

from budget_ledger.infrastructure.container import build_database_adapter
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.infrastructure.schema import ensure_schema


def main() -> None:
    """Create the ledger schema if it is missing."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    engine = db_adapter.get_ledger_engine()
    try:
        ensure_schema(engine)
    except SQLAlchemyError as exc:
        logger.error(f"Failed to create ledger schema: {exc!r}")
        print("Ledger schema could not be created.")
        return
    logger.info(f"Ledger schema ready on {engine.url}")
    print("Ledger schema is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()

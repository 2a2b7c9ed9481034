"""CLI adapter to summarize statement files without the dashboard.

Usage::

    python -m statement_dashboard.adapters.summarize_statements_cli a.csv b.csv

The file type comes from ``STATEMENT_FILE_TYPE`` (default ``Generic-CSV``).
"""

from pathlib import Path
import sys

from statement_dashboard.infrastructure.container import (
    build_aggregations_use_case,
    build_balances_use_case,
    build_import_use_case,
    build_transaction_store,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger
from statement_dashboard.infrastructure.settings import DashboardSettings


def main(argv: list[str] | None = None) -> int:
    """Import the given statement files and print their summaries.

    Args:
        argv: Statement file paths; defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit code.
    """
    logger = get_app_logger()
    paths = [Path(arg) for arg in (sys.argv[1:] if argv is None else argv)]
    if not paths:
        logger.warning("No statement files given.")
        return 1

    settings = DashboardSettings.from_env()
    store = build_transaction_store()
    try:
        import_use_case = build_import_use_case(store, settings.file_type)
    except ValueError as exc:
        logger.error(str(exc))
        return 1

    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(f"Cannot read {path}: {exc}")
            return 1
        result = import_use_case.execute(text, path.name)
        print(
            f"{result.source}: {result.imported_count} transactions "
            f"for {result.bank_account}"
        )
        for event in result.events:
            print(f"  {event.message}")

    aggregations = build_aggregations_use_case(store).execute()
    print("Monthly aggregations")
    for row in aggregations.monthly_aggregations:
        print(
            f"{row.year_month}  {row.bank_account:<30} "
            f"income={row.income:.2f} expenses={row.expenses:.2f} "
            f"{settings.currency_code}"
        )

    balances = build_balances_use_case(store).execute()
    print("Latest weekly balances")
    for bank_account, points in balances.items():
        latest = points[-1]
        print(
            f"{bank_account:<30} {latest.time_stamp} "
            f"{latest.balance:.2f} {settings.currency_code}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""Balance reconstruction from sparse transaction samples.

Transactions are grouped into buckets, each bucket is reduced to one sample
transaction, and the samples are expanded into a dense weekly series per
account. Weeks without a sample carry the last known balance forward; weeks
before an account's first sample report zero.

Sampling functions pick one of two transactions from the same bucket. The
bucket is folded left to right in input order, so only a rule that picks the
same transaction whatever the argument order (such as
``sample_lowest_balance``) gives results independent of input order.
"""

from collections.abc import Callable, Sequence
from decimal import Decimal
from functools import reduce

from statement_dashboard.domain.constants import TOTAL_BANK_ACCOUNT
from statement_dashboard.domain.models import (
    BalanceDataPoint,
    BankAccountBalances,
    DenormalizedTransaction,
)
from statement_dashboard.domain.services.periods import (
    generate_periods_for_range,
    year_week,
)


SamplingFn = Callable[
    [DenormalizedTransaction, DenormalizedTransaction],
    DenormalizedTransaction,
]
GroupKeyFn = Callable[[DenormalizedTransaction], str]


def sample_lowest_balance(
    a: DenormalizedTransaction,
    b: DenormalizedTransaction,
) -> DenormalizedTransaction:
    """Pick the transaction with the lower balance."""
    return a if a.balance < b.balance else b


def sample_highest_balance(
    a: DenormalizedTransaction,
    b: DenormalizedTransaction,
) -> DenormalizedTransaction:
    """Pick the transaction with the higher balance."""
    return a if a.balance > b.balance else b


def sample_latest_transaction(
    a: DenormalizedTransaction,
    b: DenormalizedTransaction,
) -> DenormalizedTransaction:
    """Pick the later transaction; same-time ties go to ``b``."""
    return a if a.time_stamp > b.time_stamp else b


def group_by_year_week(transaction: DenormalizedTransaction) -> str:
    """Group key of one bucket per account per ISO week."""
    return transaction.bank_account + "-" + year_week(transaction.time_stamp)


def get_bank_balances(
    transactions: Sequence[DenormalizedTransaction],
    sampling_fn: SamplingFn = sample_lowest_balance,
    group_key_fn: GroupKeyFn = group_by_year_week,
) -> BankAccountBalances:
    """Return a dense weekly balance series for every account.

    Args:
        transactions: Snapshot of denormalized transactions, in any order.
        sampling_fn: Picks the representative of two transactions that share
            a bucket.
        group_key_fn: Maps a transaction to its bucket key.

    Returns:
        BankAccountBalances: One point per generated week for each account,
        in chronological order. Empty when there are no transactions.
    """
    if not transactions:
        return {}

    start_time_stamp = min(t.time_stamp for t in transactions)
    end_time_stamp = max(t.time_stamp for t in transactions)

    groups: dict[str, list[DenormalizedTransaction]] = {}
    for transaction in transactions:
        groups.setdefault(group_key_fn(transaction), []).append(transaction)

    sparse: BankAccountBalances = {}
    for group in groups.values():
        sample = reduce(sampling_fn, group)
        sparse.setdefault(sample.bank_account, []).append(
            BalanceDataPoint(
                time_stamp=sample.time_stamp,
                bank_account=sample.bank_account,
                balance=sample.balance,
            )
        )
    for points in sparse.values():
        points.sort(key=lambda point: point.time_stamp)

    periods = generate_periods_for_range(start_time_stamp, end_time_stamp)
    return {
        bank_account: _fill_gaps(bank_account, points, periods)
        for bank_account, points in sparse.items()
    }


def _fill_gaps(
    bank_account: str,
    points: list[BalanceDataPoint],
    periods: list[str],
) -> list[BalanceDataPoint]:
    filled: list[BalanceDataPoint] = []
    cursor = 0
    for period in periods:
        balance = Decimal("0")
        if cursor < len(points) and (
            year_week(points[cursor].time_stamp) == period
        ):
            balance = points[cursor].balance
            cursor += 1
        elif cursor > 0:
            balance = points[cursor - 1].balance
        filled.append(
            BalanceDataPoint(
                time_stamp=period,
                bank_account=bank_account,
                balance=balance,
            )
        )
    return filled


def with_total_balance(balances: BankAccountBalances) -> BankAccountBalances:
    """Return ``balances`` plus a ``Total`` series summed across accounts.

    Each ``Total`` point is the sum of every real account's balance for the
    same period. An existing ``Total`` entry is replaced, not summed.

    Args:
        balances: Dense series as returned by ``get_bank_balances``.

    Returns:
        BankAccountBalances: New mapping; the input is left untouched.
    """
    accounts = {
        account: points
        for account, points in balances.items()
        if account != TOTAL_BANK_ACCOUNT
    }
    if not accounts:
        return {}

    totals: dict[str, Decimal] = {}
    for points in accounts.values():
        for point in points:
            totals[point.time_stamp] = (
                totals.get(point.time_stamp, Decimal("0")) + point.balance
            )

    result = dict(accounts)
    result[TOTAL_BANK_ACCOUNT] = [
        BalanceDataPoint(
            time_stamp=period,
            bank_account=TOTAL_BANK_ACCOUNT,
            balance=total,
        )
        for period, total in totals.items()
    ]
    return result


__all__ = [
    "SamplingFn",
    "GroupKeyFn",
    "sample_lowest_balance",
    "sample_highest_balance",
    "sample_latest_transaction",
    "group_by_year_week",
    "get_bank_balances",
    "with_total_balance",
]

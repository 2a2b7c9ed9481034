"""CSV statement parser.

Statements are read with ``csv.DictReader``. Header names are matched
case-insensitively and must include ``Date``, ``Description``, ``Amount`` and
``Balance``; an optional ``Account`` column names the account. Rows that
cannot be parsed are reported as ``"Row N: ..."`` messages instead of raising,
so one bad line never discards a whole statement.
"""

from collections.abc import Mapping
import csv
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
import hashlib
import io

from statement_dashboard.domain.models import ParsedStatement, Transaction
from statement_dashboard.utils.decimal_utils import parse_amount


DEFAULT_ACCOUNT = "default"

REQUIRED_COLUMNS = ("date", "description", "amount", "balance")


@dataclass(frozen=True)
class CsvLayout:
    """Column conventions of one statement file type."""

    file_type: str
    bank: str
    delimiter: str
    date_formats: tuple[str, ...]
    decimal_comma: bool = False


FILE_TYPES: dict[str, CsvLayout] = {
    "Generic-CSV": CsvLayout(
        file_type="Generic-CSV",
        bank="Generic",
        delimiter=",",
        date_formats=("%Y-%m-%d", "%Y/%m/%d", "%Y-%m-%dT%H:%M:%S"),
    ),
    "Generic-SSV": CsvLayout(
        file_type="Generic-SSV",
        bank="Generic",
        delimiter=";",
        date_formats=("%d/%m/%Y", "%d.%m.%Y"),
        decimal_comma=True,
    ),
}

SUPPORTED_BANKS = tuple(sorted({layout.bank for layout in FILE_TYPES.values()}))


def transaction_hash(
    account: str,
    time_stamp: str,
    description: str,
    amount: Decimal,
    balance: Decimal,
    occurrence: int,
) -> str:
    """Return a stable content hash for a statement line.

    ``occurrence`` distinguishes identical lines within one statement.
    """
    data = "|".join(
        [
            account,
            time_stamp,
            description,
            str(amount),
            str(balance),
            str(occurrence),
        ]
    )
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


class CsvStatementParser:
    """Parse CSV statements following a ``CsvLayout``."""

    def __init__(self, layout: CsvLayout) -> None:
        self._layout = layout

    @property
    def layout(self) -> CsvLayout:
        return self._layout

    def parse(self, text: str, source: str) -> ParsedStatement:
        """Parse statement text into transactions and error messages.

        Args:
            text: Raw CSV contents.
            source: File name, used only in error messages.

        Returns:
            ParsedStatement: Transactions in file order and parsing errors.
        """
        reader = csv.DictReader(
            io.StringIO(text.lstrip("\ufeff")),
            delimiter=self._layout.delimiter,
        )
        headers = {
            (name or "").strip().lower(): name
            for name in (reader.fieldnames or [])
        }
        if not headers:
            return ParsedStatement(self._layout.bank, DEFAULT_ACCOUNT, [], [])
        missing = [col for col in REQUIRED_COLUMNS if col not in headers]
        if missing:
            return ParsedStatement(
                bank=self._layout.bank,
                account=DEFAULT_ACCOUNT,
                transactions=[],
                parsing_errors=[
                    f"{source}: missing columns {', '.join(missing)}"
                ],
            )

        account: str | None = None
        transactions: list[Transaction] = []
        errors: list[str] = []
        occurrences: dict[tuple, int] = {}
        for row in reader:
            row_number = reader.line_num
            values = self._row_values(row, headers)
            if not any(values.values()):
                continue
            row_account = values.get("account") or DEFAULT_ACCOUNT
            if account is None:
                account = row_account
            elif row_account != account:
                errors.append(
                    f"Row {row_number}: account '{row_account}' differs "
                    f"from statement account '{account}'"
                )
                continue
            try:
                time_stamp = self._parse_date(values["date"])
                amount = parse_amount(
                    values["amount"],
                    self._layout.decimal_comma,
                )
                balance = parse_amount(
                    values["balance"],
                    self._layout.decimal_comma,
                )
            except ValueError as exc:
                errors.append(f"Row {row_number}: {exc}")
                continue
            description = values["description"]
            content = (time_stamp, description, amount, balance)
            occurrence = occurrences.get(content, 0)
            occurrences[content] = occurrence + 1
            transactions.append(
                Transaction(
                    hash=transaction_hash(
                        account,
                        time_stamp,
                        description,
                        amount,
                        balance,
                        occurrence,
                    ),
                    time_stamp=time_stamp,
                    description=description,
                    amount=amount,
                    balance=balance,
                )
            )

        return ParsedStatement(
            bank=self._layout.bank,
            account=account or DEFAULT_ACCOUNT,
            transactions=transactions,
            parsing_errors=errors,
        )

    @staticmethod
    def _row_values(
        row: Mapping[str | None, str | None],
        headers: dict[str, str],
    ) -> dict[str, str]:
        return {
            key: (row.get(name) or "").strip()
            for key, name in headers.items()
        }

    def _parse_date(self, raw: str) -> str:
        for fmt in self._layout.date_formats:
            try:
                return datetime.strptime(raw, fmt).date().isoformat()
            except ValueError:
                continue
        raise ValueError(f"invalid date '{raw}'")


__all__ = [
    "CsvLayout",
    "CsvStatementParser",
    "FILE_TYPES",
    "SUPPORTED_BANKS",
    "transaction_hash",
]

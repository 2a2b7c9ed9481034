"""Helpers for parsing statement amounts into Decimal."""

from decimal import Decimal, InvalidOperation


def parse_amount(raw: str, decimal_comma: bool = False) -> Decimal:
    """Parse a statement amount string into a Decimal.

    Args:
        raw: Amount as printed on the statement, e.g. ``"1 234.50"``.
        decimal_comma: Whether ``,`` is the decimal separator.

    Returns:
        Decimal: Parsed amount.

    Raises:
        ValueError: If the value is empty, not numeric, NaN or infinite.
    """
    cleaned = raw.strip().replace(" ", "").replace("\u00a0", "")
    if decimal_comma:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")
    if not cleaned:
        raise ValueError("empty amount")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount '{raw}'") from exc
    if not value.is_finite():
        raise ValueError(f"invalid amount '{raw}'")
    return value


__all__ = ["parse_amount"]

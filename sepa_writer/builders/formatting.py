"""String formatting for amounts and dates in SEPA documents."""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

AMOUNT_QUANTUM = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals and a decimal point.

    >>> format_amount(Decimal("1234.5"))
    '1234.50'
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return f"{amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP):f}"


def format_date(value: date) -> str:
    """Format as ``YYYY-MM-DD``; datetimes are truncated to their date."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def format_datetime(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS+HH:MM``.

    Naive values are taken as local time.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    return value.replace(microsecond=0).isoformat()

"""
Utility functions for formatting and parsing input.
"""

from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple

# Currency code -> (symbol, thousands separator, decimal separator)
CURRENCY_STYLES = {
    "USD": ("$", ",", "."),  # en-US
    "IDR": ("Rp\u00a0", ".", ","),  # id-ID
}

DATE_INPUT_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    """
    Format a signed amount as a currency string with two decimals.

    Examples:
        Decimal("1234.5"), "USD" -> "$1,234.50"
        Decimal("-50000"), "IDR" -> "-Rp\u00a050.000,00" (no-break space, as id-ID prints it)

    Args:
        amount: Amount (int, float or Decimal)
        currency: "USD" or "IDR"

    Returns:
        Formatted currency string
    """
    symbol, thousands, decimal_sep = CURRENCY_STYLES[currency]
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""

    # Format with en-US separators first, then swap them in one pass
    body = f"{abs(value):,.2f}"
    body = body.translate(str.maketrans({",": thousands, ".": decimal_sep}))

    return f"{sign}{symbol}{body}"


def format_timestamp(value: datetime) -> str:
    """
    Format a timestamp in en-US short form.

    Example: datetime(2025, 1, 5, 15, 4) -> "Jan 5, 2025, 03:04 PM"
    """
    return f"{value:%b} {value.day}, {value:%Y, %I:%M %p}"


def parse_transaction_date(text: str) -> datetime:
    """
    Parse a user supplied transaction date.

    Accepts "YYYY-MM-DD HH:MM" or "YYYY-MM-DD" (midnight).

    Raises:
        ValueError: If the text matches neither format
    """
    text = text.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"Invalid date: {text}")


def day_bounds(now: datetime = None) -> Tuple[datetime, datetime]:
    """Return the first and last second of the day containing ``now``."""
    if now is None:
        now = datetime.now()

    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(hours=23, minutes=59, seconds=59)
    return start, end


def format_uptime(seconds: float) -> str:
    """
    Format an uptime in seconds.

    Returns: "1d 2h 3m 4s"
    """
    seconds = int(seconds)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    return f"{days}d {hours % 24}h {minutes % 60}m {seconds % 60}s"


__all__ = [
    "format_currency",
    "format_timestamp",
    "parse_transaction_date",
    "day_bounds",
    "format_uptime",
]

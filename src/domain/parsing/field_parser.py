"""
Parsers for the loosely-formatted text fields of a listing record.

None of these functions raise on malformed input: an unusable price parses to
``(0.0, False)`` and missing status tags come back as empty strings.
"""
import math
from collections.abc import Sequence

CURRENCY_SYMBOLS: tuple[str, ...] = ("₦", "$", "£", "€")
THOUSANDS_SEPARATOR = ","
PERIOD_MARKER = "/"


def parse_price(raw: str) -> tuple[float, bool]:
    """
    Parse a display price such as ``"₦1,200,000 / month"`` into a number.

    Returns ``(value, True)`` for a positive amount, ``(0.0, False)`` otherwise.
    """
    if not raw:
        return 0.0, False

    cleaned = raw
    for symbol in CURRENCY_SYMBOLS:
        cleaned = cleaned.replace(symbol, "")
    cleaned = cleaned.replace(THOUSANDS_SEPARATOR, "")

    # "/ week", "/ night": only the amount before the marker counts
    if PERIOD_MARKER in cleaned:
        cleaned = cleaned.split(PERIOD_MARKER, 1)[0]

    cleaned = cleaned.strip()
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0, False

    if not math.isfinite(value) or value <= 0:
        return 0.0, False
    return value, True


def split_location(raw: str) -> tuple[str, str]:
    """Split ``"<area>, <city>"`` into ``(area, city)``."""
    parts = raw.split(",")
    if len(parts) < 2:
        whole = raw.strip()
        return whole, whole
    return parts[0].strip(), parts[-1].strip()


def property_type(status: Sequence[str]) -> str:
    return status[0] if len(status) > 0 else ""


def listing_type(status: Sequence[str]) -> str:
    return status[1] if len(status) > 1 else ""

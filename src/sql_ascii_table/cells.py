import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from babel import Locale
from babel.numbers import format_decimal

NULL_TEXT = "null"

# Plain decimal literal with optional exponent; no NaN/Infinity, no underscores.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_text(value: Any) -> str:
    """Returns the display text of a cell; absent values render as ``null``."""
    if value is None:
        return NULL_TEXT
    return str(value)


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parses the textual form of ``value`` as an arbitrary-precision decimal.

    Returns ``None`` when the text is not a plain decimal literal.
    """
    if value is None:
        return None
    text = str(value)
    if not _DECIMAL_RE.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def format_decimal_cell(value: Any, locale: Union[Locale, str]) -> Optional[str]:
    """Formats ``value`` with the locale's default decimal pattern.

    Args:
        value (Any): The raw cell value.
        locale (Locale | str): Babel locale or locale identifier (e.g. ``en_US``).

    Returns:
        Optional[str]: The formatted number, or ``None`` so the renderer falls
        back to its default stringification.
    """
    number = parse_decimal(value)
    if number is None:
        return None
    return format_decimal(number, locale=locale)

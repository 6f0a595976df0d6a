"""Food quantities as fixed-point decimals, and meal/age counts.

All arithmetic happens on :class:`decimal.Decimal` so meal formulas and
ledger balances are exact; rounding happens only when a quantity is
rendered for the activity log.

Numbers in records are plain ASCII: Python-only spellings such as
``1_000`` or non-ASCII digits are rejected.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_EVEN, Decimal

ZERO = Decimal("0")
KG_PLACES = Decimal("0.001")

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


class InvalidQuantity(ValueError):
    """Raised when a number in a record is malformed."""


def to_quantity(raw: str) -> Decimal:
    """Parse *raw* into a Decimal quantity.

    Raises:
        InvalidQuantity: If *raw* is not a plain decimal number.
    """
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        msg = f"Invalid quantity: {raw!r}"
        raise InvalidQuantity(msg)
    return Decimal(text)


def to_count(raw: str) -> int:
    """Parse *raw* as a base-10 integer (meal counts, ages).

    Raises:
        InvalidQuantity: If *raw* is not an optionally signed run of ASCII digits.
    """
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        msg = f"Invalid integer: {raw!r}"
        raise InvalidQuantity(msg)
    return int(text)


def quantize_kg(value: Decimal) -> Decimal:
    """Round *value* to three fractional digits (banker's rounding)."""
    return value.quantize(KG_PLACES, rounding=ROUND_HALF_EVEN)


def format_kg(value: Decimal) -> str:
    """Render *value* with exactly three fractional digits.

    Decimal formatting ignores the host locale, so the separator is
    always a dot.

    Examples:
        >>> format_kg(Decimal("10"))
        '10.000'
        >>> format_kg(Decimal("2.0625"))
        '2.062'
    """
    return f"{quantize_kg(value):f}"

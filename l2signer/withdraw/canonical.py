"""Canonical text of a ``WITHDRAW_REQUEST``.

The ledger rebuilds this exact string from the submitted fields and checks
the signature against it, so the layout here is fixed: keys in alphabetical
order at every level, no whitespace, the amount always written as a float
literal.
"""

from __future__ import annotations

import math
from decimal import Decimal

from l2signer.withdraw.errors import InvalidAmount
from l2signer.withdraw.validation import validate_amount

ACTION = "WITHDRAW_REQUEST"

# Outside this range the ledger's number printer switches to exponent form
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


def format_amount(amount: int | float | Decimal) -> str:
    """Render ``amount`` as an unquoted float literal.

    ``3`` becomes ``3.0`` and ``2.5`` stays ``2.5``.

    Raises:
        InvalidAmount: non-numeric, NaN, infinite or out-of-range input.
    """

    validate_amount(amount).unwrap()

    # The ledger parses a double, so every amount is rounded to one first
    try:
        value = float(amount)
    except OverflowError as exc:
        raise InvalidAmount(f"Amount does not fit in a double: {amount}") from exc
    if not math.isfinite(value):
        raise InvalidAmount(f"Amount does not fit in a double: {amount}")
    if value.is_integer():
        return f"{int(value)}.0"
    return _format_fraction(value)


def _format_fraction(value: float) -> str:
    text = repr(value)
    if "e" not in text:
        return text
    if _POSITIONAL_MIN <= abs(value) < _POSITIONAL_MAX:
        return format(Decimal(text), "f")
    mantissa, _, exponent = text.partition("e")
    power = int(exponent)
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


def build_message(amount: int | float | Decimal, from_address: str, timestamp: int, nonce: str) -> str:
    """Return the compact canonical message.

    ``from_address`` and ``nonce`` are copied verbatim between double quotes;
    format checks belong to the caller.
    """

    amount_literal = format_amount(amount)
    return (
        f'{{"action":"{ACTION}",'
        f'"nonce":"{nonce}",'
        f'"payload":{{"amount":{amount_literal},"from_address":"{from_address}"}},'
        f'"timestamp":{int(timestamp)}}}'
    )

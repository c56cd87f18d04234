"""Validation of untrusted signer inputs.

Each check returns a :class:`Validation` outcome instead of raising, so a
caller can collect failures before anything reaches the message builder.
``Validation.unwrap`` converts a failed outcome into the matching typed
exception from :mod:`l2signer.withdraw.errors`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from l2signer.lib.hexcodec import hex_to_bytes
from l2signer.withdraw.errors import InvalidAmount, InvalidKeyEncoding, WithdrawalSigningError


class FailureKind(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    INVALID_KEY_ENCODING = "invalid_key_encoding"


_ERRORS: dict[FailureKind, type[WithdrawalSigningError]] = {
    FailureKind.INVALID_AMOUNT: InvalidAmount,
    FailureKind.INVALID_KEY_ENCODING: InvalidKeyEncoding,
}


@dataclass(frozen=True, slots=True)
class Validation:
    """Outcome of validating one input value."""

    ok: bool
    value: Any = None
    failure: FailureKind | None = None
    detail: str | None = None

    @classmethod
    def success(cls, value: Any) -> Validation:
        return cls(ok=True, value=value)

    @classmethod
    def fail(cls, failure: FailureKind, detail: str) -> Validation:
        return cls(ok=False, failure=failure, detail=detail)

    def unwrap(self) -> Any:
        """Return the validated value or raise the typed error."""

        if self.ok:
            return self.value
        if self.failure is None:
            raise WithdrawalSigningError(self.detail or "validation failed")
        raise _ERRORS[self.failure](self.detail)


def validate_amount(value: Any) -> Validation:
    """Accept finite ``int``, ``float`` or ``Decimal`` amounts.

    Zero and negative values pass; the ledger decides whether they are
    acceptable.
    """

    # bool is an int subclass but never a token quantity
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return Validation.fail(
            FailureKind.INVALID_AMOUNT,
            f"Amount must be a number, got {type(value).__name__}",
        )
    if isinstance(value, Decimal):
        finite = value.is_finite()
    elif isinstance(value, float):
        finite = math.isfinite(value)
    else:
        finite = True
    if not finite:
        return Validation.fail(FailureKind.INVALID_AMOUNT, f"Amount must be finite, got {value}")
    return Validation.success(value)


def validate_key_hex(value: Any, *, label: str, lengths: Iterable[int]) -> Validation:
    """Check that ``value`` is hex for a key of one of the allowed byte ``lengths``."""

    allowed = tuple(lengths)
    try:
        raw = hex_to_bytes(value)
    except InvalidKeyEncoding as exc:
        return Validation.fail(FailureKind.INVALID_KEY_ENCODING, f"{label}: {exc}")
    if len(raw) not in allowed:
        expected = " or ".join(str(size) for size in allowed)
        return Validation.fail(
            FailureKind.INVALID_KEY_ENCODING,
            f"{label} must be {expected} bytes, got {len(raw)}",
        )
    return Validation.success(raw)

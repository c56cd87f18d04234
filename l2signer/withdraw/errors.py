"""Exceptions raised while preparing a signed withdrawal."""

from __future__ import annotations


class WithdrawalSigningError(RuntimeError):
    """Base class for every failure surfaced by the withdrawal signer."""


class InvalidKeyEncoding(WithdrawalSigningError):
    """Raised when a private or public key is not valid hex of the right size."""


class InvalidAmount(WithdrawalSigningError):
    """Raised when the amount cannot be rendered as a finite decimal literal."""


class SigningFailed(WithdrawalSigningError):
    """Raised when the Ed25519 primitive rejects the key or payload."""


class InvalidChainId(WithdrawalSigningError, ValueError):
    """Raised when a chain id does not fit in the one-byte domain prefix."""

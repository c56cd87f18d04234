"""Ed25519 withdrawal authorization for the L2 ledger."""

from l2signer.withdraw.errors import (
    InvalidAmount,
    InvalidChainId,
    InvalidKeyEncoding,
    SigningFailed,
    WithdrawalSigningError,
)
from l2signer.withdraw.schemas import SignatureResult, WithdrawalRequest, WithdrawalSubmission
from l2signer.withdraw.service import sign_withdrawal, sign_withdrawal_request

__all__ = [
    "InvalidAmount",
    "InvalidChainId",
    "InvalidKeyEncoding",
    "SignatureResult",
    "SigningFailed",
    "WithdrawalRequest",
    "WithdrawalSigningError",
    "WithdrawalSubmission",
    "sign_withdrawal",
    "sign_withdrawal_request",
]

"""Withdrawal authorization service."""

from __future__ import annotations

import time
import uuid
from decimal import Decimal
from typing import Any, Callable

from l2signer.config import get_settings
from l2signer.lib.logger import configure_logging, get_logger
from l2signer.lib.metrics import METRICS, SIGN_ATTEMPT, SIGN_SUCCESS
from l2signer.withdraw.canonical import build_message
from l2signer.withdraw.domain import separate
from l2signer.withdraw.errors import WithdrawalSigningError
from l2signer.withdraw.schemas import SignatureResult, WithdrawalRequest
from l2signer.withdraw.signer import sign
from l2signer.withdraw.validation import validate_amount, validate_key_hex

logger = get_logger(__name__)

PUBLIC_KEY_SIZE = 32


def sign_withdrawal(
    amount: int | float | Decimal,
    from_address: str,
    private_key_hex: str,
    public_key_hex: str,
    *,
    chain_id: int | None = None,
    clock_ms: Callable[[], int] | None = None,
    nonce: str | None = None,
) -> SignatureResult:
    """Build, domain-separate and sign a ``WITHDRAW_REQUEST``.

    The public key is echoed into the result as given; it is not derived
    from the private key. ``chain_id`` defaults to the configured chain and
    ``clock_ms`` to the wall clock in epoch milliseconds.
    """

    settings = get_settings()
    configure_logging(settings.log_level)
    chain = settings.chain_id if chain_id is None else chain_id

    METRICS.increment(SIGN_ATTEMPT)
    log_context: dict[str, Any] = {"from_address": from_address, "chain_id": chain}
    logger.info("withdraw_sign_attempt", extra=log_context)

    try:
        validate_amount(amount).unwrap()
        validate_key_hex(public_key_hex, label="public key", lengths=(PUBLIC_KEY_SIZE,)).unwrap()

        now_ms = int((clock_ms or _wall_clock_ms)())
        timestamp = now_ms // 1000
        if nonce is None:
            nonce = str(uuid.uuid4()) if settings.nonce_source == "uuid" else str(now_ms)

        message = build_message(amount, from_address, timestamp, nonce)
        logger.debug("withdraw_sign_message", extra={**log_context, "signed_message": message})

        payload = separate(message, chain)
        signature = sign(payload, private_key_hex)
    except WithdrawalSigningError as exc:
        METRICS.record_error(exc)
        logger.warning(
            "withdraw_sign_error",
            extra={**log_context, "error_type": type(exc).__name__, "reason": str(exc)},
        )
        raise

    METRICS.increment(SIGN_SUCCESS)
    logger.info("withdraw_sign_success", extra={**log_context, "request_timestamp": timestamp, "nonce": nonce})

    return SignatureResult(
        signature=signature,
        message=message,
        public_key=public_key_hex,
        timestamp=timestamp,
        nonce=nonce,
    )


def sign_withdrawal_request(
    request: WithdrawalRequest,
    private_key_hex: str,
    public_key_hex: str,
    **options: Any,
) -> SignatureResult:
    """Sign a validated :class:`WithdrawalRequest`."""

    return sign_withdrawal(request.amount, request.from_address, private_key_hex, public_key_hex, **options)


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000

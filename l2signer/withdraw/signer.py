"""Ed25519 signing of domain-separated payloads."""

from __future__ import annotations

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey

from l2signer.lib.hexcodec import bytes_to_hex
from l2signer.lib.logger import get_logger
from l2signer.withdraw.errors import InvalidKeyEncoding, SigningFailed
from l2signer.withdraw.validation import validate_key_hex

logger = get_logger(__name__)

SEED_SIZE = 32
# NaCl secret key layout: seed || public key
SECRET_KEY_SIZE = 64


def sign(payload: bytes, private_key_hex: str) -> str:
    """Sign ``payload`` and return the 64-byte signature as lowercase hex.

    ``private_key_hex`` is either the 32-byte seed or the 64-byte NaCl secret
    key. For the 64-byte form the trailing public key must match the seed.

    Raises:
        InvalidKeyEncoding: malformed hex, wrong size, or mismatched halves.
        SigningFailed: the Ed25519 primitive rejected the key or payload.
    """

    key_bytes = validate_key_hex(private_key_hex, label="private key", lengths=(SEED_SIZE, SECRET_KEY_SIZE)).unwrap()
    try:
        signing_key = SigningKey(key_bytes[:SEED_SIZE])
    except (CryptoError, TypeError, ValueError) as exc:
        raise SigningFailed(f"Unable to load Ed25519 key: {exc}") from exc

    if len(key_bytes) == SECRET_KEY_SIZE and bytes(signing_key.verify_key) != key_bytes[SEED_SIZE:]:
        raise InvalidKeyEncoding("private key: public half does not match the seed")

    try:
        signed = signing_key.sign(bytes(payload))
    except (CryptoError, TypeError, ValueError) as exc:
        logger.error("withdraw_sign_primitive_error", extra={"payload_size": len(payload)})
        raise SigningFailed(f"Ed25519 signing failed: {exc}") from exc

    return bytes_to_hex(signed.signature)

"""Chain-scoped domain separation for signable payloads."""

from __future__ import annotations

from l2signer.withdraw.errors import InvalidChainId

CHAIN_ID_L1 = 0x01
CHAIN_ID_L2 = 0x02


def separate(message: str, chain_id: int) -> bytes:
    """Prefix the UTF-8 encoded ``message`` with the one-byte ``chain_id``."""

    if not 0 <= chain_id <= 0xFF:
        raise InvalidChainId(f"chain_id must fit in one byte, got {chain_id}")
    encoded = message.encode("utf-8")
    payload = bytearray(len(encoded) + 1)
    payload[0] = chain_id
    payload[1:] = encoded
    return bytes(payload)

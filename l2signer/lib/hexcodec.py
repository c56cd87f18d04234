"""Hex string <-> bytes codecs used for keys and signatures."""

from __future__ import annotations

import re

from l2signer.withdraw.errors import InvalidKeyEncoding

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def hex_to_bytes(text: str) -> bytes:
    """Decode a hex string, two characters per byte.

    Raises:
        InvalidKeyEncoding: odd length or characters outside ``[0-9a-fA-F]``.
    """

    if not isinstance(text, str):
        raise InvalidKeyEncoding(f"Expected a hex string, got {type(text).__name__}")
    if len(text) % 2:
        raise InvalidKeyEncoding(f"Hex string has odd length {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise InvalidKeyEncoding("Hex string contains non-hex characters")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    """Lowercase hex, no prefix, no separators."""

    return bytes(data).hex()

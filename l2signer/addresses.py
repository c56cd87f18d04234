"""Ledger address helpers.

Addresses are ``L1_`` or ``L2_`` followed by the upper-case hex of the first
20 bytes of SHA-256 over the raw Ed25519 public key. Both layers share the
same hash, so converting between them only swaps the prefix.
"""

from __future__ import annotations

import hashlib
import re
from typing import Literal

from l2signer.lib.hexcodec import hex_to_bytes

Layer = Literal["L1", "L2"]

_ADDRESS_RE = re.compile(r"(L1_|L2_)[0-9A-F]{40}")
_HASH_BYTES = 20


def derive_address(public_key_hex: str, layer: Layer = "L2") -> str:
    digest = hashlib.sha256(hex_to_bytes(public_key_hex)).digest()
    return f"{layer}_{digest[:_HASH_BYTES].hex().upper()}"


def is_valid_address(address: str) -> bool:
    return bool(_ADDRESS_RE.fullmatch(address))


def address_layer(address: str) -> Layer | None:
    if address.startswith("L1_"):
        return "L1"
    if address.startswith("L2_"):
        return "L2"
    return None


def to_l2_address(address: str) -> str:
    if not address.startswith("L1_"):
        raise ValueError(f"Not an L1 address: {address}")
    return "L2_" + address[3:]


def to_l1_address(address: str) -> str:
    if not address.startswith("L2_"):
        raise ValueError(f"Not an L2 address: {address}")
    return "L1_" + address[3:]

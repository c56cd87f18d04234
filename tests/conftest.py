"""Pytest fixtures for withdrawal signer tests."""

from collections.abc import Iterator

import pytest

from l2signer.config import get_settings
from l2signer.lib.metrics import METRICS

# RFC 8032 section 7.1, TEST 1
RFC8032_SEED_HEX = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC8032_PUBLIC_HEX = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"

_ENV_VARS = ("L2_CHAIN_ID", "L2_NONCE_SOURCE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate settings and metrics across tests."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    METRICS.reset()
    yield
    get_settings.cache_clear()
    METRICS.reset()


@pytest.fixture()
def keypair() -> tuple[str, str]:
    """Return the RFC 8032 test keypair as (seed hex, public key hex)."""

    return RFC8032_SEED_HEX, RFC8032_PUBLIC_HEX


@pytest.fixture()
def fixed_clock():
    """Clock pinned to 2023-11-14T22:13:20Z in epoch milliseconds."""

    return lambda: 1_700_000_000_000

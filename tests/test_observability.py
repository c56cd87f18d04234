"""Logging and metrics helper tests."""

from __future__ import annotations

import json
import logging
import threading

from l2signer.lib.logger import JsonFormatter, configure_logging, get_logger
from l2signer.lib.metrics import SIGN_ATTEMPT, SigningMetrics


def test_json_formatter_merges_extra_fields() -> None:
    record = logging.LogRecord("l2signer.test", logging.INFO, __file__, 1, "withdraw_sign_attempt", None, None)
    record.chain_id = 2
    record.unserializable = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "withdraw_sign_attempt"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "l2signer.test"
    assert payload["chain_id"] == 2
    assert payload["unserializable"].startswith("<object object")


def test_configure_logging_installs_single_handler() -> None:
    configure_logging()
    configure_logging("WARNING")
    package_logger = logging.getLogger("l2signer")

    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)
    assert package_logger.level == logging.WARNING
    configure_logging("INFO")
    assert get_logger("l2signer.withdraw").getEffectiveLevel() == logging.INFO


def test_metrics_registry_is_thread_safe() -> None:
    registry = SigningMetrics()

    def worker() -> None:
        for _ in range(1000):
            registry.increment(SIGN_ATTEMPT)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert registry.snapshot() == {"withdraw.sign.attempt": 4000}
    registry.reset()
    assert registry.snapshot() == {}


def test_record_error_counts_total_and_type() -> None:
    registry = SigningMetrics()

    registry.record_error(ValueError("bad"))
    registry.record_error(KeyError("missing"))

    assert registry.get("withdraw.sign.error") == 2
    assert registry.snapshot(prefix="withdraw.sign.error.") == {
        "withdraw.sign.error.ValueError": 1,
        "withdraw.sign.error.KeyError": 1,
    }

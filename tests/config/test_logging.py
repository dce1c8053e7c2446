"""Tests for structlog output on the amountkit logger tree."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from amountkit.config.logging import configure_from_settings, configure_logging, get_logger
from amountkit.config.settings import AmountkitSettings
from amountkit.domain.amount import Amount
from amountkit.domain.errors import CurrencyMismatchError


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and amountkit logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("amountkit")
    pkg_handlers = pkg.handlers[:]
    pkg_level = pkg.level
    pkg_propagate = pkg.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.handlers = pkg_handlers
    pkg.setLevel(pkg_level)
    pkg.propagate = pkg_propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("amountkit").level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("amountkit").level == logging.WARNING

    def test_host_root_handler_and_level_survive(self) -> None:
        root = logging.getLogger()
        host_handler = logging.StreamHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.INFO)

        configure_logging(verbose=True, log_json=True)

        assert host_handler in root.handlers
        assert root.level == logging.INFO

    def test_host_handler_on_package_logger_survives(self) -> None:
        pkg = logging.getLogger("amountkit")
        host_handler = logging.NullHandler()
        pkg.addHandler(host_handler)

        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=False, log_json=True)

        assert host_handler in pkg.handlers
        assert len(pkg.handlers) == 2

    def test_records_do_not_reach_root(self) -> None:
        root = logging.getLogger()
        seen: list[logging.LogRecord] = []
        collector = logging.Handler()
        collector.emit = seen.append  # type: ignore[method-assign]
        root.addHandler(collector)

        configure_logging(verbose=True, log_json=True)
        logging.getLogger("amountkit.domain.amount").warning("isolated")

        assert seen == []

    def test_idempotent_calls(self) -> None:
        """Repeated calls replace amountkit's handler instead of stacking."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger("amountkit").handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = get_logger("amountkit.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "amountkit.test"
        assert "timestamp" in parsed

    def test_currency_mismatch_logged_when_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(CurrencyMismatchError):
            Amount.of(1, "USD") + Amount.of(1, "EUR")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Currency mismatch in add: USD vs EUR"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "amountkit.domain.amount"

    def test_currency_mismatch_silent_by_default(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        with pytest.raises(CurrencyMismatchError):
            Amount.of(1, "USD") - Amount.of(1, "EUR")
        assert capfd.readouterr().err == ""


class TestConfigureFromSettings:
    def test_applies_settings_flags(self, capfd: pytest.CaptureFixture[str]) -> None:
        settings = AmountkitSettings.load(verbose=True, log_json=True)
        configure_from_settings(settings)
        assert logging.getLogger("amountkit").level == logging.DEBUG
        get_logger("amountkit.output.formatters").debug("formatted amounts", count=3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "formatted amounts"
        assert parsed["count"] == 3

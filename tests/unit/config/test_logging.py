"""Tests for structlog configuration."""

import json
import logging

import structlog

from treasury.config.logging import (
    REDACTED,
    build_processors,
    configure_logging,
    redact_secrets,
)
from treasury.config.settings import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


def _render(settings: Settings, event: str, **fields: object) -> str:
    """Run an event through the processor chain and return the rendered line."""
    event_dict: dict[str, object] = {"event": event, **fields}
    result: object = event_dict
    for processor in build_processors(settings):
        result = processor(None, "info", result)  # type: ignore[arg-type]
    assert isinstance(result, str)
    return result


class TestProcessors:
    """Tests for build_processors."""

    def test_json_line_has_timestamp_level_and_fields(self) -> None:
        """
        Given: Production settings
        When: A request event is rendered
        Then: One JSON object carries the ISO timestamp, level, method and path
        """
        line = _render(_settings(debug=False), "http_request", method="POST", path="/api/sweep/eth")

        record = json.loads(line)
        assert record["event"] == "http_request"
        assert record["level"] == "info"
        assert record["method"] == "POST"
        assert record["path"] == "/api/sweep/eth"
        assert "T" in record["timestamp"]

    def test_debug_uses_console_renderer(self) -> None:
        processors = build_processors(_settings(debug=True))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_secrets_are_redacted_before_rendering(self) -> None:
        line = _render(_settings(), "wallet_loaded", private_key="0xdeadbeef")

        assert "0xdeadbeef" not in line
        assert json.loads(line)["private_key"] == REDACTED


class TestRedactSecrets:
    """Tests for redact_secrets."""

    def test_leaves_other_keys_untouched(self) -> None:
        event = {"event": "x", "wallet_address": "0xabc", "treasury_private_key": "k"}

        result = redact_secrets(None, "info", event)

        assert result["wallet_address"] == "0xabc"
        assert result["treasury_private_key"] == REDACTED


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_processor_chain(self) -> None:
        configure_logging(_settings(debug=False))

        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert redact_secrets in processors
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_quiets_provider_loggers_outside_debug(self) -> None:
        configure_logging(_settings(debug=False, log_level="DEBUG"))

        assert logging.getLogger("web3.providers").level == logging.WARNING

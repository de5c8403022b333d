"""Unit tests for request correlation ids."""

import contextvars

from feedback_ledger.infrastructure.observability.correlation import (
    begin_request,
    correlation_id_processor,
    get_correlation_id,
)


def _in_fresh_context(func):
    return contextvars.Context().run(func)


class TestBeginRequest:
    """Tests for begin_request."""

    def test_reuses_given_id(self) -> None:
        def run() -> tuple[str, str]:
            return begin_request("corr-1"), get_correlation_id()

        assert _in_fresh_context(run) == ("corr-1", "corr-1")

    def test_generates_id_when_missing(self) -> None:
        def run() -> str:
            return begin_request(None)

        first = _in_fresh_context(run)
        second = _in_fresh_context(run)

        assert first
        assert first != second

    def test_empty_outside_request(self) -> None:
        assert _in_fresh_context(get_correlation_id) == ""


class TestCorrelationProcessor:
    """Tests for correlation_id_processor."""

    def test_adds_active_id(self) -> None:
        def run() -> dict:
            begin_request("corr-2")
            return correlation_id_processor(None, "info", {"event": "x"})

        assert _in_fresh_context(run)["correlation_id"] == "corr-2"

    def test_no_id_outside_request(self) -> None:
        def run() -> dict:
            return correlation_id_processor(None, "info", {"event": "x"})

        assert "correlation_id" not in _in_fresh_context(run)

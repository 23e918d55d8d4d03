"""Tests for logging setup and tracing helpers."""

import logging

import pytest

from onboarding.shared.telemetry import (
    add_span_attributes,
    get_logger,
    setup_logging,
    traced,
)


def test_get_logger_uses_module_name() -> None:
    assert get_logger("onboarding.x").name == "onboarding.x"


def test_setup_logging_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ONBOARDING_DEBUG", "true")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


@pytest.mark.asyncio
async def test_traced_passes_result_and_errors() -> None:
    @traced("test.op")
    async def op(client_id: int) -> int:
        add_span_attributes(tier="NormalClient")
        if client_id < 0:
            raise ValueError("negative")
        return client_id * 2

    assert await op(client_id=4) == 8
    with pytest.raises(ValueError, match="negative"):
        await op(client_id=-1)
    assert op.__name__ == "op"

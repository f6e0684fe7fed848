"""Tests for structlog setup."""

from __future__ import annotations

import importlib

import pytest
import structlog

import fsops.infrastructure.logger as logger_module


class TestLoggerSetup:
    def test_import_leaves_structlog_unconfigured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
        importlib.reload(logger_module)
        assert calls == []

    def test_setup_logging_respects_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("LOG_LEVEL", "debug")
        logger_module.setup_logging()
        assert len(calls) == 1
        assert calls[0]["wrapper_class"] is structlog.make_filtering_bound_logger(10)

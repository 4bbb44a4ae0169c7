"""Unit tests for living_governance.logging - structured logging and context."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest
import structlog

from living_governance.logging import (
    _VALID_LEVELS,
    configure_logging,
    knowledge_logging_context,
)

if TYPE_CHECKING:
    from pathlib import Path


def _file_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


class TestConfigureLoggingLevel:
    """configure_logging validates and applies log levels."""

    def test_valid_level_debug(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="TRACE")

    def test_all_valid_levels_accepted(self) -> None:
        for lvl in _VALID_LEVELS:
            configure_logging(level=lvl)
            assert logging.getLogger().level == getattr(logging, lvl)


class TestConfigureLoggingFile:
    """configure_logging creates file handlers."""

    def test_json_lines_written_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "audit.log"
        configure_logging(level="INFO", fmt="json", log_file=log_file)

        structlog.get_logger("test_file").info("audit_complete", errors=0)
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "audit_complete"
        assert record["errors"] == 0
        assert record["level"] == "info"

    def test_no_file_handler_without_param(self) -> None:
        configure_logging()
        assert _file_handlers() == []

    def test_reconfigure_clears_handlers(self, tmp_path: Path) -> None:
        configure_logging(log_file=str(tmp_path / "first.log"))
        configure_logging(log_file=str(tmp_path / "second.log"))
        assert len(_file_handlers()) == 1

    def test_below_level_is_filtered(self, tmp_path: Path) -> None:
        log_file = tmp_path / "quiet.log"
        configure_logging(level="WARNING", fmt="json", log_file=log_file)
        structlog.get_logger("quiet").info("not_written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "not_written" not in log_file.read_text()


# ---------------------------------------------------------------------------
# knowledge_logging_context
# ---------------------------------------------------------------------------


class TestKnowledgeLoggingContext:
    """knowledge_logging_context binds and unbinds knowledge metadata."""

    def test_binds_knowledge_id(self) -> None:
        configure_logging(level="DEBUG")
        with knowledge_logging_context("framework-coverage", command="audit") as log:
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["knowledge_id"] == "framework-coverage"
            assert ctx["command"] == "audit"
            assert log is not None

    def test_unbinds_on_exit(self) -> None:
        configure_logging(level="DEBUG")
        with knowledge_logging_context("framework-coverage", command="audit"):
            pass
        ctx = structlog.contextvars.get_contextvars()
        assert "knowledge_id" not in ctx
        assert "command" not in ctx

    def test_reraises_and_unbinds(self) -> None:
        configure_logging(level="DEBUG")
        with (
            pytest.raises(RuntimeError, match="boom"),
            knowledge_logging_context("framework-coverage"),
        ):
            raise RuntimeError("boom")
        assert "knowledge_id" not in structlog.contextvars.get_contextvars()

    def test_knowledge_id_in_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "context.log"
        configure_logging(level="INFO", fmt="json", log_file=log_file)
        with knowledge_logging_context("framework-coverage-2026-q1") as log:
            log.info("audit_start")
        for handler in logging.getLogger().handlers:
            handler.flush()
        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["knowledge_id"] == "framework-coverage-2026-q1"

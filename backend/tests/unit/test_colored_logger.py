"""Unit tests for the colored PipelineLogger."""

import logging

import pytest

from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage


@pytest.fixture
def plog() -> PipelineLogger:
    return PipelineLogger("tests.pipeline")


def test_timed_step_logs_start_and_elapsed(plog, caplog):
    caplog.set_level(logging.INFO, logger="tests.pipeline")

    with plog.timed_step(PipelineStage.RETRIEVAL, "Searching fragments", limit=3):
        pass

    start, done = caplog.records
    assert "[RETRIEVAL]" in start.getMessage()
    assert "limit=3" in start.getMessage()
    assert "✓ Searching fragments" in done.getMessage()
    assert "elapsed=" in done.getMessage()


def test_timed_step_logs_error_and_reraises(plog, caplog):
    caplog.set_level(logging.INFO, logger="tests.pipeline")

    with pytest.raises(RuntimeError):
        with plog.timed_step(PipelineStage.EMBEDDING, "Embedding question"):
            raise RuntimeError("quota")

    failure = caplog.records[-1]
    assert failure.levelno == logging.ERROR
    assert "Embedding question failed after" in failure.getMessage()
    assert "RuntimeError: quota" in failure.getMessage()


def test_step_warning_uses_warning_level(plog, caplog):
    caplog.set_level(logging.INFO, logger="tests.pipeline")

    plog.step_warning(PipelineStage.ASSEMBLY, "No similar fragments found")

    assert caplog.records[0].levelno == logging.WARNING
    assert "[ASSEMBLY]" in caplog.records[0].getMessage()

"""Colored pipeline logger — ANSI-colored console logging for the question pipeline.

Provides a PipelineLogger with color-coded output per pipeline stage,
making it easy to trace a question from embedding to persistence in the
terminal.

Color scheme:
    🟡 Yellow  — Embedding
    🔵 Blue    — Retrieval
    🟠 Cyan    — Context assembly
    🟣 Magenta — Answer synthesis
    🟢 Green   — Persistence / Done
    🔴 Red     — Errors
    ⚪ Gray    — Details / Stats
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Pipeline Stage Definitions ───────────────────────────────────────

Stage = tuple[str, str, str]


class PipelineStage:
    """Question pipeline stages as (label, color, icon)."""

    EMBEDDING: Stage = ("EMBEDDING", _Colors.YELLOW, "🧮")
    RETRIEVAL: Stage = ("RETRIEVAL", _Colors.BLUE, "🔎")
    ASSEMBLY: Stage = ("ASSEMBLY", _Colors.CYAN, "🧩")
    SYNTHESIS: Stage = ("SYNTHESIS", _Colors.MAGENTA, "🧠")
    PERSISTENCE: Stage = ("PERSIST", _Colors.GREEN, "💾")
    COMPLETE: Stage = ("COMPLETE", _Colors.GREEN, "✅")


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for the question pipeline.

    Every stage line reads ``<icon> [<STAGE>] <mark> <message> (k=v | ...)``,
    so one question can be followed from embedding to persistence.

    Usage:
        plog = PipelineLogger("QuestionPipeline")
        with plog.timed_step(PipelineStage.EMBEDDING, "Embedding question", chars=42):
            vector = await provider.embed(text)
        plog.detail("Query vector ready", dims=len(vector))
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def _emit(
        self,
        level: int,
        stage: Stage,
        color: str,
        mark: str,
        message: str,
        details: dict[str, Any],
    ) -> None:
        label, _, icon = stage
        line = f"{color}{icon} [{label}]{_Colors.RESET} {color}{mark}{message}{_Colors.RESET}"
        if details:
            pairs = " | ".join(f"{k}={v}" for k, v in details.items())
            line += f" {_Colors.GRAY}({pairs}){_Colors.RESET}"
        self._logger.log(level, line)

    def step_start(self, stage: Stage, message: str, **details: Any) -> None:
        self._emit(logging.INFO, stage, stage[1] + _Colors.BOLD, "", message, details)

    def step_complete(self, stage: Stage, message: str, **details: Any) -> None:
        self._emit(logging.INFO, stage, _Colors.GREEN, "✓ ", message, details)

    def step_warning(self, stage: Stage, message: str, **details: Any) -> None:
        """Recoverable problem: the pipeline carries on."""
        self._emit(logging.WARNING, stage, _Colors.YELLOW, "⚠ ", message, details)

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        details = {"error": f"{type(error).__name__}: {error}"} if error else {}
        self._emit(logging.ERROR, stage, _Colors.RED, "✗ ", message, details)

    def detail(self, message: str, **details: Any) -> None:
        line = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if details:
            pairs = " | ".join(f"{k}={v}" for k, v in details.items())
            line += f" {_Colors.DIM}({pairs}){_Colors.RESET}"
        self._logger.info(line)

    def separator(self, title: str) -> None:
        self._logger.info(f"{_Colors.GRAY}── {title} {'─' * max(0, 56 - len(title))}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **details: Any) -> Iterator[None]:
        """Log a stage's start, then its outcome with the elapsed seconds."""
        self.step_start(stage, message, **details)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - start:.2f}s", error=e)
            raise
        self.step_complete(stage, message, elapsed=f"{time.perf_counter() - start:.2f}s")

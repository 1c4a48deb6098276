"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level logs through `loguru`.
- Log counts only; pasted input may contain personal identifiers.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in sorted key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit one-line stage events for pipeline activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) with plain formatting."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **counts: object) -> None:
        """Emit a stage-complete event with optional item counts."""

        self._emit("INFO", "complete", stage, **counts)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

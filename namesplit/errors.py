"""Domain exceptions for CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when reading input, loading config, or writing output fails.

    The text pipeline itself never raises; this error only describes failures
    at the command-line surface around it.
    """

    def __init__(self, *, stage: str, detail: str, hint: str | None = None) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

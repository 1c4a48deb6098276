"""Name splitting pipeline.

Responsibilities:
- Compose preprocessing, segmentation, token normalization, and deduplication.
- Expose `process` as the plain-function entry point for callers.

Key public types and functions:
- `NameSplitPipeline`: stage runner with optional run logging.
- `process`: raw text in, ordered list of names out.
- `to_multiline`: render a result list one name per line.
"""

from __future__ import annotations

from .models.datatypes import SplitOptions, SplitResult
from .telemetry.logger import RunLogger
from .text.dedupe import dedupe
from .text.normalizer import TokenNormalizer
from .text.rules import Preprocessor
from .text.segmenter import Segmenter


class NameSplitPipeline:
    """Run the four text stages over one raw input string.

    Stages run strictly forward: each one only sees the string content the
    previous stage produced. No state is kept between runs.
    """

    STAGES = ("preprocess", "segment", "normalize", "dedupe")

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        preprocessor: Preprocessor | None = None,
        normalizer: TokenNormalizer | None = None,
    ) -> None:
        self._run_logger = run_logger
        self._preprocessor = preprocessor or Preprocessor()
        self._normalizer = normalizer or TokenNormalizer()

    def run(self, raw: object, options: SplitOptions | None = None) -> SplitResult:
        """Split raw pasted text into normalized names.

        Args:
            raw: Pasted text. Anything that is not a `str` yields an empty result.
            options: Deduplication and whitespace switches; defaults enable both.

        Returns:
            `SplitResult` with names in discovery order.
        """

        if not isinstance(raw, str):
            return SplitResult()
        resolved = options or SplitOptions()

        self._start("preprocess")
        text = self._preprocessor.preprocess(raw)
        self._complete("preprocess", chars=len(text))

        self._start("segment")
        chunks = Segmenter(trim_whitespace=resolved.trim_whitespace).segment(text)
        self._complete("segment", chunks=len(chunks))

        self._start("normalize")
        tokens: list[str] = []
        for chunk in chunks:
            token = self._normalizer.normalize(chunk)
            if token:
                tokens.append(token)
        discarded = len(chunks) - len(tokens)
        self._complete("normalize", tokens=len(tokens), discarded=discarded)

        self._start("dedupe")
        names = dedupe(tokens, enabled=resolved.deduplicate)
        duplicates = len(tokens) - len(names)
        self._complete("dedupe", names=len(names), duplicates=duplicates)

        return SplitResult(
            names=names,
            discarded_count=discarded,
            duplicate_count=duplicates,
        )

    def _start(self, stage: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage)

    def _complete(self, stage: str, **counts: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage, **counts)


def process(raw: object, options: SplitOptions | None = None) -> list[str]:
    """Return normalized names from raw pasted text, or `[]` for non-string input."""

    return NameSplitPipeline().run(raw, options).names


def to_multiline(names: list[str]) -> str:
    """Join names one per line."""

    return "\n".join(names)

"""Records passed into and out of the splitting pipeline.

Key types:
- `SplitOptions`: caller-supplied switches for one run.
- `SplitResult`: ordered names plus simple run counters.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SplitOptions:
    """Caller-supplied switches for one pipeline invocation.

    Attributes:
        deduplicate: Drop repeated names using an ASCII case-insensitive key.
        trim_whitespace: Normalize and trim whitespace of segmented chunks.
    """

    deduplicate: bool = True
    trim_whitespace: bool = True


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Output of one pipeline run.

    Attributes:
        names: Normalized tokens in discovery order.
        discarded_count: Chunks dropped because nothing remained after labels.
        duplicate_count: Tokens removed by deduplication.
    """

    names: list[str] = field(default_factory=list)
    discarded_count: int = 0
    duplicate_count: int = 0

    @property
    def count(self) -> int:
        """Return the number of names in the result."""

        return len(self.names)

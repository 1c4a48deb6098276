"""Preprocessing rewrite rules for pasted name lists.

Responsibilities:
- Provide small, independently testable rewrite rules over raw pasted text.
- Apply them in a fixed order so line structure is predictable for segmentation.
"""

from __future__ import annotations

import re
from typing import Protocol

from .patterns import DECEASED_MARKER, DECEASED_MARKERS, HAN, LETTER


_HSPACE = r"[^\S\n]*"


class RewriteRule(Protocol):
    """Protocol for text rewrite rules."""

    def apply(self, text: str) -> str:
        """Apply a single rewrite."""


class NormalizeLineEndings:
    """Convert CRLF line endings to LF."""

    def apply(self, text: str) -> str:
        return text.replace("\r\n", "\n")


class RemoveFormLabels:
    """Blank out lines that are only a form label such as `NRIC or UEN:`."""

    _EXEMPTION_LABEL_RE = re.compile(
        rf"^{_HSPACE}(?:NRIC|FIN){_HSPACE}or{_HSPACE}UEN"
        rf"(?:{_HSPACE}\({_HSPACE}for{_HSPACE}Tax{_HSPACE}Exemption{_HSPACE}purposes{_HSPACE}\))?"
        rf"{_HSPACE}:{_HSPACE}$",
        re.IGNORECASE | re.MULTILINE,
    )
    _ID_LABEL_RE = re.compile(
        rf"^{_HSPACE}(?:NRIC|FIN|UEN)\b[^:\n]*:{_HSPACE}$",
        re.IGNORECASE | re.MULTILINE,
    )

    def apply(self, text: str) -> str:
        """Remove bilingual exemption labels first, then looser ID labels."""

        text = self._EXEMPTION_LABEL_RE.sub("", text)
        return self._ID_LABEL_RE.sub("", text)


class CollapseBlankLines:
    """Collapse runs of blank lines and trim the whole text."""

    def apply(self, text: str) -> str:
        return re.sub(r"\n{3,}", "\n\n", text).strip()


class CanonicalizeMarkerColon:
    """Rewrite `故：` / `已故:` variants to the marker followed by one space."""

    _MARKER_COLON_RE = re.compile(rf"({DECEASED_MARKER}){_HSPACE}[:：]{_HSPACE}")

    def apply(self, text: str) -> str:
        return self._MARKER_COLON_RE.sub(r"\1 ", text)


class BreakBeforeListNumbers:
    """Start a new line at inline list numbers like `2)` or `3.` before a name."""

    _LIST_NUMBER_RE = re.compile(
        rf"(?<=[^\s\d(（\[]){_HSPACE}(\d+[.)）])(?={_HSPACE}{LETTER})"
    )

    def apply(self, text: str) -> str:
        return self._LIST_NUMBER_RE.sub(r"\n\1", text)


class BreakBeforeDeceasedMarkers:
    """Move every deceased marker after the first character onto its own line.

    A marker glued directly to a preceding Han character is left alone, since
    that is more likely part of a name than a prefix.
    """

    _INLINE_MARKER_RE = re.compile(
        rf"(?:(?<=\S)\s+|(?<=[^\s{HAN}]))({DECEASED_MARKER})\s*(?={LETTER})"
    )

    def apply(self, text: str) -> str:
        return self._INLINE_MARKER_RE.sub(r"\n\1 ", text)


class BreakBetweenHanNames:
    """Split whitespace-separated Han names onto separate lines.

    This is a best-effort heuristic: nothing guarantees two space-separated Han
    runs are different people. A run that is just a deceased marker keeps a
    single space so it stays attached to the following name.
    """

    _HAN_GAP_RE = re.compile(rf"([{HAN}]+)\s+(?=[{HAN}])")

    def apply(self, text: str) -> str:
        return self._HAN_GAP_RE.sub(self._replace, text)

    @staticmethod
    def _replace(match: re.Match[str]) -> str:
        run = match.group(1)
        if run in DECEASED_MARKERS:
            return f"{run} "
        return f"{run}\n"


class TightenMarkerSpacing:
    """Ensure exactly one space between a line-leading marker and the name."""

    _LEADING_MARKER_RE = re.compile(
        rf"^({DECEASED_MARKER}){_HSPACE}(?={LETTER})",
        re.MULTILINE,
    )

    def apply(self, text: str) -> str:
        return self._LEADING_MARKER_RE.sub(r"\1 ", text)


def default_preprocess_rules() -> list[RewriteRule]:
    """Return the preprocessing rule sequence in application order."""

    return [
        NormalizeLineEndings(),
        RemoveFormLabels(),
        CollapseBlankLines(),
        CanonicalizeMarkerColon(),
        BreakBeforeListNumbers(),
        BreakBeforeDeceasedMarkers(),
        BreakBetweenHanNames(),
        TightenMarkerSpacing(),
    ]


class Preprocessor:
    """Apply a sequence of rewrite rules to raw pasted text."""

    def __init__(self, rules: list[RewriteRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or default_preprocess_rules()

    def preprocess(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current

"""Split preprocessed text into candidate name and identifier chunks.

Responsibilities:
- Break text on list separators and before `Name#n` ordinal labels.
- Isolate inline identifiers from surrounding name text, preserving order.
"""

from __future__ import annotations

import re

from .patterns import ID_SPLIT_RE, NAME_LABEL_LOOKAHEAD


_SEPARATOR_RE = re.compile(rf"[/|,，、;；\n]+|{NAME_LABEL_LOOKAHEAD}", re.ASCII)
_MULTI_SPACE_RE = re.compile(r"\s{2,}")


def normalize_spaces(text: str) -> str:
    """Convert full-width spaces, collapse whitespace runs, and trim."""

    text = text.replace("\u3000", " ")
    return _MULTI_SPACE_RE.sub(" ", text).strip()


def explode_inline_ids(part: str, trim_whitespace: bool = True) -> list[str]:
    """Split a chunk around embedded identifiers, keeping text/ID order."""

    pieces = ID_SPLIT_RE.split(part)
    if trim_whitespace:
        pieces = [normalize_spaces(piece) for piece in pieces]
    return [piece for piece in pieces if piece.strip()]


class Segmenter:
    """Cut preprocessed text into an ordered list of chunks."""

    def __init__(self, trim_whitespace: bool = True) -> None:
        self.trim_whitespace = trim_whitespace

    def segment(self, text: str) -> list[str]:
        """Return non-empty chunks in left-to-right discovery order."""

        chunks: list[str] = []
        for part in _SEPARATOR_RE.split(text):
            chunks.extend(explode_inline_ids(part, trim_whitespace=self.trim_whitespace))
        return chunks

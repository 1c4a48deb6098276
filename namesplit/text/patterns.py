"""Shared regular expressions for name and identifier recognition.

Responsibilities:
- Hold the identifier grammar used by both segmentation and classification.
- Keep Latin-script matching ASCII-only so Han characters never count as
  word characters for boundaries, identifiers, or title-casing.
"""

from __future__ import annotations

import re


HAN = "\u4e00-\u9fff"
LETTER = f"[A-Za-z{HAN}]"
DECEASED_MARKERS = frozenset({"已故", "故"})

# `故` alone must not match the tail of `已故`.
DECEASED_MARKER = r"(?:已故|(?<!已)故)"

STRICT_ID = r"\b[STFGM]\d{7}[A-Z]\b"
LAX_ID = r"\b[A-Za-z]\d{6,8}[A-Za-z]\b"

ID_SPLIT_RE = re.compile(f"({STRICT_ID}|{LAX_ID})", re.ASCII)
WHOLE_ID_RE = re.compile(f"(?:{STRICT_ID}|{LAX_ID})", re.ASCII)

NAME_LABEL_LOOKAHEAD = r"(?=Name#\d+)|(?=\bName\s*#?\s*\d+\s*[-:：–—])"
NAME_LABEL_PREFIX_RE = re.compile(
    r"^\s*Name\s*#?\s*\d+\s*[-:：–—]?\s*",
    re.IGNORECASE | re.ASCII,
)
LIST_NUMBER_PREFIX_RE = re.compile(r"^\s*\d+[.)）](?!\d)\s*", re.ASCII)


def is_identifier(token: str) -> bool:
    """Return whether the whole token is a strict or lax identifier."""

    return WHOLE_ID_RE.fullmatch(token) is not None

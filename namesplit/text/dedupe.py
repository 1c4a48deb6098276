"""Order-preserving duplicate removal for normalized tokens.

Keys fold ASCII letters only. Han characters and full-width Latin letters are
compared verbatim, so visually distinct tokens are never conflated.
"""

from __future__ import annotations

import string
from typing import Iterable


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def dedupe_key(token: str) -> str:
    """Return the comparison key for a token."""

    return token.translate(_ASCII_LOWER)


def dedupe(tokens: Iterable[str], enabled: bool = True) -> list[str]:
    """Keep the first token for each key, in original order."""

    if not enabled:
        return list(tokens)

    seen: set[str] = set()
    kept: list[str] = []
    for token in tokens:
        key = dedupe_key(token)
        if key in seen:
            continue
        seen.add(key)
        kept.append(token)
    return kept

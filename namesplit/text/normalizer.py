"""Per-chunk token normalization.

Responsibilities:
- Strip ordinal labels and list numbers left over from segmentation.
- Upper-case identifiers and apply name capitalization to everything else.
- Canonicalize common company suffixes such as `Pte Ltd` and `LLP`.

Key types:
- `TokenNormalizer`: turns one chunk into a token, or `""` to discard it.
"""

from __future__ import annotations

import re

from .patterns import (
    DECEASED_MARKER,
    LETTER,
    LIST_NUMBER_PREFIX_RE,
    NAME_LABEL_PREFIX_RE,
    is_identifier,
)
from .rules import RewriteRule


class StripNameLabel:
    """Remove a leading `Name#3:` style ordinal label."""

    def apply(self, text: str) -> str:
        return NAME_LABEL_PREFIX_RE.sub("", text, count=1).strip()


class StripListNumber:
    """Remove a leading `1)` / `2.` / `3）` list number."""

    def apply(self, text: str) -> str:
        return LIST_NUMBER_PREFIX_RE.sub("", text, count=1).strip()


class TightenLeadingMarker:
    """Keep one space after a leading deceased marker and collapse other runs."""

    _LEADING_MARKER_RE = re.compile(rf"^({DECEASED_MARKER})\s*(?={LETTER})")

    def apply(self, text: str) -> str:
        text = self._LEADING_MARKER_RE.sub(r"\1 ", text)
        return re.sub(r"\s{2,}", " ", text).strip()


class UppercaseParenCodes:
    """Upper-case short alphabetic codes in parentheses, e.g. `(sm)` to `(SM)`."""

    _PAREN_CODE_RE = re.compile(r"\(([A-Za-z]{2,5})\)")

    def apply(self, text: str) -> str:
        return self._PAREN_CODE_RE.sub(lambda match: f"({match.group(1).upper()})", text)


class TitleCaseWords:
    """Title-case Latin words while keeping 2-5 letter all-caps acronyms."""

    _WORD_RE = re.compile(r"\b[A-Za-z][A-Za-z']*\b", re.ASCII)
    _ACRONYM_RE = re.compile(r"[A-Z]{2,5}")

    def apply(self, text: str) -> str:
        return self._WORD_RE.sub(self._title_case, text)

    def _title_case(self, match: re.Match[str]) -> str:
        word = match.group(0)
        if self._ACRONYM_RE.fullmatch(word):
            return word
        return word[0].upper() + word[1:].lower()


_COMPANY_SUFFIXES: tuple[tuple[str, str], ...] = (
    (r"\bpte(?:\s+|\s*\.\s*)ltd\b", "Pte Ltd"),
    (r"\bltd\b", "Ltd"),
    (r"\bllp\b", "LLP"),
    (r"\bplc\b", "PLC"),
    (r"\bllc\b", "LLC"),
    (r"\binc\b\.?", "Inc"),
    (r"\bco\b\.?", "Co"),
    (r"\blimited\b", "Limited"),
    (r"\bbhd\b", "Bhd"),
)


class NormalizeCompanySuffixes:
    """Rewrite the first occurrence of each known entity suffix."""

    _SUFFIX_RULES = tuple(
        (re.compile(pattern, re.IGNORECASE | re.ASCII), replacement)
        for pattern, replacement in _COMPANY_SUFFIXES
    )

    def apply(self, text: str) -> str:
        for pattern, replacement in self._SUFFIX_RULES:
            text = pattern.sub(replacement, text, count=1)
        return text


class TokenNormalizer:
    """Classify and reformat one segmented chunk.

    Label rules run first. If what remains is an identifier it is upper-cased
    and returned as-is; otherwise casing and company-suffix rules follow.
    """

    def __init__(
        self,
        label_rules: list[RewriteRule] | None = None,
        name_rules: list[RewriteRule] | None = None,
    ) -> None:
        """Initialize with custom rule lists or the default sequences."""

        self.label_rules = label_rules or [
            StripNameLabel(),
            StripListNumber(),
            TightenLeadingMarker(),
        ]
        self.name_rules = name_rules or [
            UppercaseParenCodes(),
            TitleCaseWords(),
            NormalizeCompanySuffixes(),
        ]

    def normalize(self, chunk: str) -> str:
        """Return the normalized token, or `""` when the chunk should be dropped."""

        current = chunk.strip()
        for rule in self.label_rules:
            current = rule.apply(current)
            if not current:
                return ""

        if is_identifier(current):
            return current.upper()

        for rule in self.name_rules:
            current = rule.apply(current)
        return current

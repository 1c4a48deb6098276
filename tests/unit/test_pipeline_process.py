"""Unit tests for the end-to-end `process` entry point and pipeline runner."""

from __future__ import annotations

import io

import pytest

from namesplit import NameSplitPipeline, SplitOptions, process, to_multiline
from namesplit.telemetry.logger import RunLogger


_NO_DEDUPE = SplitOptions(deduplicate=False)


def test_process_full_paste(pasted_form_text: str) -> None:
    """A realistic paste should yield one normalized token per name or ID."""

    assert process(pasted_form_text) == [
        "John Tan",
        "MARY LIM",
        "S1234567A",
        "故 李成兴",
        "王小明",
        "Abc Pte Ltd",
        "Sm Lee (SM)",
    ]


def test_process_is_idempotent_on_its_own_output(pasted_form_text: str) -> None:
    """Re-processing joined output should change nothing."""

    first = process(pasted_form_text, _NO_DEDUPE)

    assert process(to_multiline(first), _NO_DEDUPE) == first


def test_process_preserves_discovery_order_without_dedupe() -> None:
    """Order should follow the input exactly when deduplication is off."""

    assert process("b, a, B", _NO_DEDUPE) == ["B", "A", "B"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("John, john", ["John"]),
        ("陈, 陈", ["陈"]),
    ],
)
def test_process_dedupes_case_insensitively_for_ascii(raw: str, expected: list[str]) -> None:
    """Deduplication folds ASCII case and collapses identical Han tokens."""

    assert process(raw, SplitOptions(deduplicate=True)) == expected


def test_process_segments_around_identifiers() -> None:
    """Identifiers embedded with names should be isolated in order."""

    result = process("S1234567A John Tan / F7654321B Mary Lim")

    assert result == ["S1234567A", "John Tan", "F7654321B", "Mary Lim"]


def test_process_keeps_deceased_marker_attached() -> None:
    """Each marker should stay with its name, with one space between them."""

    assert process("故John Tan 故Mary Lim") == ["故 John Tan", "故 Mary Lim"]


def test_process_removes_form_label_line() -> None:
    """A bare form label line should not appear in the output."""

    raw = "NRIC or UEN (for Tax Exemption purposes):\nJohn Tan\nS1234567A"

    assert process(raw) == ["John Tan", "S1234567A"]


def test_process_applies_acronym_and_company_rules() -> None:
    """Casing and suffix rules run for non-identifier tokens."""

    assert process("SM John (sm)") == ["SM John (SM)"]
    assert process("abc pte ltd") == ["Abc Pte Ltd"]


def test_process_splits_han_names_separated_by_spaces() -> None:
    """Space-separated Han names are treated as separate people."""

    assert process("李成兴 李茹茵") == ["李成兴", "李茹茵"]


@pytest.mark.parametrize("raw", [None, 123, b"John", ["John"]])
def test_process_returns_empty_list_for_non_string_input(raw: object) -> None:
    """Non-string input yields an empty result without raising."""

    assert process(raw) == []


def test_process_output_is_trimmed_when_trimming_disabled() -> None:
    """Token normalization still trims even when chunk trimming is off."""

    assert process("  john   tan ,mary", SplitOptions(trim_whitespace=False)) == [
        "John Tan",
        "Mary",
    ]


def test_pipeline_run_reports_discarded_and_duplicate_counts() -> None:
    """The runner should count label-only chunks and removed duplicates."""

    result = NameSplitPipeline().run("John, john, Name#2:")

    assert result.names == ["John"]
    assert result.count == 1
    assert result.discarded_count == 1
    assert result.duplicate_count == 1


def test_pipeline_logs_stage_events_with_counts_only() -> None:
    """Stage logs should include counts and never the pasted text."""

    sink = io.StringIO()
    pipeline = NameSplitPipeline(run_logger=RunLogger(sink=sink))

    pipeline.run("John, john")

    output = sink.getvalue()
    assert "[phase] level=INFO stage=preprocess event=start" in output
    assert "stage=dedupe event=complete duplicates=1 names=1" in output
    assert "John" not in output


def test_to_multiline_joins_with_newlines() -> None:
    """Rendering joins names with bare newlines."""

    assert to_multiline(["A", "B"]) == "A\nB"
    assert to_multiline([]) == ""


def test_process_keeps_parenthesized_numbers_inside_names() -> None:
    """A bracketed number is part of the name, not a list marker."""

    assert process("Tan (2) Lee") == ["Tan (2) Lee"]


def test_process_strips_name_label_after_han_text() -> None:
    """A `Name n:` label glued to a Han name still starts a new entry."""

    assert process("陈Name 1: john") == ["陈", "John"]

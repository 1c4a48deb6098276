"""Unit tests for clipboard command fallback behavior."""

from __future__ import annotations

import subprocess

from pytest import MonkeyPatch

from namesplit import clipboard
from namesplit.clipboard import clipboard_commands, copy_to_clipboard


def _which_all(name: str) -> str:
    """Pretend every clipboard tool is installed."""

    return f"/usr/bin/{name}"


def test_clipboard_commands_per_platform() -> None:
    """Each platform should list its native clipboard tool first."""

    assert clipboard_commands("darwin") == [["pbcopy"]]
    assert clipboard_commands("win32") == [["clip"]]
    assert [command[0] for command in clipboard_commands("linux")] == [
        "wl-copy",
        "xclip",
        "xsel",
    ]


def test_copy_falls_back_to_next_command_on_failure(monkeypatch: MonkeyPatch) -> None:
    """A failing tool should be skipped in favor of the next candidate."""

    calls: list[tuple[list[str], str]] = []

    def _fake_run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        """Fail for wl-copy and succeed for any other tool."""

        calls.append((command, str(kwargs["input"])))
        returncode = 1 if command[0].endswith("wl-copy") else 0
        return subprocess.CompletedProcess(command, returncode)

    monkeypatch.setattr(clipboard.shutil, "which", _which_all)
    monkeypatch.setattr(clipboard.subprocess, "run", _fake_run)

    assert copy_to_clipboard("John\nMary", platform="linux") is True
    assert calls == [
        (["/usr/bin/wl-copy"], "John\nMary"),
        (["/usr/bin/xclip", "-selection", "clipboard"], "John\nMary"),
    ]


def test_copy_returns_false_when_no_tool_is_installed(monkeypatch: MonkeyPatch) -> None:
    """Missing tools should report failure instead of raising."""

    monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)

    assert copy_to_clipboard("John", platform="linux") is False


def test_copy_returns_false_when_every_tool_errors(monkeypatch: MonkeyPatch) -> None:
    """OS errors and timeouts from clipboard tools should be tolerated."""

    def _fake_run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        """Raise a different launch failure per tool."""

        _ = kwargs
        if command[0].endswith("xclip"):
            raise subprocess.TimeoutExpired(command, 5)
        raise OSError("cannot open display")

    monkeypatch.setattr(clipboard.shutil, "which", _which_all)
    monkeypatch.setattr(clipboard.subprocess, "run", _fake_run)

    assert copy_to_clipboard("John", platform="linux") is False

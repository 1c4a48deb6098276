"""System clipboard access for CLI output.

Responsibilities:
- Copy text through the platform's clipboard tool, trying fallbacks in order.
- Report success as a boolean; clipboard trouble never aborts a command.
"""

from __future__ import annotations

import shutil
import subprocess
import sys


_CLIPBOARD_TIMEOUT_SECONDS = 5


def clipboard_commands(platform: str | None = None) -> list[list[str]]:
    """Return candidate clipboard commands for a platform, most direct first."""

    resolved = platform or sys.platform
    if resolved == "darwin":
        return [["pbcopy"]]
    if resolved.startswith("win"):
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_to_clipboard(text: str, platform: str | None = None) -> bool:
    """Copy `text` to the clipboard and return whether any command succeeded."""

    for command in clipboard_commands(platform):
        executable = shutil.which(command[0])
        if executable is None:
            continue
        try:
            result = subprocess.run(
                [executable, *command[1:]],
                input=text,
                encoding="utf-8",
                check=False,
                capture_output=True,
                timeout=_CLIPBOARD_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.TimeoutExpired):
            continue
        if result.returncode == 0:
            return True
    return False

"""
Diff display — unified diffs between a source text and its fixed output.
"""

from __future__ import annotations

import difflib


def compute_diff(old_text: str, new_text: str, filename: str = "<text>") -> str | None:
    """Return a unified diff string, or None if the texts are identical."""
    if old_text == new_text:
        return None

    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)

    diff = difflib.unified_diff(
        old_lines, new_lines,
        fromfile=f"a/{filename}",
        tofile=f"b/{filename}",
    )
    diff_text = "".join(
        line if line.endswith("\n") else line + "\n\\ No newline at end of file\n"
        for line in diff
    )
    return diff_text if diff_text.strip() else None


_RESET = "\033[0m"

# Checked in order: file headers before single-character prefixes
_LINE_STYLES = (
    ("+++", "\033[1m"),   # bold
    ("---", "\033[1m"),
    ("@@", "\033[36m"),   # cyan
    ("+", "\033[32m"),    # green
    ("-", "\033[31m"),    # red
)


def _style_for(line: str) -> str | None:
    for prefix, style in _LINE_STYLES:
        if line.startswith(prefix):
            return style
    return None


def format_colored_diff(diff_text: str) -> str:
    """Add ANSI colors to a unified diff string.

    Bold file headers, cyan hunk headers, green additions, red deletions.
    Context lines and ``\\ No newline`` markers are left plain.
    """
    colored: list[str] = []
    for line in diff_text.splitlines():
        style = _style_for(line)
        colored.append(f"{style}{line}{_RESET}" if style else line)
    return "\n".join(colored)

"""
Text fixer — merges the fixes attached to messages into one rewritten text.

Fixes are applied right-to-left so that committing one never shifts the
offsets of those still to be processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .message import Message

logger = logging.getLogger(__name__)


class RangeError(ValueError):
    """Raised when a fix reaches past the end of the source text."""


@dataclass
class FixResult:
    """Result of one fix pass."""
    output: str = ""
    messages: list[Message] = field(default_factory=list)
    fixed: bool = False


class TextFixer:
    """Apply the fixes carried by a list of messages to a source text."""

    def apply_fixes(self, source: str, messages: Sequence[Message]) -> FixResult:
        """Apply every non-conflicting fix in *messages* to *source*.

        Fixes are processed from the rightmost to the leftmost; when two
        fixes start at the same offset the wider one goes first. A fix is
        committed only if it ends at or before the start of the last
        committed fix, otherwise it is rejected as a whole.

        Parameters
        ----------
        source:
            The original text. Never modified.
        messages:
            Messages in report order. Those without a ``fix`` pass through.

        Returns
        -------
        FixResult
            The rewritten text, the messages that were not fixed (fix-less
            messages first, then rejected ones, each in input order) and
            whether anything was committed.

        Raises
        ------
        RangeError
            If a fix ends beyond ``len(source)``.
        """
        with_fix: list[tuple[int, Message]] = []
        without_fix: list[Message] = []
        for index, message in enumerate(messages):
            if not message.fixable:
                without_fix.append(message)
            else:
                with_fix.append((index, message))

        if not with_fix:
            return FixResult(output=source, messages=without_fix, fixed=False)

        self._check_bounds(source, with_fix)

        # Stable sort: identical ranges keep input order
        ordered = sorted(
            with_fix,
            key=lambda item: (item[1].fix.start, item[1].fix.end),
            reverse=True,
        )

        cursor = len(source)
        fragments: list[str] = []
        rejected: list[tuple[int, Message]] = []

        for index, message in ordered:
            fix = message.fix
            if fix.end <= cursor:
                fragments.append(source[fix.end:cursor])
                fragments.append(fix.text)
                cursor = fix.start
                logger.debug(
                    "[Fix] Applied %s at [%d, %d)", message.rule_id or "fix",
                    fix.start, fix.end,
                )
            else:
                rejected.append((index, message))
                logger.debug(
                    "[Fix] Rejected %s at [%d, %d): overlaps fix at %d",
                    message.rule_id or "fix", fix.start, fix.end, cursor,
                )

        fragments.append(source[:cursor])
        output = "".join(reversed(fragments))

        rejected.sort(key=lambda item: item[0])
        remaining = without_fix + [message for _, message in rejected]

        applied = len(with_fix) - len(rejected)
        if rejected:
            logger.info(
                "[Fix] Applied %d of %d fixes, %d rejected as overlapping",
                applied, len(with_fix), len(rejected),
            )

        return FixResult(output=output, messages=remaining, fixed=applied > 0)

    @staticmethod
    def _check_bounds(source: str, with_fix: list[tuple[int, Message]]) -> None:
        """Fail before any work is done if a fix lies outside *source*."""
        length = len(source)
        for index, message in with_fix:
            if message.fix.end > length:
                raise RangeError(
                    f"fix for message {index} ({message.message!r}) ends at "
                    f"{message.fix.end}, past the end of the source ({length})"
                )


# Shared instance
_text_fixer = TextFixer()


def apply_fixes(source: str, messages: Sequence[Message]) -> FixResult:
    """Module-level shortcut for :meth:`TextFixer.apply_fixes`."""
    return _text_fixer.apply_fixes(source, messages)

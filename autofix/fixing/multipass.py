"""
Multi-pass fixing — re-checks and re-fixes a text until no fix applies.

One pass of :func:`apply_fixes` can leave fixes behind when they overlap;
running the checker again on the output gives them another chance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from ..config import Config
from ..diff_display import compute_diff, format_colored_diff
from .message import Message
from .metrics import log_fix_metric
from .text_fixer import apply_fixes

logger = logging.getLogger(__name__)

CheckFunction = Callable[[str], Sequence[Message]]


@dataclass
class MultipassResult:
    """Result of :func:`fix_until_stable`."""
    source: str = ""
    output: str = ""
    messages: list[Message] = field(default_factory=list)
    fixed: bool = False
    passes: int = 0
    applied: int = 0
    rejected: int = 0

    def diff(self, filename: str = "<text>") -> str | None:
        """Unified diff from the original source to the final output."""
        return compute_diff(self.source, self.output, filename)

    def colored_diff(self, filename: str = "<text>") -> str | None:
        """ANSI-colored form of :meth:`diff` for terminal output."""
        diff_text = self.diff(filename)
        return format_colored_diff(diff_text) if diff_text else None


def fix_until_stable(
    source: str,
    check: CheckFunction,
    max_passes: Optional[int] = None,
    config: Optional[Config] = None,
) -> MultipassResult:
    """Run *check* and apply its fixes until a pass commits nothing.

    Parameters
    ----------
    source:
        The text to fix.
    check:
        Called with the current text; returns the messages for it.
    max_passes:
        Upper bound on apply passes. Defaults to ``config.FIX_MAX_PASSES``.
    config:
        Optional configuration; loaded with :meth:`Config.load` if omitted.

    Returns
    -------
    MultipassResult
        The final text and the messages *check* reports for it.
    """
    if config is None:
        config = Config.load()
    if max_passes is None:
        max_passes = config.FIX_MAX_PASSES
    if max_passes < 1:
        raise ValueError(f"max_passes must be at least 1, got {max_passes}")

    result = MultipassResult(source=source, output=source)
    text = source
    messages: list[Message] = []
    pass_fixed = False

    while result.passes < max_passes:
        messages = list(check(text))
        fix_result = apply_fixes(text, messages)
        result.passes += 1

        fixable = sum(1 for m in messages if m.fixable)
        rejected = sum(1 for m in fix_result.messages if m.fixable)
        result.applied += fixable - rejected
        result.rejected += rejected

        pass_fixed = fix_result.fixed
        if not pass_fixed:
            break

        result.fixed = True
        text = fix_result.output
        logger.debug(
            "[Multipass] Pass %d applied %d fixes, %d rejected",
            result.passes, fixable - rejected, rejected,
        )

    if pass_fixed:
        # Pass limit reached with fixes still landing: report on the final text
        logger.info("[Multipass] Pass limit reached after %d passes",
                    result.passes)
        messages = list(check(text))

    result.output = text
    result.messages = messages

    if config.FIX_METRICS:
        log_fix_metric(
            {
                "passes": result.passes,
                "applied": result.applied,
                "rejected": result.rejected,
                "fixed": result.fixed,
            },
            metrics_dir=config.METRICS_DIR,
        )

    return result

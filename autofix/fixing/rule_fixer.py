"""
Rule fixer — builds :class:`Edit` values for rules that want to attach a fix
to the messages they report.
"""

from __future__ import annotations

from typing import Sequence

from .edit import Edit, normalize_range


class RuleFixer:
    """Create fix commands for rules.

    Holds no state, so the shared :data:`rule_fixer` instance can be used
    from anywhere. Nothing is applied until the resulting edits are handed
    to :func:`autofix.fixing.text_fixer.apply_fixes`.
    """

    __slots__ = ()

    def insert_text(self, index: int, text: str) -> Edit:
        """Insert *text* at the 0-based *index* of the source."""
        return Edit(range=(index, index), text=text)

    def insert_text_after(self, range_: Sequence[int], text: str) -> Edit:
        """Insert *text* right after *range_* (at its end offset)."""
        return self.insert_text(normalize_range(range_)[1], text)

    def insert_text_before(self, range_: Sequence[int], text: str) -> Edit:
        """Insert *text* right before *range_* (at its start offset)."""
        return self.insert_text(normalize_range(range_)[0], text)

    def replace_text(self, range_: Sequence[int], text: str) -> Edit:
        """Replace the text covered by *range_* with *text*."""
        return Edit(range=range_, text=text)

    def remove_text(self, range_: Sequence[int]) -> Edit:
        """Remove the text covered by *range_*."""
        return Edit(range=range_, text="")

    def __repr__(self) -> str:
        return "RuleFixer()"


# Shared instance
rule_fixer = RuleFixer()

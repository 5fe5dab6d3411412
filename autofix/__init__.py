"""
autofix — merges rule-proposed text edits into one conflict-free rewrite.

Public API for library usage::

    from autofix import Message, apply_fixes, rule_fixer

    fix = rule_fixer.replace_text((0, 3), "let")
    result = apply_fixes("var x = 1;", [Message("Use let", fix=fix)])
    assert result.output == "let x = 1;"
"""

from .fixing import (
    Edit,
    FixResult,
    Message,
    MultipassResult,
    RangeError,
    RuleFixer,
    TextFixer,
    ValidationError,
    apply_fixes,
    fix_until_stable,
    rule_fixer,
)

__all__ = [
    "Edit", "FixResult", "Message", "MultipassResult", "RangeError",
    "RuleFixer", "TextFixer", "ValidationError",
    "apply_fixes", "fix_until_stable", "rule_fixer",
]

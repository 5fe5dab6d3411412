"""Fix application — build edits for rule messages and merge them into text."""

from .edit import Edit, ValidationError
from .rule_fixer import RuleFixer, rule_fixer
from .message import Message, SEVERITY_WARNING, SEVERITY_ERROR
from .text_fixer import TextFixer, FixResult, RangeError, apply_fixes
from .multipass import MultipassResult, fix_until_stable
from .metrics import log_fix_metric, read_fix_stats

__all__ = [
    "Edit", "ValidationError",
    "RuleFixer", "rule_fixer",
    "Message", "SEVERITY_WARNING", "SEVERITY_ERROR",
    "TextFixer", "FixResult", "RangeError", "apply_fixes",
    "MultipassResult", "fix_until_stable",
    "log_fix_metric", "read_fix_stats",
]

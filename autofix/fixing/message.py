"""
Message — a diagnostic reported by a rule, optionally carrying one fix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .edit import Edit

SEVERITY_WARNING = 1
SEVERITY_ERROR = 2


@dataclass(frozen=True)
class Message:
    """A single reported problem.

    Only ``message`` is required. Messages without a ``fix`` are never
    applied and pass through :func:`apply_fixes` untouched.
    """
    message: str
    rule_id: Optional[str] = None
    severity: int = SEVERITY_ERROR
    line: Optional[int] = None
    column: Optional[int] = None
    fix: Optional[Edit] = None

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> dict:
        data: dict = {
            "message": self.message,
            "ruleId": self.rule_id,
            "severity": self.severity,
        }
        if self.line is not None:
            data["line"] = self.line
        if self.column is not None:
            data["column"] = self.column
        if self.fix is not None:
            data["fix"] = self.fix.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        """Build a message from the dict shape rule engines emit.

        Accepts both ``ruleId`` and ``rule_id`` keys.
        """
        fix = data.get("fix")
        return cls(
            message=str(data.get("message", "")),
            rule_id=data.get("ruleId", data.get("rule_id")),
            severity=int(data.get("severity", SEVERITY_ERROR)),
            line=data.get("line"),
            column=data.get("column"),
            fix=Edit.from_dict(fix) if fix is not None else None,
        )

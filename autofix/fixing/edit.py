"""
Edit — an immutable half-open range plus the text that replaces it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


class ValidationError(ValueError):
    """Raised when an edit is constructed from a malformed range or text."""


def _check_offset(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def normalize_range(range_: Sequence[int]) -> tuple[int, int]:
    """Validate a ``(start, end)`` pair and return it as a tuple.

    Accepts any two-item sequence, or an object exposing a ``range``
    attribute (such as another :class:`Edit`).
    """
    if hasattr(range_, "range"):
        range_ = range_.range
    try:
        start, end = range_
    except (TypeError, ValueError):
        raise ValidationError(
            f"range must be a (start, end) pair, got {range_!r}"
        ) from None
    start = _check_offset(start, "range start")
    end = _check_offset(end, "range end")
    if start > end:
        raise ValidationError(f"range start {start} is after range end {end}")
    return start, end


@dataclass(frozen=True)
class Edit:
    """A single proposed change: replace ``source[start:end]`` with ``text``.

    ``start == end`` is a pure insertion, ``text == ""`` a pure removal.
    """
    range: tuple[int, int]
    text: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "range", normalize_range(self.range))
        if not isinstance(self.text, str):
            raise ValidationError(
                f"edit text must be a str, got {type(self.text).__name__}"
            )

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def is_removal(self) -> bool:
        return self.text == ""

    def to_dict(self) -> dict:
        return {"range": [self.start, self.end], "text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> "Edit":
        if not isinstance(data, dict) or "range" not in data:
            raise ValidationError(f"edit must be a dict with a 'range', got {data!r}")
        return cls(range=data["range"], text=data.get("text", ""))

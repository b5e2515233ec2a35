"""Exception taxonomy for pattern compilation and extraction.

Every error is terminal for the call that raised it: ``compile`` never
returns a partially built pattern and ``parse`` never returns a partial
mapping.
"""

from __future__ import annotations

from typing import Optional, Sequence

__all__ = [
    "GrokError",
    "UnknownPatternError",
    "RecursionLimitError",
    "PatternCompileError",
    "ConversionError",
    "PatternSourceError",
]


class GrokError(ValueError):
    """Base class for all grokex errors."""


class UnknownPatternError(GrokError):
    """A placeholder names a fragment missing from every registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Pattern '{name}' not found")


class RecursionLimitError(GrokError):
    """Placeholder expansion did not reach a fixed point.

    Attributes:
        limit: Expansion budget in effect.
        chain: Fragment names along the offending expansion path, when known.
    """

    def __init__(self, limit: int, chain: Sequence[str] = ()) -> None:
        self.limit = limit
        self.chain = tuple(chain)
        if self.chain:
            message = (
                f"Max recursion {limit} reached: cyclic reference "
                f"{' -> '.join(self.chain)}"
            )
        else:
            message = f"Max recursion {limit} reached"
        super().__init__(message)


class PatternCompileError(GrokError):
    """The expanded pattern is not valid for the regex engine."""

    def __init__(self, message: str, pattern: Optional[str] = None) -> None:
        self.message = message
        self.pattern = pattern
        super().__init__(message)


class ConversionError(GrokError):
    """A captured substring could not be converted to its declared type."""

    def __init__(self, raw: str, target: str) -> None:
        self.raw = raw
        self.target = target
        super().__init__(f"Cannot convert {raw!r} to {target}")


class PatternSourceError(GrokError):
    """Malformed pattern definition input."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)

"""Placeholder scanning for grok pattern text.

Recognizes ``%{FRAGMENT}``, ``%{FRAGMENT:ALIAS}`` and
``%{FRAGMENT:ALIAS:TYPE}`` macros inside arbitrary regex text and splits
text into literal and placeholder tokens.
"""

from __future__ import annotations

import re
from typing import List, Optional, Union

from grokex.types.dto import Placeholder

__all__ = [
    "PLACEHOLDER_REGEX",
    "Token",
    "find_placeholder",
    "tokenize",
]

# TYPE accepts any word here so that a misspelled type is reported by the
# compiler instead of silently leaving the macro in the regex as literal text.
PLACEHOLDER_REGEX = re.compile(
    r"""
    %\{
        (?P<fragment>\w+)
        (?:
            :(?P<alias>[\w@.-]+)
            (?:
                :(?P<type>\w+)
            )?
        )?
    \}
    """,
    re.VERBOSE,
)

#: A literal run of regex text or a placeholder occurrence.
Token = Union[str, Placeholder]


def _to_placeholder(match: re.Match[str]) -> Placeholder:
    return Placeholder(
        fragment=match.group("fragment"),
        alias=match.group("alias"),
        type_name=match.group("type"),
        text=match.group(0),
    )


def find_placeholder(text: str) -> Optional[Placeholder]:
    """Return the leftmost placeholder in ``text``, or None if there is none."""
    match = PLACEHOLDER_REGEX.search(text)
    if match is None:
        return None
    return _to_placeholder(match)


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into literal strings and placeholders, in order.

    Empty literals are omitted, so ``"%{A}%{B}"`` yields two placeholders and
    nothing else.

    Example:
        >>> tokenize("%{WORD:user} on %{HOST}")
        [Placeholder(fragment="WORD", ...), " on ", Placeholder(fragment="HOST", ...)]
    """
    tokens: List[Token] = []
    last_end = 0
    for match in PLACEHOLDER_REGEX.finditer(text):
        start, end = match.span()
        if start > last_end:
            tokens.append(text[last_end:start])
        tokens.append(_to_placeholder(match))
        last_end = end
    if last_end < len(text):
        tokens.append(text[last_end:])
    return tokens

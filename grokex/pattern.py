"""Compiled patterns and typed field extraction.

A ``CompiledPattern`` pairs the fully expanded regex with the alias table
built during compilation. It is immutable and can be shared freely; every
``parse`` call allocates its own result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from grokex.errors import ConversionError
from grokex.types.base import TypeTag, Value
from grokex.types.dto import AliasEntry

__all__ = [
    "CompiledPattern",
    "coerce_value",
]

_INT_REGEX = re.compile(r"[+-]?[0-9]+")

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _to_int(raw: str) -> int:
    if not _INT_REGEX.fullmatch(raw):
        raise ConversionError(raw, TypeTag.INT.label)
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConversionError(raw, TypeTag.INT.label)
    return value


def _to_float(raw: str) -> float:
    # float() tolerates surrounding whitespace and digit separators; captured
    # text must be a bare number.
    if raw != raw.strip() or "_" in raw:
        raise ConversionError(raw, TypeTag.FLOAT.label)
    try:
        return float(raw)
    except ValueError:
        raise ConversionError(raw, TypeTag.FLOAT.label) from None


def _to_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ConversionError(raw, TypeTag.BOOL.label)


_CONVERTERS = {
    TypeTag.INT: _to_int,
    TypeTag.FLOAT: _to_float,
    TypeTag.BOOL: _to_bool,
}


def coerce_value(raw: str, type_tag: Union[TypeTag, str, None] = None) -> Value:
    """Convert captured text according to a type tag.

    Args:
        raw: Captured substring.
        type_tag: A TypeTag, a type token such as ``"int"``, or None. No tag
            or an unrecognized token leaves the text as a string.

    Returns:
        The converted value.

    Raises:
        ConversionError: If ``raw`` is not a valid literal for the tag.
            ``int`` requires a signed 64-bit decimal integer, ``float`` a
            decimal or scientific literal, ``bool`` exactly ``true`` or ``false``.
    """
    if isinstance(type_tag, str):
        try:
            type_tag = TypeTag.from_string(type_tag)
        except ValueError:
            return raw
    if type_tag is None:
        return raw
    return _CONVERTERS[type_tag](raw)


@dataclass(frozen=True, eq=False)
class CompiledPattern:
    """A grok pattern ready for matching.

    Attributes:
        regex: Compiled, fully expanded regular expression.
        alias_map: Generated capture name -> AliasEntry (external name and
            type tag). Read-only.
    """

    regex: re.Pattern[str]
    alias_map: Mapping[str, AliasEntry]
    _groups: Tuple[Tuple[str, int], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alias_map", MappingProxyType(dict(self.alias_map)))
        # Group numbers follow opening parentheses, so this is leftmost-first
        groups = sorted(self.regex.groupindex.items(), key=lambda item: item[1])
        object.__setattr__(self, "_groups", tuple(groups))

    @property
    def pattern(self) -> str:
        """The expanded regex text."""
        return self.regex.pattern

    def match(self, text: str) -> bool:
        """Return True if the pattern matches anywhere in ``text``."""
        return self.regex.search(text) is not None

    def parse(self, text: str) -> Dict[str, Value]:
        """Extract named, typed fields from the first match in ``text``.

        Every named group that took part in the match is reported. Generated
        groups are reported under their alias (or fragment name) with their
        type conversion applied; named groups written directly in the pattern
        text are reported under their own name as strings. When several
        groups report the same name, the leftmost group in the regex wins and
        the others are neither reported nor converted.

        Args:
            text: Input to search.

        Returns:
            Field name -> value. Empty if the pattern does not match.

        Raises:
            ConversionError: If a reported value fails its type conversion. No
                partial result is returned.
        """
        match = self.regex.search(text)
        if match is None:
            return {}

        result: Dict[str, Value] = {}
        for group_name, group_number in self._groups:
            raw = match.group(group_number)
            if raw is None:
                continue
            entry: Optional[AliasEntry] = self.alias_map.get(group_name)
            key = entry.name if entry is not None else group_name
            if key in result:
                continue
            result[key] = coerce_value(raw, entry.type_tag) if entry is not None else raw
        return result

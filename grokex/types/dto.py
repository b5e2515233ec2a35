"""Immutable records shared by the scanner, compiler and extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from grokex.types.base import TypeTag


@dataclass(frozen=True)
class Placeholder:
    """One ``%{FRAGMENT:ALIAS:TYPE}`` occurrence.

    Attributes:
        fragment: Registry key of the referenced fragment.
        alias: External field name, or None when not given.
        type_name: Raw TYPE token as written, or None. Validated by the
            compiler, not the scanner.
        text: The exact placeholder text, braces included.
    """

    fragment: str
    alias: Optional[str]
    type_name: Optional[str]
    text: str

    @property
    def field_name(self) -> str:
        """Name the captured value is reported under."""
        return self.alias if self.alias is not None else self.fragment


@dataclass(frozen=True)
class AliasEntry:
    """Alias table slot for one generated capture group.

    Attributes:
        name: External field name reported by ``parse``.
        type_tag: Conversion for the captured text, or None for a plain string.
    """

    name: str
    type_tag: Optional[TypeTag] = None

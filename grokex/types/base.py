"""Base types for typed field extraction."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: A single extracted field value.
Value = Union[bool, int, float, str]


class TypeTag(IntEnum):
    """Conversion applied to a captured substring before it is reported."""

    #: 64-bit signed integer.
    INT = 1
    #: 64-bit float.
    FLOAT = 2
    #: Literal ``true`` / ``false``.
    BOOL = 3

    @property
    def label(self) -> str:
        """Lowercase name used in placeholders and error messages."""
        return self.name.lower()

    @classmethod
    def from_string(cls, value: str) -> "TypeTag":
        """Parse a placeholder TYPE token into a TypeTag.

        Args:
            value: One of ``int``, ``float``, ``bool`` or ``boolean``. Matching
                is exact; placeholders are case-sensitive.

        Returns:
            The corresponding TypeTag member.

        Raises:
            ValueError: If the token is not a recognized type.
        """
        try:
            return _TYPE_TOKENS[value]
        except KeyError:
            valid = ", ".join(sorted(_TYPE_TOKENS))
            raise ValueError(
                f"Invalid type '{value}'. Valid values are: {valid}"
            ) from None


_TYPE_TOKENS = {
    "int": TypeTag.INT,
    "float": TypeTag.FLOAT,
    "bool": TypeTag.BOOL,
    "boolean": TypeTag.BOOL,
}

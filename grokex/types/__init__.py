"""Shared types for grokex."""

from grokex.types.base import TypeTag, Value
from grokex.types.dto import AliasEntry, Placeholder

__all__ = ["AliasEntry", "Placeholder", "TypeTag", "Value"]

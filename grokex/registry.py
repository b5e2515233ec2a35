"""Caller-owned pattern registry."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from grokex.compiler import compile_pattern
from grokex.config import CompilerConfig
from grokex.dsl.loader import load_patterns_yaml, parse_pattern_lines
from grokex.pattern import CompiledPattern

__all__ = ["PatternRegistry"]

PatternPairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class PatternRegistry(MutableMapping):
    """Mutable mapping of fragment name to regex fragment text.

    Definitions are not validated when added; an undefined reference or an
    invalid fragment is reported by ``compile``. Names missing here fall back
    to the default library at compile time, so registering a name that the
    library also defines overrides the library's version.

    Example:
        >>> registry = PatternRegistry()
        >>> registry.add_pattern("NAME", r"[A-z0-9._-]+")
        >>> registry.compile("%{NAME}").parse("admin")
        {'NAME': 'admin'}
    """

    def __init__(self, patterns: Optional[PatternPairs] = None) -> None:
        self._patterns: Dict[str, str] = {}
        if patterns is not None:
            self.add_patterns(patterns)

    @classmethod
    def from_pairs(cls, pairs: PatternPairs) -> "PatternRegistry":
        """Build a registry from (name, fragment) pairs or a mapping."""
        return cls(pairs)

    @classmethod
    def from_text(cls, text: str, strict: bool = False) -> "PatternRegistry":
        """Build a registry from ``NAME FRAGMENT`` lines.

        Args:
            text: Pattern file contents.
            strict: Raise PatternSourceError on malformed lines instead of
                skipping them with a warning.
        """
        return cls(parse_pattern_lines(text.splitlines(), strict=strict))

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "PatternRegistry":
        """Build a registry from a YAML mapping of name to fragment."""
        return cls(load_patterns_yaml(yaml_str))

    def add_pattern(self, name: str, fragment: str) -> None:
        """Register ``fragment`` under ``name``, replacing any previous definition."""
        self._patterns[name] = fragment

    def add_patterns(self, patterns: PatternPairs) -> None:
        """Register several definitions at once."""
        items = patterns.items() if isinstance(patterns, Mapping) else patterns
        for name, fragment in items:
            self.add_pattern(name, fragment)

    def compile(
        self,
        pattern_text: str,
        alias_only: bool = False,
        config: Optional[CompilerConfig] = None,
    ) -> CompiledPattern:
        """Compile ``pattern_text`` against this registry and the default library.

        See ``grokex.compiler.compile_pattern`` for the error conditions.
        """
        return compile_pattern(
            pattern_text, self._patterns, alias_only=alias_only, config=config
        )

    def __getitem__(self, name: str) -> str:
        return self._patterns[name]

    def __setitem__(self, name: str, fragment: str) -> None:
        self.add_pattern(name, fragment)

    def __delitem__(self, name: str) -> None:
        del self._patterns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._patterns!r})"

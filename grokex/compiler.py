"""Grok pattern compiler.

Expands ``%{FRAGMENT:ALIAS:TYPE}`` placeholders into a single native regex.

The pattern text is split into literal and placeholder tokens. Each
placeholder becomes a group wrapping its fragment, and the fragment's own
placeholders are expanded in turn until only literal regex text is left:

* a placeholder with an alias, or any placeholder when ``alias_only`` is
  False, becomes a named group ``(?P<name0>...)`` with a fresh generated name
  and an alias table entry;
* an unaliased placeholder with ``alias_only`` set becomes ``(?:...)`` and is
  never reported.

Generated names are unique per compile call because a regex cannot repeat a
group name; the alias table maps each of them back to its external field
name, so several groups can report under one name.
"""

from __future__ import annotations

import re
from collections import ChainMap
from typing import Dict, List, Mapping, Optional, Set, Union

from grokex.config import COMPILER_CONFIG, CompilerConfig
from grokex.dsl.scanner import Token, tokenize
from grokex.errors import PatternCompileError, RecursionLimitError, UnknownPatternError
from grokex.library import default_library
from grokex.logging import get_logger
from grokex.pattern import CompiledPattern
from grokex.types.base import TypeTag
from grokex.types.dto import AliasEntry, Placeholder

__all__ = [
    "compile_pattern",
]

_logger = get_logger(__name__)


class _Close:
    """Stack marker closing the group opened for one placeholder."""

    __slots__ = ()


_CLOSE = _Close()


class _Expander:
    """Single-use expansion state for one compile call."""

    def __init__(
        self,
        patterns: Mapping[str, str],
        alias_only: bool,
        config: CompilerConfig,
    ) -> None:
        self._patterns = patterns
        self._alias_only = alias_only
        self._config = config
        self._budget = config.max_recursion
        self._charged: Set[str] = set()
        self._fragments: Dict[str, List[Token]] = {}
        self.aliases: List[AliasEntry] = []

    def expand(self, pattern_text: str) -> str:
        """Return ``pattern_text`` with every placeholder expanded.

        Uses an explicit work stack, so nesting depth is bounded by the
        budget rather than the interpreter's recursion limit.
        """
        out: List[str] = []
        stack: List[Union[Token, _Close]] = list(reversed(tokenize(pattern_text)))
        # Fragment names whose expansion is in progress, outermost first
        active: List[str] = []

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
                continue
            if item is _CLOSE:
                active.pop()
                out.append(")")
                continue

            if item.fragment in active:
                cycle = active[active.index(item.fragment) :] + [item.fragment]
                raise RecursionLimitError(self._config.max_recursion, cycle)

            tokens = self._resolve(item)
            out.append(self._open_group(item))
            active.append(item.fragment)
            stack.append(_CLOSE)
            stack.extend(reversed(tokens))

        return "".join(out)

    def _resolve(self, placeholder: Placeholder) -> List[Token]:
        # Each distinct placeholder text costs one unit of budget, however
        # many times it occurs.
        if placeholder.text not in self._charged:
            if self._budget <= 0:
                raise RecursionLimitError(self._config.max_recursion)
            self._budget -= 1
            self._charged.add(placeholder.text)

        tokens = self._fragments.get(placeholder.fragment)
        if tokens is None:
            try:
                fragment = self._patterns[placeholder.fragment]
            except KeyError:
                raise UnknownPatternError(placeholder.fragment) from None
            tokens = tokenize(fragment)
            self._fragments[placeholder.fragment] = tokens
        return tokens

    def _open_group(self, placeholder: Placeholder) -> str:
        type_tag: Optional[TypeTag] = None
        if placeholder.type_name is not None:
            try:
                type_tag = TypeTag.from_string(placeholder.type_name)
            except ValueError as exc:
                raise PatternCompileError(
                    f"{exc} in placeholder {placeholder.text}"
                ) from None

        if placeholder.alias is None and self._alias_only:
            return "(?:"

        capture_name = self._config.capture_name(len(self.aliases))
        self.aliases.append(AliasEntry(placeholder.field_name, type_tag))
        return f"(?P<{capture_name}>"


def compile_pattern(
    pattern_text: str,
    patterns: Optional[Mapping[str, str]] = None,
    alias_only: bool = False,
    config: Optional[CompilerConfig] = None,
) -> CompiledPattern:
    """Compile grok pattern text into a reusable CompiledPattern.

    Fragment names are looked up in ``patterns`` first, then in the default
    library. ``patterns`` is copied before expansion begins, so later changes
    to it do not affect the result.

    Args:
        pattern_text: Regex text containing ``%{...}`` placeholders.
        patterns: Caller's fragment definitions (name -> regex text).
        alias_only: Report only placeholders that carry an explicit alias.
        config: Compiler settings; defaults to ``COMPILER_CONFIG``.

    Returns:
        The compiled pattern.

    Raises:
        UnknownPatternError: A placeholder names an undefined fragment.
        RecursionLimitError: Fragments reference each other cyclically, or
            expansion exceeded ``config.max_recursion`` distinct placeholders.
        PatternCompileError: A placeholder has an unsupported type, or the
            expanded text is not a valid regex.

    Example:
        >>> pattern = compile_pattern("%{NUMBER:digit:int}", {"NUMBER": r"\\d+"})
        >>> pattern.parse("hello 123")
        {'digit': 123}
    """
    config = config or COMPILER_CONFIG
    lookup = ChainMap(dict(patterns or {}), default_library())

    expander = _Expander(lookup, alias_only, config)
    expanded = expander.expand(pattern_text)

    try:
        regex = re.compile(expanded, config.regex_flags)
    except (re.error, OverflowError, RecursionError) as exc:
        # The re parser recurses once per nested group
        raise PatternCompileError(
            f"Invalid regex after expansion: {exc}", pattern=expanded
        ) from exc

    alias_map = {
        config.capture_name(index): entry
        for index, entry in enumerate(expander.aliases)
    }
    _logger.debug(
        "Compiled %r: %d groups, %d aliased", pattern_text, regex.groups, len(alias_map)
    )
    return CompiledPattern(regex, alias_map)

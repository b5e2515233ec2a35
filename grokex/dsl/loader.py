"""Loaders for pattern definition sources.

Two formats are supported:

* Pattern text: one ``NAME FRAGMENT`` definition per line, split at the first
  space. Blank lines and lines starting with ``#`` are ignored. This is the
  format of the packaged default library.
* YAML: a top-level mapping of ``NAME: fragment``.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable

import yaml

from grokex.errors import PatternSourceError
from grokex.logging import get_logger
from grokex.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = [
    "load_patterns_yaml",
    "parse_pattern_lines",
]

_logger = get_logger(__name__)

_NAME_REGEX = re.compile(r"\w+")


def parse_pattern_lines(lines: Iterable[str], strict: bool = False) -> Dict[str, str]:
    """Parse pattern text lines into a name -> fragment mapping.

    A later definition of the same name replaces an earlier one.

    Args:
        lines: Lines of pattern text; trailing newlines are allowed.
        strict: Raise on malformed lines instead of logging and skipping them.

    Returns:
        Mapping of pattern name to raw fragment text.

    Raises:
        PatternSourceError: In strict mode, if a line has no fragment or an
            invalid pattern name.
    """
    patterns: Dict[str, str] = {}
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        name, _, fragment = line.partition(" ")
        fragment = fragment.strip()

        problem = None
        if not _NAME_REGEX.fullmatch(name):
            problem = f"invalid pattern name '{name}'"
        elif not fragment:
            problem = f"pattern '{name}' has no fragment"

        if problem is not None:
            if strict:
                raise PatternSourceError(problem, line_no)
            _logger.warning("Skipping pattern line %d: %s", line_no, problem)
            continue

        patterns[name] = fragment
    return patterns


def load_patterns_yaml(yaml_str: str) -> Dict[str, str]:
    """Load a YAML mapping of pattern name to fragment.

    Numeric fragments (``YEAR2K: 2000``) are converted to strings. Any other
    non-string value is rejected, since ``true`` or a nested mapping is almost
    certainly a mistake in a pattern file.

    Raises:
        PatternSourceError: If the document is not a mapping, a name is not a
            word, or a value is not a string or number.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PatternSourceError("pattern YAML must map to a dictionary at top-level")

    patterns: Dict[str, str] = {}
    for name, fragment in normalize_yaml_dict_keys(data).items():
        if not _NAME_REGEX.fullmatch(name):
            raise PatternSourceError(f"invalid pattern name '{name}'")
        if isinstance(fragment, bool) or not isinstance(fragment, (str, int, float)):
            raise PatternSourceError(
                f"pattern '{name}' must be a string, got {type(fragment).__name__}"
            )
        patterns[name] = str(fragment)
    return patterns

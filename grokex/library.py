"""Default pattern library.

The library is assembled from the pattern files packaged under
``grokex/patterns`` plus the built-in ``BOOL`` entry. It is built on first
use behind a lock and exposed as a read-only mapping; compilation consults it
only after the caller's registry.
"""

from __future__ import annotations

import threading
from importlib import resources
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from grokex.dsl.loader import parse_pattern_lines
from grokex.logging import get_logger

__all__ = [
    "BUILTIN_PATTERNS",
    "PATTERN_FILES",
    "default_library",
]

_logger = get_logger(__name__)

#: Packaged pattern files, loaded in order; later files may override earlier names.
PATTERN_FILES: Tuple[str, ...] = ("grok-patterns", "linux-syslog", "httpd", "java")

#: Entries not backed by a pattern file.
BUILTIN_PATTERNS: Mapping[str, str] = MappingProxyType({"BOOL": "true|false"})

_LIBRARY: Optional[Mapping[str, str]] = None
_LIBRARY_LOCK = threading.Lock()


def _load_library() -> Mapping[str, str]:
    patterns: Dict[str, str] = {}
    package = resources.files("grokex.patterns")
    for filename in PATTERN_FILES:
        try:
            text = package.joinpath(filename).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise RuntimeError(
                f"Failed to locate packaged pattern file 'grokex/patterns/{filename}'."
            ) from exc
        loaded = parse_pattern_lines(text.splitlines())
        _logger.debug("Loaded %d patterns from %s", len(loaded), filename)
        patterns.update(loaded)

    patterns.update(BUILTIN_PATTERNS)
    _logger.info("Default pattern library ready with %d patterns", len(patterns))
    return MappingProxyType(patterns)


def default_library() -> Mapping[str, str]:
    """Return the process-wide default pattern library.

    The first call loads the packaged pattern files; concurrent first calls
    block until that single load completes. The returned mapping is
    read-only.
    """
    global _LIBRARY

    library = _LIBRARY
    if library is not None:
        return library

    with _LIBRARY_LOCK:
        if _LIBRARY is None:
            _LIBRARY = _load_library()
        return _LIBRARY

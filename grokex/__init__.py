"""grokex: grok pattern compiler and typed field extractor.

Grok patterns are regular expressions with ``%{FRAGMENT:ALIAS:TYPE}``
placeholders that refer to named, reusable regex fragments. grokex expands a
pattern into a single Python regex once and then extracts named, typed fields
from any number of input lines.

Primary API:
    PatternRegistry - Caller-owned fragment definitions with compile()
    compile_pattern() - Compile against a plain mapping and the default library
    CompiledPattern - Immutable compiled pattern with parse()
    default_library() - Read-only packaged fragments (IP, SYSLOGLINE, ...)

Example:
    from grokex import PatternRegistry

    registry = PatternRegistry()
    registry.add_pattern("NUMBER", r"\\d+")

    pattern = registry.compile("%{NUMBER:digit:int}")
    pattern.parse("hello 123")  # {"digit": 123}

    syslog = PatternRegistry().compile("%{SYSLOGLINE}", alias_only=True)
    syslog.parse("Oct 18 19:04:01 web01 sshd[4242]: Accepted publickey")
"""

from __future__ import annotations

from grokex import logging
from grokex._version import __version__
from grokex.compiler import compile_pattern
from grokex.config import COMPILER_CONFIG, CompilerConfig
from grokex.errors import (
    ConversionError,
    GrokError,
    PatternCompileError,
    PatternSourceError,
    RecursionLimitError,
    UnknownPatternError,
)
from grokex.library import default_library
from grokex.pattern import CompiledPattern, coerce_value
from grokex.registry import PatternRegistry
from grokex.types import AliasEntry, Placeholder, TypeTag, Value

__all__ = [
    # Version
    "__version__",
    # Compilation
    "PatternRegistry",
    "compile_pattern",
    "default_library",
    "CompiledPattern",
    "coerce_value",
    # Configuration
    "CompilerConfig",
    "COMPILER_CONFIG",
    # Types
    "AliasEntry",
    "Placeholder",
    "TypeTag",
    "Value",
    # Errors
    "GrokError",
    "UnknownPatternError",
    "RecursionLimitError",
    "PatternCompileError",
    "ConversionError",
    "PatternSourceError",
    # Utilities
    "logging",
]

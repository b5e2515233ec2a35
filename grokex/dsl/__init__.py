"""Grok pattern language: placeholder scanning and definition loading.

Usage:
    from grokex.dsl import tokenize, parse_pattern_lines

    tokens = tokenize("%{IP:client} %{WORD}")
    patterns = parse_pattern_lines(["WORD \\b\\w+\\b", "# comment"])
"""

from .loader import load_patterns_yaml, parse_pattern_lines
from .scanner import PLACEHOLDER_REGEX, Token, find_placeholder, tokenize

__all__ = [
    # Scanner
    "PLACEHOLDER_REGEX",
    "Token",
    "find_placeholder",
    "tokenize",
    # Loaders
    "load_patterns_yaml",
    "parse_pattern_lines",
]

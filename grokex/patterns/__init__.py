"""Packaged grok pattern definitions (``NAME FRAGMENT`` per line)."""

"""Internal helpers for grokex."""

"""Utilities for handling YAML parsing quirks in pattern mapping files."""

from typing import Any, Dict


def normalize_yaml_dict_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    """Normalize dictionary keys from YAML parsing to strings.

    YAML 1.1 turns keys like ``yes``/``no``/``on``/``off`` into booleans and
    bare digits into integers. Pattern names are always strings, so every
    key is converted with ``str()``.

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 2024: "b", "WORD": "c"})
        {"True": "a", "2024": "b", "WORD": "c"}
    """
    return {str(key): value for key, value in data.items()}

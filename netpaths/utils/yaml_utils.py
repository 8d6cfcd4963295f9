"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to consistent string keys.

    YAML 1.1 reads keys such as ``yes``, ``no``, ``on`` and ``off`` as booleans
    and bare numbers as ints. Point names must stay strings, so every key is
    converted with ``str`` (booleans become ``"True"``/``"False"``).

    Args:
        data: Mapping produced by ``yaml.safe_load``.

    Returns:
        The same mapping with string keys.

    Examples:
        >>> normalize_yaml_dict_keys({True: ["B"], 1: ["A"]})
        {'True': ['B'], '1': ['A']}
    """
    return {str(key): value for key, value in data.items()}


def normalize_point_name(value: Any) -> str:
    """Return the string form used for a point name read from YAML."""
    return str(value)

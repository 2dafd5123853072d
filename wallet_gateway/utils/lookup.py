"""Nested lookups over loosely shaped storage snapshots"""

from typing import Any, Mapping, Optional


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """
    Read a dotted path ("accountData.additionalData.bankName") from nested mappings.

    Returns `default` when any segment is missing, is None, or when an
    intermediate value is not a mapping. Never raises.
    """
    current = data
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return default
        current = current.get(segment)
        if current is None:
            return default
    return current


def get_str(data: Any, path: str, default: str = "") -> str:
    """String at path, or default when absent or not a string"""
    value = get_path(data, path, default)
    return value if isinstance(value, str) else default


def get_bool(data: Any, path: str, default: bool = False) -> bool:
    """Boolean at path; anything other than a real bool degrades to default"""
    value = get_path(data, path, default)
    return value if isinstance(value, bool) else default


def get_int(data: Any, path: str, default: Optional[int] = 0) -> Optional[int]:
    """Integer at path; numeric strings are accepted, anything else yields default"""
    value = get_path(data, path, default)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return default
    return default

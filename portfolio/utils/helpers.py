"""
Utility helper functions for safe data handling.
"""
import re
from typing import Any, Optional

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR_RE = re.compile(r"[-_]")
_WORD_START_RE = re.compile(r"\b\w")


def safe_str(value: Any, default: str = "") -> str:
    """
    Safely convert value to string, handling None.

    Args:
        value: Any value to convert
        default: Default string if value is None

    Returns:
        String representation or default
    """
    if value is None:
        return default
    return str(value)


def safe_optional_str(value: Any) -> Optional[str]:
    """
    Convert value to string, mapping None and "" to None.

    Args:
        value: Any value to convert

    Returns:
        String representation or None
    """
    if value is None or value == "":
        return None
    return str(value)


def safe_lower(value: Any) -> str:
    """
    Safely lowercase a value, handling None.

    Args:
        value: Any value to lowercase

    Returns:
        Lowercased string or empty string if None
    """
    if value is None:
        return ""
    return str(value).lower()


def safe_int(value: Any, default: int = 0) -> int:
    """
    Safely convert value to int, handling None and invalid values.

    Args:
        value: Any value to convert
        default: Default int if conversion fails

    Returns:
        Integer or default
    """
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def title_from_filename(filename: str) -> str:
    """
    Derive a display title from a file name.

    "great-blue_heron.JPG" -> "Great Blue Heron"
    Only the first letter of each word is changed; the rest keep their case.
    """
    stem = _EXTENSION_RE.sub("", filename)
    spaced = _SEPARATOR_RE.sub(" ", stem)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)

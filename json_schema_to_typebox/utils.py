"""
Utility functions for the JSON Schema to TypeBox generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize the first letter of each word and join them together."""
    return "".join(word[0].upper() + word[1:] for word in words if word)


def to_type_name(text: str, default: str = "T") -> str:
    """Convert a definition key or title to a PascalCase declaration name.

    Examples:
        "first_name" -> "FirstName"
        "person" -> "Person"
        "PersonSchema" -> "PersonSchema"
        "geo-point" -> "GeoPoint"
        "3d point" -> "T3DPoint"

    Args:
        text: The text to convert
        default: Name to use when nothing usable is left

    Returns:
        A name usable as a TypeScript identifier
    """
    words = _split_into_words(_normalize_separators(text or ""))
    name = _capitalize_and_join(words)
    if not name:
        return default
    if name[0].isdigit():
        return default + name
    return name

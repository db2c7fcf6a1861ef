"""
Helpers shared by the tests.
"""

import re

# A double-quoted string literal, or a run of whitespace outside of one
_TOKEN_PATTERN = re.compile(r'("(?:[^"\\]|\\.)*")|\s+')


def strip_formatting(code: str) -> str:
    """Remove all whitespace that is not inside a string literal."""
    return _TOKEN_PATTERN.sub(lambda m: m.group(1) or "", code)


def assert_equal_ignore_formatting(actual: str, expected: str) -> None:
    """Compare two pieces of code, ignoring incidental whitespace."""
    assert strip_formatting(actual) == strip_formatting(expected), f"\nactual:   {actual}\nexpected: {expected}"

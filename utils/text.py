"""
Ordinal, case-insensitive string helpers.

All comparisons go through str.casefold(), which does not depend on the
current locale.
"""

from typing import Optional


def equals_ignore_case(left: Optional[str], right: Optional[str]) -> bool:
    """True if both strings are set and equal ignoring case."""
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


def startswith_ignore_case(value: Optional[str], prefix: str) -> bool:
    if value is None:
        return False
    return value.casefold().startswith(prefix.casefold())


def endswith_ignore_case(value: Optional[str], suffix: str) -> bool:
    if value is None:
        return False
    return value.casefold().endswith(suffix.casefold())


def contains_ignore_case(value: Optional[str], fragment: str) -> bool:
    if value is None:
        return False
    return fragment.casefold() in value.casefold()

"""Checks for password chain rules.

Every check is a total predicate over ``str``. Letters, digits and symbols
are classified by ASCII only, independent of the current locale.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import (
    DIGITS,
    LOWERCASE_LETTERS,
    SYMBOLS_SET,
    UPPERCASE_LETTERS,
)


def min_length(password: str, length: int) -> bool:
    """Validate minimum password length."""
    return len(password) >= length


def contains_digit(password: str) -> bool:
    """Check if password contains at least one ASCII digit."""
    return any(char in DIGITS for char in password)


def contains_mixed_case(password: str) -> bool:
    """Check if password contains both ASCII lowercase and uppercase letters.

    Scanning stops as soon as both cases have been seen.
    """
    has_lower = False
    has_upper = False

    for char in password:
        if char in LOWERCASE_LETTERS:
            has_lower = True
        elif char in UPPERCASE_LETTERS:
            has_upper = True

        if has_lower and has_upper:
            return True

    return False


def contains_symbol(password: str) -> bool:
    """Check if password contains at least one allowed symbol."""
    return any(char in SYMBOLS_SET for char in password)

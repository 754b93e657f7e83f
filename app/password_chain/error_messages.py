"""Error Messages for password chain rules.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import SYMBOLS


class ErrorMessages:
    """Error messages for password chain rules."""

    SHORTER = "Password must be at least {length} characters long"

    NO_DIGIT = "Password must contain a digit"
    NO_MIXED_CASE = "Password must contain lowercase and uppercase letters"
    NO_SYMBOL = f"Password must contain one of the symbols {SYMBOLS}"

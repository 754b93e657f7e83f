"""Password chain constants file."""

import string
from typing import Literal

SYMBOLS: str = "!@#$%^&*(){}[]?<>"

DIGITS: frozenset[str] = frozenset(string.digits)
LOWERCASE_LETTERS: frozenset[str] = frozenset(string.ascii_lowercase)
UPPERCASE_LETTERS: frozenset[str] = frozenset(string.ascii_uppercase)
SYMBOLS_SET: frozenset[str] = frozenset(SYMBOLS)

DEFAULT_MIN_LENGTH: Literal[8] = 8

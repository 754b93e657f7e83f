"""Password chain enums."""

from enum import StrEnum


class RuleKind(StrEnum):
    """Kinds of password chain rules."""

    LENGTH = "length"
    DIGIT = "digit"
    CASE = "case"
    SYMBOL = "symbol"

"""Password chain module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .enums import RuleKind
from .error_messages import ErrorMessages
from .exceptions import (
    ErrorCodes,
    InnerValidatorMissingError,
    InvalidMinimumLengthError,
    InvalidRuleChainError,
    PasswordChainError,
)
from .rules import Rule, RuleChain
from .validators import (
    CaseValidator,
    DigitValidator,
    LengthValidator,
    PasswordValidator,
    PasswordValidatorDecorator,
    SymbolValidator,
)

__all__ = [
    "CaseValidator",
    "DigitValidator",
    "ErrorCodes",
    "ErrorMessages",
    "InnerValidatorMissingError",
    "InvalidMinimumLengthError",
    "InvalidRuleChainError",
    "LengthValidator",
    "PasswordChainError",
    "PasswordValidator",
    "PasswordValidatorDecorator",
    "Rule",
    "RuleChain",
    "RuleKind",
    "SymbolValidator",
]

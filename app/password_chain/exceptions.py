"""Password chain exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    INNER_VALIDATOR_MISSING_ERROR = 1
    INVALID_MINIMUM_LENGTH_ERROR = 2
    INVALID_RULE_CHAIN_ERROR = 3


class PasswordChainError(Exception):  # noqa N818
    """Base exception class for password chain construction errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR

    def __init_subclass__(cls) -> None:
        """Require every subclass to declare its own error code."""
        super().__init_subclass__()

        if "code" not in cls.__dict__:
            raise AttributeError("code must be set")


class InnerValidatorMissingError(PasswordChainError):
    """Exception raised when a decorator is built without inner validator."""

    code = ErrorCodes.INNER_VALIDATOR_MISSING_ERROR


class InvalidMinimumLengthError(PasswordChainError):
    """Exception raised when a minimum length is not a non-negative int."""

    code = ErrorCodes.INVALID_MINIMUM_LENGTH_ERROR


class InvalidRuleChainError(PasswordChainError):
    """Exception raised when a rule chain can not form a validator."""

    code = ErrorCodes.INVALID_RULE_CHAIN_ERROR

"""Password validators.

Composable validators built by nesting: a ``LengthValidator`` sits at the
core and every decorator adds one rule around its inner validator.

Example:
    >>> validator = SymbolValidator(
    ...     CaseValidator(DigitValidator(LengthValidator(8))),
    ... )
    >>> validator.validate("Abc123!@#")
    True
    >>> validator.validate("Abc123567")
    False

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from loguru import logger as loguru_logger

from . import checks
from .enums import RuleKind
from .exceptions import InnerValidatorMissingError, InvalidMinimumLengthError

log = loguru_logger.bind(name="password_chain")


class PasswordValidator(ABC):
    """Abstract password validator."""

    __slots__ = ()

    @abstractmethod
    def validate(self, password: str) -> bool:
        """Validate password.

        :param str password: Password to validate.
        :return bool: ``True`` if every rule of the chain passes.
        """


class LengthValidator(PasswordValidator):
    """Require a minimum password length."""

    __slots__ = ("_min_length",)

    def __init__(self, min_length: int) -> None:
        """Create length validator.

        :param int min_length: Minimal allowed length, non-negative.
        :raises InvalidMinimumLengthError: on negative or non-int length.
        """
        if (
            not isinstance(min_length, int)
            or isinstance(min_length, bool)
            or min_length < 0
        ):
            raise InvalidMinimumLengthError(
                f"Minimum length must be a non-negative int, got {min_length!r}",  # noqa: E501
            )

        self._min_length = min_length

    @property
    def min_length(self) -> int:
        """Minimal allowed length."""
        return self._min_length

    def validate(self, password: str) -> bool:
        """Validate minimum password length."""
        if checks.min_length(password, self._min_length):
            return True

        log.debug(f"Password rejected by {RuleKind.LENGTH} rule")
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._min_length})"


class PasswordValidatorDecorator(PasswordValidator):
    """Validator wrapping exactly one inner validator.

    The inner validator is evaluated first. When it rejects the password
    the decorator's own rule is not evaluated.
    """

    __slots__ = ("_inner",)

    rule_kind: ClassVar[RuleKind]

    def __init__(self, inner: PasswordValidator) -> None:
        """Wrap inner validator.

        :param PasswordValidator inner: Validator to evaluate first.
        :raises InnerValidatorMissingError: if ``inner`` is not a validator.
        """
        if not isinstance(inner, PasswordValidator):
            raise InnerValidatorMissingError(
                f"{type(self).__name__} requires an inner PasswordValidator, "
                f"got {inner!r}",
            )

        self._inner = inner

    @property
    def inner(self) -> PasswordValidator:
        """Wrapped validator."""
        return self._inner

    @staticmethod
    @abstractmethod
    def check(password: str) -> bool:
        """Rule added by this decorator."""

    def validate(self, password: str) -> bool:
        """Validate password against the inner chain, then own rule."""
        if not self._inner.validate(password):
            return False

        if self.check(password):
            return True

        log.debug(f"Password rejected by {self.rule_kind} rule")
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class DigitValidator(PasswordValidatorDecorator):
    """Require at least one digit."""

    __slots__ = ()

    rule_kind = RuleKind.DIGIT
    check = staticmethod(checks.contains_digit)


class CaseValidator(PasswordValidatorDecorator):
    """Require both lowercase and uppercase letters."""

    __slots__ = ()

    rule_kind = RuleKind.CASE
    check = staticmethod(checks.contains_mixed_case)


class SymbolValidator(PasswordValidatorDecorator):
    """Require at least one symbol from ``constants.SYMBOLS``."""

    __slots__ = ()

    rule_kind = RuleKind.SYMBOL
    check = staticmethod(checks.contains_symbol)

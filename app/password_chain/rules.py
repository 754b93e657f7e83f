"""Password rule chain.

Flat representation of a validator chain: an ordered tuple of tagged rules
evaluated left to right with short-circuit AND.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Self, cast

from loguru import logger as loguru_logger

from . import checks
from .enums import RuleKind
from .error_messages import ErrorMessages
from .exceptions import InvalidMinimumLengthError, InvalidRuleChainError
from .validators import (
    CaseValidator,
    DigitValidator,
    LengthValidator,
    PasswordValidator,
    PasswordValidatorDecorator,
    SymbolValidator,
)

log = loguru_logger.bind(name="password_chain")

_CONTENT_CHECKS: dict[RuleKind, Callable[[str], bool]] = {
    RuleKind.DIGIT: checks.contains_digit,
    RuleKind.CASE: checks.contains_mixed_case,
    RuleKind.SYMBOL: checks.contains_symbol,
}

_DECORATORS: dict[RuleKind, type[PasswordValidatorDecorator]] = {
    RuleKind.DIGIT: DigitValidator,
    RuleKind.CASE: CaseValidator,
    RuleKind.SYMBOL: SymbolValidator,
}

_CONTENT_ERROR_MESSAGES: dict[RuleKind, str] = {
    RuleKind.DIGIT: ErrorMessages.NO_DIGIT,
    RuleKind.CASE: ErrorMessages.NO_MIXED_CASE,
    RuleKind.SYMBOL: ErrorMessages.NO_SYMBOL,
}


@dataclass(frozen=True, slots=True)
class Rule:
    """Single tagged rule of a chain."""

    kind: RuleKind
    min_length: int | None = None

    def __post_init__(self) -> None:
        """Check kind and that only length rules carry a minimum length."""
        try:
            object.__setattr__(self, "kind", RuleKind(self.kind))
        except (TypeError, ValueError) as err:
            raise InvalidRuleChainError(
                f"Unknown rule kind `{self.kind}`",
            ) from err

        if self.kind == RuleKind.LENGTH:
            if self.min_length is None:
                raise InvalidRuleChainError("Length rule requires min_length")
            if (
                not isinstance(self.min_length, int)
                or isinstance(self.min_length, bool)
                or self.min_length < 0
            ):
                raise InvalidMinimumLengthError(
                    f"Minimum length must be a non-negative int, got {self.min_length!r}",  # noqa: E501
                )
        elif self.min_length is not None:
            raise InvalidRuleChainError(
                f"Rule `{self.kind}` does not take min_length",
            )

    @classmethod
    def length(cls, min_length: int) -> "Rule":
        """Create length rule."""
        return cls(RuleKind.LENGTH, min_length)

    @property
    def error_message(self) -> str:
        """Message explaining why a password failed this rule."""
        if self.kind == RuleKind.LENGTH:
            return ErrorMessages.SHORTER.format(length=self.min_length)
        return _CONTENT_ERROR_MESSAGES[self.kind]

    def check(self, password: str) -> bool:
        """Apply rule to password."""
        if self.kind == RuleKind.LENGTH:
            return checks.min_length(password, cast(int, self.min_length))
        return _CONTENT_CHECKS[self.kind](password)


class RuleChain:
    """Immutable builder for password chain rules.

    Every builder method returns a new chain, the receiver is unchanged.

    :Example:
        .. code-block:: python

            chain = RuleChain().min_length(8).digit().mixed_case().symbol()
            assert chain.validate("Abc123!@#")
            assert chain.first_failure("Abc123567") == Rule(RuleKind.SYMBOL)
    """

    __slots__ = ("_rules",)

    _rules: tuple[Rule, ...]

    def __init__(self, rules: tuple[Rule, ...] = ()) -> None:
        """Create chain from rules, evaluated in the given order."""
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise InvalidRuleChainError(
                    f"Rule chain accepts only Rule items, got {rule!r}",
                )

        self._rules = rules

    @classmethod
    def from_rules(cls, *rules: Rule) -> Self:
        """Create chain from rules."""
        return cls(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleChain):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rules!r})"

    def __append(self, rule: Rule) -> Self:
        return type(self)((*self._rules, rule))

    def min_length(self, length: int) -> Self:
        """Require minimum password length.

        :param int length: Minimal allowed length.
        :return RuleChain: Extended chain.
        """
        return self.__append(Rule.length(length))

    def digit(self) -> Self:
        """Require at least one digit.

        :return RuleChain: Extended chain.
        """
        return self.__append(Rule(RuleKind.DIGIT))

    def mixed_case(self) -> Self:
        """Require lowercase and uppercase letters.

        :return RuleChain: Extended chain.
        """
        return self.__append(Rule(RuleKind.CASE))

    def symbol(self) -> Self:
        """Require at least one symbol.

        :return RuleChain: Extended chain.
        """
        return self.__append(Rule(RuleKind.SYMBOL))

    def first_failure(self, password: str) -> Rule | None:
        """Find the first rule the password fails.

        :param str password: Password to validate.
        :return Rule | None: Failed rule or ``None`` if every rule passes.
        """
        for rule in self._rules:
            if not rule.check(password):
                log.debug(f"Password rejected by {rule.kind} rule")
                return rule
        return None

    def validate(self, password: str) -> bool:
        """Validate password, stopping at the first failed rule.

        :param str password: Password to validate.
        :return bool: ``True`` if every rule passes.
        """
        return self.first_failure(password) is None

    def to_validator(self) -> PasswordValidator:
        """Build the equivalent nested validator.

        Length rules collapse into one ``LengthValidator`` holding the
        largest minimum, content rules wrap it in chain order.

        :raises InvalidRuleChainError: if the chain has no length rule.
        :return PasswordValidator: Outermost validator of the chain.
        """
        lengths = [
            cast(int, rule.min_length)
            for rule in self._rules
            if rule.kind == RuleKind.LENGTH
        ]
        if not lengths:
            raise InvalidRuleChainError(
                "Rule chain must contain at least one length rule",
            )

        validator: PasswordValidator = LengthValidator(max(lengths))
        for rule in self._rules:
            if rule.kind != RuleKind.LENGTH:
                validator = _DECORATORS[rule.kind](validator)

        return validator

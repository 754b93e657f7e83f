"""Built-in password chain scenarios.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Callable

from loguru import logger as loguru_logger

from .validators import (
    CaseValidator,
    DigitValidator,
    LengthValidator,
    PasswordValidator,
    SymbolValidator,
)

log = loguru_logger.bind(name="password_chain")


@dataclass(frozen=True)
class Scenario:
    """Validator factory with passwords it must accept and reject."""

    name: str
    factory: Callable[[], PasswordValidator]
    accepted: tuple[str, ...]
    rejected: tuple[str, ...]


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        name="length",
        factory=lambda: LengthValidator(8),
        accepted=("abc123!@#",),
        rejected=("abc123", ""),
    ),
    Scenario(
        name="digit",
        factory=lambda: DigitValidator(LengthValidator(8)),
        accepted=("abc123!@#",),
        rejected=("abcde!@#", ""),
    ),
    Scenario(
        name="case",
        factory=lambda: CaseValidator(DigitValidator(LengthValidator(8))),
        accepted=("Abc123!@#",),
        rejected=("abc123!@#", ""),
    ),
    Scenario(
        name="symbol",
        factory=lambda: SymbolValidator(
            CaseValidator(DigitValidator(LengthValidator(8))),
        ),
        accepted=("Abc123!@#",),
        rejected=("Abc123567", ""),
    ),
)


def run_scenario(scenario: Scenario) -> list[str]:
    """Run one scenario and describe every mismatch."""
    validator = scenario.factory()
    failures = [
        f"{scenario.name}: expected {password!r} to pass"
        for password in scenario.accepted
        if not validator.validate(password)
    ]
    failures.extend(
        f"{scenario.name}: expected {password!r} to fail"
        for password in scenario.rejected
        if validator.validate(password)
    )
    return failures


def run_self_test(scenarios: tuple[Scenario, ...] = SCENARIOS) -> bool:
    """Run scenarios, log mismatches and report overall success."""
    failures = []
    for scenario in scenarios:
        failures.extend(run_scenario(scenario))

    for failure in failures:
        log.error(failure)

    if failures:
        return False

    log.info(f"All {len(scenarios)} scenarios passed")
    return True

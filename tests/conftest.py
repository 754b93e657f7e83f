"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

import pytest
from dishka import Container, make_container
from loguru import logger

from config import Settings
from ioc import MainProvider
from password_chain import PasswordValidator, RuleChain


@pytest.fixture
def settings() -> Settings:
    """Get default settings."""
    return Settings()


@pytest.fixture
def container(settings: Settings) -> Iterator[Container]:
    """Get DI container and close it after completion."""
    container = make_container(MainProvider(), context={Settings: settings})
    yield container
    container.close()


@pytest.fixture
def rule_chain(container: Container) -> RuleChain:
    """Get configured rule chain."""
    return container.get(RuleChain)


@pytest.fixture
def password_validator(container: Container) -> PasswordValidator:
    """Get configured nested validator."""
    return container.get(PasswordValidator)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)

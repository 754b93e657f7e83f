"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os

from pydantic import BaseModel, Field

from password_chain import RuleChain
from password_chain.constants import DEFAULT_MIN_LENGTH


class Settings(BaseModel):
    """Settings of the configured password chain."""

    DEBUG: bool = False

    PASSWORD_MIN_LENGTH: int = Field(DEFAULT_MIN_LENGTH, ge=0)
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_MIXED_CASE: bool = True
    PASSWORD_REQUIRE_SYMBOL: bool = True

    def build_rule_chain(self) -> RuleChain:
        """Build rule chain: length first, then enabled content rules."""
        chain = RuleChain().min_length(self.PASSWORD_MIN_LENGTH)

        if self.PASSWORD_REQUIRE_DIGIT:
            chain = chain.digit()
        if self.PASSWORD_REQUIRE_MIXED_CASE:
            chain = chain.mixed_case()
        if self.PASSWORD_REQUIRE_SYMBOL:
            chain = chain.symbol()

        return chain

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)

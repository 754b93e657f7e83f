"""DI Provider password chain module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import Provider, Scope, from_context, provide

from config import Settings
from password_chain import PasswordValidator, RuleChain


class MainProvider(Provider):
    """Provider for the configured password chain."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide
    def get_rule_chain(self, settings: Settings) -> RuleChain:
        """Get rule chain described by settings."""
        return settings.build_rule_chain()

    @provide
    def get_password_validator(
        self,
        rule_chain: RuleChain,
    ) -> PasswordValidator:
        """Get nested validator equivalent to the rule chain."""
        return rule_chain.to_validator()

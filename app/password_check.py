"""Password chain entrypoint.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from typing import Sequence

from dishka import make_container
from loguru import logger

from config import Settings
from ioc import MainProvider
from password_chain import RuleChain
from password_chain.self_test import run_self_test


def setup_logging(settings: Settings) -> None:
    """Route loguru output to stderr with level from settings."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")


def check_password(settings: Settings, password: str) -> bool:
    """Validate password against the configured chain and report result."""
    container = make_container(MainProvider(), context={Settings: settings})
    try:
        rule_chain = container.get(RuleChain)
    finally:
        container.close()

    failed_rule = rule_chain.first_failure(password)
    if failed_rule is None:
        print("Password accepted")
        return True

    print(failed_rule.error_message)
    return False


def create_parser() -> argparse.ArgumentParser:
    """Create command line parser."""
    parser = argparse.ArgumentParser(
        description="Run password chain self-test or check a password",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--self-test",
        action="store_true",
        help="Run built-in scenarios",
    )
    group.add_argument(
        "--check",
        metavar="PASSWORD",
        help="Check password against configured rules",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run entrypoint and return exit status."""
    args = create_parser().parse_args(argv)
    settings = Settings.from_os()
    setup_logging(settings)

    if args.self_test:
        ok = run_self_test()
    else:
        ok = check_password(settings, args.check)

    return 0 if ok else 1

"""Datasets for password chain tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

PASSWORDS: list[str] = [
    "",
    "a",
    "abc123",
    "abcde!@#",
    "abc123!@#",
    "Abc123!@#",
    "Abc123567",
    "ABCDEFGH",
    "abcdefgh",
    "AbCdEfGh",
    "12345678",
    "!@#$%^&*",
    "{}[]?<>()",
    "Pa55word",
    "Pa55word!",
    "Pa55 word~",
    "ÄÖÜäöü12!",
    "Ünïcödé1!",
    "пароль123A!",
    "٣٤٥٦٧٨٩٠abC!",
    "        ",
    "Aa1!",
]

MIN_LENGTHS: list[int] = [0, 1, 4, 8, 9, 12]

"""
Identifier casing helpers
"""

import re
from typing import List

# FooBar -> Foo_Bar
_CAPITALIZED_WORD = re.compile(r"(.)([A-Z][a-z]+)")
# fooBarXYZ -> foo_Bar_XYZ
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
# mint2 -> mint_2, ERC20 -> ERC_20
_LETTER_DIGIT = re.compile(r"([A-Za-z])([0-9])")
# 20abc -> 20_abc
_DIGIT_LOWER = re.compile(r"([0-9])([a-z])")
_SEPARATORS = re.compile(r"[_\-\s]+")


def split_words(name: str) -> List[str]:
    """Split a camelCase, PascalCase or snake_case identifier into words"""
    s1 = _CAPITALIZED_WORD.sub(r"\1_\2", name)
    s2 = _LOWER_UPPER.sub(r"\1_\2", s1)
    s3 = _LETTER_DIGIT.sub(r"\1_\2", s2)
    s4 = _DIGIT_LOWER.sub(r"\1_\2", s3)
    return [word for word in _SEPARATORS.split(s4) if word]


def snake(name: str) -> str:
    """transferFrom -> transfer_from"""
    return "_".join(word.lower() for word in split_words(name))


def upper_snake(name: str) -> str:
    """transferFrom -> TRANSFER_FROM"""
    return "_".join(word.upper() for word in split_words(name))


def capitalize(name: str) -> str:
    """Uppercase the first character only: erc20 -> Erc20, eRC20 -> ERC20"""
    if not name:
        raise ValueError("cannot capitalize an empty identifier")
    return name[0].upper() + name[1:]

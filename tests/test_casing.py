"""
Tests for identifier casing
"""

import pytest

from sumi.utils.casing import capitalize, snake, split_words, upper_snake


def test_snake():
    cases = [
        ("transferFrom", "transfer_from"),
        ("transfer", "transfer"),
        ("safeTransferFrom2", "safe_transfer_from_2"),
        ("getHTTPResponse", "get_http_response"),
        ("ERC20Transfer", "erc_20_transfer"),
        ("mint2", "mint_2"),
        ("erc20", "erc_20"),
        ("already_snake", "already_snake"),
        ("_mint", "mint"),
    ]

    for name, expected in cases:
        assert snake(name) == expected, f"Failed for {name}: got {snake(name)}"


def test_upper_snake():
    assert upper_snake("transferFrom") == "TRANSFER_FROM"
    assert upper_snake("approve") == "APPROVE"
    assert upper_snake("increaseAllowance") == "INCREASE_ALLOWANCE"


def test_capitalize_only_touches_first_character():
    assert capitalize("erc20") == "Erc20"
    assert capitalize("eRC20") == "ERC20"
    assert capitalize("Token") == "Token"
    assert capitalize("myToken") == "MyToken"


def test_capitalize_empty():
    with pytest.raises(ValueError):
        capitalize("")


def test_split_words():
    assert split_words("transferFromAll") == ["transfer", "From", "All"]
    assert split_words("a-b c") == ["a", "b", "c"]


def test_digit_boundaries():
    """Letters and digits are separate words"""
    assert split_words("ERC20Transfer") == ["ERC", "20", "Transfer"]
    assert split_words("v2Swap") == ["v", "2", "Swap"]
    assert upper_snake("mint2") == "MINT_2"

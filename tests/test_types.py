"""
Tests for ABI type parsing and ink! type translation
"""

import pytest

from sumi.abi.types import parse_abi_type
from sumi.core.errors import UnsupportedAbiType
from sumi.core.models import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Tuple,
    UnsignedInt,
)
from sumi.translators.types import convert_type, map_type


def test_basic_types():
    """Leaf variants map to their ink! types"""
    assert map_type(Bool()) == "bool"
    assert map_type(Address()) == "H160"
    assert map_type(UnsignedInt(256)) == "U256"
    assert map_type(FixedBytes(32)) == "[u8; 32]"
    assert map_type(Bytes()) == "Vec<u8>"


def test_every_uint_width_is_u256():
    for bits in (8, 16, 64, 128, 256):
        assert map_type(UnsignedInt(bits)) == "U256"


def test_nested_composites():
    """Nesting composes without flattening"""
    assert map_type(FixedArray(Array(Bool()), 3)) == "[Vec<bool>; 3]"
    assert map_type(Array(FixedArray(Address(), 2))) == "Vec<[H160; 2]>"
    assert map_type(Tuple((Address(), UnsignedInt(256)))) == "(H160, U256)"
    assert map_type(Array(Tuple((Bool(), FixedBytes(4))))) == "Vec<(bool, [u8; 4])>"


def test_single_element_tuple():
    """A 1-tuple needs a trailing comma in Rust"""
    assert map_type(Tuple((Address(),))) == "(H160,)"
    assert map_type(Array(Tuple((Bool(),)))) == "Vec<(bool,)>"
    assert convert_type("(address)") == "(H160,)"


def test_parse_basic_types():
    assert parse_abi_type("bool") == Bool()
    assert parse_abi_type("address") == Address()
    assert parse_abi_type("uint8") == UnsignedInt(8)
    assert parse_abi_type("bytes32") == FixedBytes(32)
    assert parse_abi_type("bytes") == Bytes()


def test_parse_arrays():
    """The last dimension is the outermost one"""
    assert parse_abi_type("address[]") == Array(Address())
    assert parse_abi_type("uint256[4]") == FixedArray(UnsignedInt(256), 4)
    assert parse_abi_type("uint256[2][]") == Array(FixedArray(UnsignedInt(256), 2))
    assert parse_abi_type("bool[][3]") == FixedArray(Array(Bool()), 3)


def test_parse_tuples():
    assert parse_abi_type("(address,uint256)") == Tuple((Address(), UnsignedInt(256)))
    assert parse_abi_type("(address,(bool,bytes))[]") == Array(
        Tuple((Address(), Tuple((Bool(), Bytes()))))
    )


def test_abi_text_is_canonical():
    """Parsed types spell back to the same ABI text"""
    for text in ["uint256", "bytes32[4]", "address[][2]", "(address,uint256)[]", "(bool,(bytes,uint8))"]:
        assert parse_abi_type(text).abi_text == text


def test_convert_type():
    assert convert_type("uint256") == "U256"
    assert convert_type("address[]") == "Vec<H160>"
    assert convert_type("bool[][3]") == "[Vec<bool>; 3]"
    assert convert_type("(address,uint256)") == "(H160, U256)"


def test_unsupported_types():
    """Types outside the supported subset are fatal"""
    for text in ["string", "int256", "string[]", "(address,int8)", "function"]:
        with pytest.raises(UnsupportedAbiType) as exc_info:
            parse_abi_type(text)
        assert exc_info.value.abi_type in (text, "string", "int256", "int8", "function")


def test_unsupported_type_is_named():
    with pytest.raises(UnsupportedAbiType, match="string"):
        convert_type("string")


def test_malformed_types():
    """Grammar and width errors are reported as unsupported types"""
    for text in ["uint7", "bytes33", "uint", "(address", "address["]:
        with pytest.raises(UnsupportedAbiType):
            parse_abi_type(text)

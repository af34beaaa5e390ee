"""
ABI type signature parsing into ParameterType variants
"""

from eth_abi.exceptions import ABITypeError, ParseError
from eth_abi.grammar import BasicType, TupleType, parse

from ..core.errors import UnsupportedAbiType
from ..core.models import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    ParameterType,
    Tuple,
    UnsignedInt,
)


def parse_abi_type(type_text: str) -> ParameterType:
    """
    Parse an ABI type signature such as `uint256`, `address[]`,
    `bytes32[4]` or `(address,uint256)[]`.

    Raises:
        UnsupportedAbiType: If the text is not valid ABI grammar, or names a
            type outside the supported subset (string, int<N>, function...)
    """
    try:
        abi_type = parse(type_text)
        abi_type.validate()
    except (ParseError, ABITypeError) as e:
        raise UnsupportedAbiType(type_text, reason=str(e)) from e

    return _from_grammar(abi_type)


def _from_grammar(abi_type) -> ParameterType:
    if abi_type.is_array:
        # The last dimension is the outermost one: `uint256[2][]` is a
        # dynamic array of `uint256[2]`
        dimension = abi_type.arrlist[-1]
        inner = _from_grammar(abi_type.item_type)
        if dimension:
            return FixedArray(inner, dimension[0])
        return Array(inner)

    if isinstance(abi_type, TupleType):
        return Tuple(tuple(_from_grammar(c) for c in abi_type.components))

    if isinstance(abi_type, BasicType):
        base, sub = abi_type.base, abi_type.sub
        if base == "bool":
            return Bool()
        if base == "address":
            return Address()
        if base == "uint":
            return UnsignedInt(sub)
        if base == "bytes":
            return Bytes() if sub is None else FixedBytes(sub)

    raise UnsupportedAbiType(abi_type.to_type_str())

"""
ABI parameter type translation to ink! type expressions
"""

from ..abi.types import parse_abi_type
from ..core.config import (
    ABI_TYPE_TO_INK,
    ARRAY_TO_INK,
    FIXED_ARRAY_TO_INK,
    FIXED_BYTES_TO_INK,
    TUPLE_TO_INK,
)
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


class TypeTranslator:
    """Translates ABI parameter types to ink! type syntax"""

    def visit(self, node: ParameterType) -> str:
        method = getattr(self, f"visit_{type(node).__name__}", None)
        if method is None:
            raise UnsupportedAbiType(getattr(node, "abi_text", repr(node)))
        return method(node)

    def visit_Bool(self, node: Bool) -> str:
        return ABI_TYPE_TO_INK["bool"]

    def visit_Address(self, node: Address) -> str:
        return ABI_TYPE_TO_INK["address"]

    def visit_UnsignedInt(self, node: UnsignedInt) -> str:
        # TODO: map uint8..uint128 to u8..u128 once the Tokenize trait covers them
        return ABI_TYPE_TO_INK["uint"]

    def visit_FixedBytes(self, node: FixedBytes) -> str:
        return FIXED_BYTES_TO_INK.format(size=node.size)

    def visit_Bytes(self, node: Bytes) -> str:
        return ABI_TYPE_TO_INK["bytes"]

    def visit_Array(self, node: Array) -> str:
        return ARRAY_TO_INK.format(inner=self.visit(node.inner))

    def visit_FixedArray(self, node: FixedArray) -> str:
        return FIXED_ARRAY_TO_INK.format(inner=self.visit(node.inner), size=node.size)

    def visit_Tuple(self, node: Tuple) -> str:
        items = ", ".join(self.visit(item) for item in node.items)
        if len(node.items) == 1:
            # `(T)` is a parenthesized type in Rust, `(T,)` a 1-tuple
            items += ","
        return TUPLE_TO_INK.format(items=items)


def map_type(abi_type: ParameterType) -> str:
    """Map a parsed ABI type to its ink! type expression"""
    return TypeTranslator().visit(abi_type)


def convert_type(type_text: str) -> str:
    """Parse a raw ABI type token and map it to its ink! type expression"""
    return map_type(parse_abi_type(type_text))

"""
Data models for ABI types, function descriptions and generated modules
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ParameterType:
    """Base of the supported ABI parameter type variants"""

    @property
    def abi_text(self) -> str:
        """Canonical ABI spelling of the type"""
        raise NotImplementedError(type(self).__name__)


@dataclass(frozen=True)
class Bool(ParameterType):
    @property
    def abi_text(self) -> str:
        return "bool"


@dataclass(frozen=True)
class Address(ParameterType):
    @property
    def abi_text(self) -> str:
        return "address"


@dataclass(frozen=True)
class UnsignedInt(ParameterType):
    bits: int = 256

    @property
    def abi_text(self) -> str:
        return f"uint{self.bits}"


@dataclass(frozen=True)
class FixedBytes(ParameterType):
    size: int

    @property
    def abi_text(self) -> str:
        return f"bytes{self.size}"


@dataclass(frozen=True)
class Bytes(ParameterType):
    @property
    def abi_text(self) -> str:
        return "bytes"


@dataclass(frozen=True)
class Array(ParameterType):
    """Dynamically sized array, `T[]`"""
    inner: ParameterType

    @property
    def abi_text(self) -> str:
        return f"{self.inner.abi_text}[]"


@dataclass(frozen=True)
class FixedArray(ParameterType):
    """Fixed size array, `T[n]`"""
    inner: ParameterType
    size: int

    @property
    def abi_text(self) -> str:
        return f"{self.inner.abi_text}[{self.size}]"


@dataclass(frozen=True)
class Tuple(ParameterType):
    """Positional product type, `(T1,T2,...)`"""
    items: tuple

    @property
    def abi_text(self) -> str:
        return "(" + ",".join(item.abi_text for item in self.items) + ")"


@dataclass(frozen=True)
class InputParameter:
    """One typed input of a wrapped function"""
    name: str
    abi_type: ParameterType
    abi_type_text: str  # canonical ABI spelling, used for the signature
    target_type: str    # ink! type expression


@dataclass(frozen=True)
class FunctionDescription:
    """Everything the renderer needs to know about one wrapped function"""
    name: str
    identifier: str
    inputs: List[InputParameter]
    output: str
    signature: str
    selector: bytes

    @property
    def selector_hex(self) -> str:
        return self.selector.hex()


@dataclass(frozen=True)
class ModuleDescription:
    """Top-level generation request"""
    name: str
    evm_id: str
    functions: List[FunctionDescription]

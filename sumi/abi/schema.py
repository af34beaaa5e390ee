"""Pydantic models for raw ABI documents.

The interface description is validated against these models before any
filtering happens, so the rest of the pipeline never touches untyped JSON.
Fields irrelevant to wrapper generation (``internalType``, ``indexed``,
``anonymous``...) are ignored.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..core.errors import MalformedDescription

TUPLE_TYPE = "tuple"


class AbiParameter(BaseModel):
    """A single input or output of an ABI entry.

    Attributes:
        name: Parameter name, may be empty for unnamed parameters.
        type: ABI type text, e.g. "uint256", "address[]" or "tuple[2]".
        components: Member parameters when ``type`` is a tuple.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    type: str
    components: Optional[List[AbiParameter]] = None

    def canonical_type(self) -> str:
        """Returns the type text with ``tuple`` expanded from its components.

        ``{"type": "tuple[]", "components": [address, uint256]}`` becomes
        ``"(address,uint256)[]"``.
        """
        if self.type.startswith(TUPLE_TYPE) and self.components is not None:
            members = ",".join(c.canonical_type() for c in self.components)
            return f"({members}){self.type[len(TUPLE_TYPE):]}"
        return self.type


class AbiEntry(BaseModel):
    """One entry of an ABI document (function, event, constructor...).

    Attributes:
        type: Entry kind; only "function" entries are ever wrapped.
        name: Entry name; empty for constructors and fallbacks.
        inputs: Declared inputs, in order.
        outputs: Declared outputs, in order.
        stateMutability: "pure", "view", "nonpayable" or "payable".
        constant: Pre-0.4.16 flag, superseded by stateMutability.
        payable: Pre-0.4.16 flag, superseded by stateMutability.
    """
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    name: str = ""
    inputs: List[AbiParameter] = []
    outputs: List[AbiParameter] = []
    stateMutability: Optional[str] = None
    constant: Optional[bool] = None
    payable: Optional[bool] = None

    @property
    def mutability(self) -> str:
        """State mutability, derived from the legacy flags when absent."""
        if self.stateMutability is not None:
            return self.stateMutability
        if self.constant:
            return "view"
        if self.payable:
            return "payable"
        return "nonpayable"


_ENTRIES = TypeAdapter(List[AbiEntry])


def load_document(text: str) -> Any:
    """Parses the interface description JSON.

    Compiler artifacts (Hardhat, Foundry) carry the ABI under an "abi" key;
    for those the ABI itself is returned.

    Raises:
        MalformedDescription: If the text is not valid JSON.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDescription(f"invalid JSON: {e}") from e

    if isinstance(document, dict) and "abi" in document:
        return document["abi"]
    return document


def validate_entries(document: Any) -> List[AbiEntry]:
    """Validates a parsed document as a list of ABI entries.

    Raises:
        MalformedDescription: If the document does not have the ABI shape.
    """
    try:
        return _ENTRIES.validate_python(document)
    except ValidationError as e:
        raise MalformedDescription(f"not an ABI document: {e}") from e

"""
EVM ABI handling

This package turns raw ABI documents into typed values:
- Schema validation of ABI JSON entries
- ABI type signature parsing
- Canonical signatures and 4-byte call selectors
"""

from sumi.abi.schema import AbiEntry, AbiParameter, load_document, validate_entries
from sumi.abi.selector import canonical_signature, compute_selector
from sumi.abi.types import parse_abi_type

__all__ = [
    'AbiEntry',
    'AbiParameter',
    'load_document',
    'validate_entries',
    'canonical_signature',
    'compute_selector',
    'parse_abi_type',
]

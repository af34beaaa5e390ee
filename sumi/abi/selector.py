"""
Canonical function signatures and 4-byte call selectors
"""

from typing import Sequence, Tuple

from eth_utils import keccak

from ..core.config import SELECTOR_SIZE


def canonical_signature(name: str, abi_type_texts: Sequence[str]) -> str:
    """`name(type1,type2,...)`, without whitespace"""
    return f"{name}({','.join(abi_type_texts)})"


def compute_selector(name: str, abi_type_texts: Sequence[str]) -> Tuple[str, bytes]:
    """
    Compute the EVM call selector of a function.

    The selector is the first four bytes of the Keccak-256 digest of the
    canonical signature (Keccak-256 as used by the EVM, not SHA3-256).

    Args:
        name: Function name
        abi_type_texts: Canonical ABI spelling of each input, in order

    Returns:
        (signature, selector_bytes)
    """
    signature = canonical_signature(name, abi_type_texts)
    return signature, keccak(text=signature)[:SELECTOR_SIZE]

"""
Main generation pipeline
"""

from typing import Dict

from .config import DEFAULT_EVM_ID
from .models import ModuleDescription
from ..generators.ink import render_module
from ..parser import InterfaceParser


def describe_module(abi_source: str, module_name: str, evm_id: str = DEFAULT_EVM_ID) -> ModuleDescription:
    """Parse the ABI text and collect everything the renderer needs"""
    functions = InterfaceParser().parse_text(abi_source)
    return ModuleDescription(name=module_name, evm_id=evm_id, functions=functions)


def generate(abi_source: str,
             module_name: str,
             evm_id: str = DEFAULT_EVM_ID) -> Dict:
    """
    Generate an ink! module forwarding calls to an EVM contract over XVM.

    Args:
        abi_source: ABI JSON text (bare array or compiler artifact)
        module_name: Name of the generated ink! module
        evm_id: EVM ID literal emitted verbatim in the module

    Returns:
        Dict with:
            - source: Generated ink! source
            - module: The ModuleDescription that was rendered
            - functions: List of FunctionDescription objects

    Raises:
        MalformedDescription: If the ABI is not valid JSON or not an ABI
        UnsupportedAbiType: If an input type cannot be wrapped
        TemplateRenderError: If the module template cannot be rendered
    """
    module = describe_module(abi_source, module_name, evm_id)
    source = render_module(module)

    return {
        "source": source,
        "module": module,
        "functions": module.functions
    }

"""
Sumi: ink! wrapper generator for EVM contracts called over XVM
"""

from .core.errors import (
    InputUnreadable,
    MalformedDescription,
    OutputUnwritable,
    SumiError,
    TemplateRenderError,
    UnsupportedAbiType,
)
from .core.generator import describe_module, generate
from .core.models import FunctionDescription, InputParameter, ModuleDescription

__version__ = "0.1.0"
__all__ = [
    "generate",
    "describe_module",
    "FunctionDescription",
    "InputParameter",
    "ModuleDescription",
    "SumiError",
    "InputUnreadable",
    "OutputUnwritable",
    "MalformedDescription",
    "UnsupportedAbiType",
    "TemplateRenderError",
]

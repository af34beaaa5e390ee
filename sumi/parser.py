"""
Parser to select the ABI functions a wrapper module forwards calls to.
"""

from typing import Any, List, Sequence, Set

from .abi.schema import AbiEntry, AbiParameter, load_document, validate_entries
from .abi.selector import compute_selector
from .abi.types import parse_abi_type
from .core.config import (
    ENCODE_HELPER_SUFFIX,
    FUNCTION_ENTRY_TYPE,
    READ_ONLY_MUTABILITY,
    RUST_KEYWORDS,
    RUST_RESERVED_IDENTIFIERS,
    TEMPLATE_LOCALS,
    TEMPLATE_METHODS,
    UNNAMED_INPUT_PREFIX,
    WRAPPED_OUTPUT_TYPE,
)
from .core.errors import UnsupportedAbiType
from .core.models import FunctionDescription, InputParameter
from .translators.types import TypeTranslator
from .utils.casing import snake


class InterfaceParser:
    """Parse ABI documents into wrappable function descriptions"""

    def __init__(self):
        self.translator = TypeTranslator()

    def parse_text(self, text: str) -> List[FunctionDescription]:
        """Parse ABI JSON text into eligible function descriptions"""
        return self.select_functions(load_document(text))

    def select_functions(self, raw_entries: Sequence[Any]) -> List[FunctionDescription]:
        """
        Select and describe the functions to wrap.

        An entry is wrapped when it is a function, is not `view`, and every
        declared output is `bool`. Declaration order is preserved.

        Args:
            raw_entries: Parsed ABI JSON, one object per entry

        Returns:
            List of FunctionDescription

        Raises:
            MalformedDescription: If an entry does not have the ABI shape
            UnsupportedAbiType: If an input type is malformed or unsupported
        """
        entries = validate_entries(raw_entries)

        functions = []
        # Generated fn names, snake-cased, plus the items the template defines
        used_identifiers: Set[str] = set(TEMPLATE_METHODS)

        for entry in entries:
            if not self.is_eligible(entry):
                continue

            identifier = self._unique_identifier(entry.name, used_identifiers)
            used_identifiers.add(snake(identifier))
            used_identifiers.add(snake(identifier) + ENCODE_HELPER_SUFFIX)
            functions.append(self._describe_function(entry, identifier))

        return functions

    @staticmethod
    def is_eligible(entry: AbiEntry) -> bool:
        """State-changing functions whose outputs are all `bool`"""
        if entry.type != FUNCTION_ENTRY_TYPE:
            return False
        if entry.mutability == READ_ONLY_MUTABILITY:
            return False
        return all(output.type == WRAPPED_OUTPUT_TYPE for output in entry.outputs)

    @staticmethod
    def _is_free(identifier: str, used: Set[str]) -> bool:
        name = snake(identifier)
        if not name or name in RUST_KEYWORDS or name in RUST_RESERVED_IDENTIFIERS:
            return False
        return name not in used and name + ENCODE_HELPER_SUFFIX not in used

    @classmethod
    def _unique_identifier(cls, name: str, used: Set[str]) -> str:
        # Overloads, keywords and names that only differ before snake-casing
        # (`_mint` and `mint`) need distinct Rust identifiers
        candidate = name
        suffix = 2
        while not cls._is_free(candidate, used):
            candidate = f"{name}{suffix}"
            suffix += 1
        return candidate

    def _describe_function(self, entry: AbiEntry, identifier: str) -> FunctionDescription:
        inputs = [
            self._describe_input(entry.name, index, param)
            for index, param in enumerate(entry.inputs)
        ]

        signature, selector = compute_selector(
            entry.name,
            [param.abi_type_text for param in inputs]
        )

        return FunctionDescription(
            name=entry.name,
            identifier=identifier,
            inputs=inputs,
            output=WRAPPED_OUTPUT_TYPE,
            signature=signature,
            selector=selector
        )

    @staticmethod
    def _input_identifier(name: str, index: int) -> str:
        if not name:
            return f"{UNNAMED_INPUT_PREFIX}{index}"
        if name in RUST_RESERVED_IDENTIFIERS or name in TEMPLATE_LOCALS:
            return f"{name}_"
        if name in RUST_KEYWORDS:
            return f"r#{name}"
        return name

    def _describe_input(self, function_name: str, index: int, param: AbiParameter) -> InputParameter:
        name = self._input_identifier(param.name, index)
        type_text = param.canonical_type()

        try:
            abi_type = parse_abi_type(type_text)
            target_type = self.translator.visit(abi_type)
        except UnsupportedAbiType as e:
            raise UnsupportedAbiType(
                e.abi_type,
                function=function_name,
                parameter=name,
                reason=e.reason
            ) from e

        return InputParameter(
            name=name,
            abi_type=abi_type,
            abi_type_text=abi_type.abi_text,
            target_type=target_type
        )

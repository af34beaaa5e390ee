"""
Exceptions raised while generating a wrapper module.

Every error is terminal for a generation run: nothing is retried and no
output is written once one of them has been raised.
"""

from typing import Optional


class SumiError(Exception):
    """
    Base class for all Sumi errors.
    """
    pass


class InputUnreadable(SumiError):
    """
    Raised when the interface description cannot be opened or read.
    """
    pass


class OutputUnwritable(SumiError):
    """
    Raised when the generated module cannot be written to its destination.
    """
    pass


class MalformedDescription(SumiError):
    """
    Raised when the interface description is not valid JSON or does not
    have the shape of an ABI document.
    """
    pass


class UnsupportedAbiType(SumiError):
    """
    Raised for ABI types that are malformed or outside the supported subset.

    Attributes:
        abi_type: The offending ABI type text.
        function: Name of the function declaring it, when known.
        parameter: Name of the input declaring it, when known.
        reason: Optional detail, e.g. the grammar error.
    """

    def __init__(self,
                 abi_type: str,
                 function: Optional[str] = None,
                 parameter: Optional[str] = None,
                 reason: Optional[str] = None):
        self.abi_type = abi_type
        self.function = function
        self.parameter = parameter
        self.reason = reason

        message = f"unsupported ABI type '{abi_type}'"
        if function is not None:
            message += f" in function '{function}'"
        if parameter is not None:
            message += f", input '{parameter}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class TemplateRenderError(SumiError):
    """
    Raised when a formatter is applied to a value of the wrong shape, or the
    module template cannot be rendered.
    """
    pass

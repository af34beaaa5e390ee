"""
ink! wrapper module rendering
"""

import functools
from typing import Callable, Dict

from jinja2 import Environment, StrictUndefined, TemplateError

from ..core.errors import TemplateRenderError
from ..core.models import ModuleDescription
from ..translators.types import convert_type
from ..utils.casing import capitalize, snake, upper_snake
from .templates import MODULE_TEMPLATE, TEMPLATE_VERSION


def string_formatter(func: Callable[[str], str]) -> Callable[[object], str]:
    """Wrap a string transform so it rejects non-string template values"""

    @functools.wraps(func)
    def formatter(value: object) -> str:
        if not isinstance(value, str):
            raise TemplateRenderError(
                f"{func.__name__}: string value expected, got {type(value).__name__}"
            )
        try:
            return func(value)
        except ValueError as e:
            raise TemplateRenderError(f"{func.__name__}: {e}") from e

    return formatter


FORMATTERS: Dict[str, Callable[[object], str]] = {
    "snake": string_formatter(snake),
    "upper_snake": string_formatter(upper_snake),
    "capitalize": string_formatter(capitalize),
    "convert_type": string_formatter(convert_type),
}


def create_environment() -> Environment:
    """Jinja2 environment with the module formatters registered"""
    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    # Replaces Jinja's own `capitalize`, which lowercases the tail
    env.filters.update(FORMATTERS)
    return env


def render_module(module: ModuleDescription, template: str = MODULE_TEMPLATE) -> str:
    """
    Render the wrapper module source.

    Args:
        module: Module name, EVM ID and the functions to forward
        template: Module template, the built-in one by default

    Returns:
        Generated ink! source

    Raises:
        TemplateRenderError: If a formatter gets a non-string value or the
            template refers to something the module does not provide
    """
    env = create_environment()

    try:
        return env.from_string(template).render(
            name=module.name,
            evm_id=module.evm_id,
            functions=module.functions,
            template_version=TEMPLATE_VERSION,
        )
    except TemplateError as e:
        raise TemplateRenderError(f"cannot render module '{module.name}': {e}") from e

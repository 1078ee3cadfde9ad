"""Format-string handling: escape expansion and token substitution."""

from assdialog.template.compiler import DEFAULT_FORMAT, compile_template
from assdialog.template.substitution import (
    TOKENS,
    render,
    render_single_pass,
    substitute,
    template_tokens,
)

__all__ = [
    "DEFAULT_FORMAT",
    "TOKENS",
    "compile_template",
    "render",
    "render_single_pass",
    "substitute",
    "template_tokens",
]

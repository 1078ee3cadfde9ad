"""Token substitution over a compiled template.

Tokens are literal, case-sensitive markers (``!start``, ``!text`` ...).  The
default :func:`render` substitutes one token at a time in :data:`TOKENS`
order, each pass working on the previous pass's output.  A value that
contains the text of a *later* token is therefore substituted again::

    >>> render("!actor: !text", {"!actor": "!text", "!text": "hi"})
    'hi: hi'

Existing templates depend on this, so it stays the default.
:func:`render_single_pass` is the opt-in alternative that never rescans
substituted text.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

TOKENS: tuple[str, ...] = (
    "!layer",
    "!start",
    "!end",
    "!style",
    "!actor",
    "!effect",
    "!text",
)


def substitute(template: str, token: str, value: str) -> str:
    """Replace every non-overlapping occurrence of *token*, left to right."""
    if not token:
        return template
    return template.replace(token, value)


def _ordered_tokens(mapping: Mapping[str, str]) -> list[str]:
    known = [token for token in TOKENS if token in mapping]
    extra = [token for token in mapping if token not in TOKENS]
    return known + extra


def render(template: str, mapping: Mapping[str, str]) -> str:
    """Chain :func:`substitute` over *mapping* in :data:`TOKENS` order.

    Tokens not listed in :data:`TOKENS` are applied afterwards, in mapping
    order.  An empty mapping returns *template* unchanged.
    """
    result = template
    for token in _ordered_tokens(mapping):
        result = substitute(result, token, mapping[token])
    return result


def render_single_pass(template: str, mapping: Mapping[str, str]) -> str:
    """Substitute all tokens simultaneously; replacement text is never rescanned."""
    tokens = [token for token in mapping if token]
    if not tokens:
        return template
    # Longest first so a token that prefixes another cannot shadow it.
    tokens.sort(key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda m: mapping[m.group(0)], template)


def template_tokens(template: str) -> list[str]:
    """Return the known tokens that occur in *template*, in :data:`TOKENS` order."""
    return [token for token in TOKENS if token in template]

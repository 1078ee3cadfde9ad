"""Expansion of the two escapes a shell user can type into a format string."""

DEFAULT_FORMAT = "!start-!end\\t!actor\\t!text\\n"

ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\t", "\t"),
    ("\\n", "\n"),
)


def compile_template(raw: str) -> str:
    """Return *raw* with every ``\\t`` turned into a tab, then every ``\\n`` into a newline.

    Each escape is replaced in a single left-to-right pass; the output is not
    rescanned, so text produced by one pass is never expanded again.
    """
    compiled = raw
    for escape, char in ESCAPES:
        compiled = compiled.replace(escape, char)
    return compiled

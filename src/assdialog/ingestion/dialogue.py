"""Parser for ASS ``Dialogue:`` event lines.

The Events section of an ASS script lists fields in the documented order::

    Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text

The parser scans that order directly instead of honouring the ``Format:``
line.  Every step either advances or fails with a :class:`ParseStep` naming
where the line fell apart; nothing raises.  Style, actor, effect and text are
truncated to the capacities in :class:`~assdialog.models.FieldLimits`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from assdialog.models import DialogueRecord, FieldLimits
from assdialog.timing import Timestamp

DIALOGUE_PREFIX = "Dialogue:"

_TIME = r"\s*(\d+):\s*(\d+):\s*(\d+)\.\s*(\d+)"

# Layer may be signed; timestamp sub-fields are plain ASCII digit runs.
_HEADER_RE = re.compile(
    r"Dialogue:\s*([+-]?\d+)," + _TIME + "," + _TIME,
    re.ASCII,
)

MARGIN_FIELDS = 3


class ParseStep(str, Enum):
    """The step at which a line was rejected."""
    RECOGNITION = "recognition"
    HEADER = "header"
    STYLE = "style"
    ACTOR = "actor"
    MARGINS = "margins"
    EFFECT = "effect"


@dataclass(frozen=True)
class ParseResult:
    record: Optional[DialogueRecord] = None
    failure: Optional[ParseStep] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


def _fail(step: ParseStep) -> ParseResult:
    return ParseResult(failure=step)


def _truncate(value: str, limit: Optional[int]) -> str:
    if limit is None:
        return value
    return value[:limit]


def _next_field(line: str, pos: int) -> Optional[tuple[str, int]]:
    """Return the text from *pos* up to the next comma, and the position after it."""
    comma = line.find(",", pos)
    if comma < 0:
        return None
    return line[pos:comma], comma + 1


def looks_like_dialogue(line: str) -> bool:
    return line.startswith(DIALOGUE_PREFIX)


def parse_dialogue(line: str, limits: FieldLimits = FieldLimits()) -> ParseResult:
    """Parse one raw line (terminator included or not) into a :class:`DialogueRecord`."""
    match = _HEADER_RE.match(line)
    if match is None:
        return _fail(ParseStep.RECOGNITION)
    numbers = [int(group) for group in match.groups()]
    layer = numbers[0]
    start = Timestamp(*numbers[1:5])
    end = Timestamp(*numbers[5:9])

    # Anything between the End timestamp and its comma belongs to End.
    field = _next_field(line, match.end())
    if field is None:
        return _fail(ParseStep.HEADER)
    _, pos = field

    field = _next_field(line, pos)
    if field is None:
        return _fail(ParseStep.STYLE)
    style, pos = field

    field = _next_field(line, pos)
    if field is None:
        return _fail(ParseStep.ACTOR)
    actor, pos = field

    for _ in range(MARGIN_FIELDS):
        field = _next_field(line, pos)
        if field is None:
            return _fail(ParseStep.MARGINS)
        _, pos = field

    field = _next_field(line, pos)
    if field is None:
        return _fail(ParseStep.EFFECT)
    effect, pos = field

    newline = line.find("\n", pos)
    text = line[pos:] if newline < 0 else line[pos:newline]

    return ParseResult(
        record=DialogueRecord(
            layer=layer,
            start=start,
            end=end,
            style=_truncate(style, limits.style),
            actor=_truncate(actor, limits.actor),
            effect=_truncate(effect, limits.effect),
            text=_truncate(text, limits.text),
        )
    )


def iter_dialogue(
    lines: Iterable[str], limits: FieldLimits = FieldLimits()
) -> Iterator[tuple[int, str, ParseResult]]:
    """Yield ``(line_number, line, result)`` for every line, numbering from 1."""
    for number, line in enumerate(lines, start=1):
        yield number, line, parse_dialogue(line, limits)

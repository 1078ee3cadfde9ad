from dataclasses import dataclass
from typing import Optional

from assdialog.timing import Timestamp


@dataclass(frozen=True)
class FieldLimits:
    """Per-field character capacities. Longer values are truncated, never rejected.

    ``None`` disables truncation for that field.
    """

    style: Optional[int] = 127
    actor: Optional[int] = 127
    effect: Optional[int] = 1023
    text: Optional[int] = 2047
    line_length: Optional[int] = 4095   # max characters returned by one physical read


@dataclass
class DialogueRecord:
    """One ``Dialogue:`` event from an ASS script."""

    layer: int
    start: Timestamp
    end: Timestamp
    style: str
    actor: str      # the "Name" column in the ASS Events format line
    effect: str
    text: str       # raw text, override tags and commas preserved

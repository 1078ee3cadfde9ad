"""Line-by-line conversion of ASS dialogue into templated text.

Each input line is parsed, retimed, mapped onto the template tokens and
written out immediately; no state is carried from one line to the next.
Lines that are not dialogue, or dialogue that cannot be parsed, are skipped
without output unless strict mode is on.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Optional, TextIO

from assdialog.config.schema import ConversionConfig
from assdialog.errors import DialogueParseError
from assdialog.ingestion.dialogue import iter_dialogue, looks_like_dialogue
from assdialog.ingestion.source import open_sink, open_source, read_bounded_lines
from assdialog.models import DialogueRecord, FieldLimits
from assdialog.template import compile_template, render, render_single_pass, template_tokens
from assdialog.timing import IDENTITY

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    lines_read: int = 0
    lines_converted: int = 0
    lines_malformed: int = 0   # started with "Dialogue:" but failed to parse

    @property
    def lines_skipped(self) -> int:
        return self.lines_read - self.lines_converted


def build_field_mapping(record: DialogueRecord) -> dict[str, str]:
    return {
        "!layer": str(record.layer),
        "!start": str(record.start),
        "!end": str(record.end),
        "!style": record.style,
        "!actor": record.actor,
        "!effect": record.effect,
        "!text": record.text,
    }


def retime(record: DialogueRecord, ratio: Fraction) -> DialogueRecord:
    """Return *record* with both timestamps scaled by *ratio* and normalised."""
    if ratio == IDENTITY:
        start, end = record.start.normalized(), record.end.normalized()
    else:
        start, end = record.start.rescale(ratio), record.end.rescale(ratio)
    return dataclasses.replace(record, start=start, end=end)


def convert_lines(
    lines: Iterable[str],
    output: TextIO,
    template: str,
    ratio: Fraction = IDENTITY,
    limits: FieldLimits = FieldLimits(),
    strict: bool = False,
    single_pass: bool = False,
    source: Optional[Path] = None,
) -> ConversionStats:
    """Render every dialogue line of *lines* through the compiled *template*.

    Parameters
    ----------
    lines:
        Raw input lines, terminators included.
    output:
        Stream receiving one rendered record per accepted line, verbatim.
    template:
        Format string with escapes already expanded (see ``compile_template``).
    ratio:
        Retiming multiplier applied to both timestamps.
    strict:
        Raise ``DialogueParseError`` for a ``Dialogue:`` line that cannot be
        parsed instead of skipping it.
    single_pass:
        Use ``render_single_pass`` so substituted values are never rescanned.
    source:
        Input path, only used to label strict-mode errors.

    Returns
    -------
    ConversionStats
    """
    renderer = render_single_pass if single_pass else render
    stats = ConversionStats()
    for number, line, result in iter_dialogue(lines, limits):
        stats.lines_read += 1
        if result.record is None:
            if not looks_like_dialogue(line):
                continue
            stats.lines_malformed += 1
            if strict:
                raise DialogueParseError(number, result.failure.value, line, source)
            logger.debug("line %d: skipped malformed dialogue (%s)", number, result.failure.value)
            continue
        record = retime(result.record, ratio)
        output.write(renderer(template, build_field_mapping(record)))
        stats.lines_converted += 1
    return stats


def convert(config: ConversionConfig) -> ConversionStats:
    """Run a full conversion as described by *config*.

    Raises ``InputOpenError`` / ``OutputOpenError`` if either stream cannot be
    opened; nothing is written in that case.
    """
    template = compile_template(config.template)
    ratio = config.ratio
    limits = config.limits.to_limits()
    logger.info("retiming ratio: %s", ratio)
    logger.debug("template tokens: %s", ", ".join(template_tokens(template)) or "none")

    with open_source(config.input_path) as source, open_sink(config.output_path) as sink:
        stats = convert_lines(
            read_bounded_lines(source, limits.line_length),
            sink,
            template,
            ratio=ratio,
            limits=limits,
            strict=config.strict,
            single_pass=config.single_pass,
            source=config.input_path,
        )

    logger.info(
        "converted %d of %d lines (%d malformed)",
        stats.lines_converted, stats.lines_read, stats.lines_malformed,
    )
    return stats

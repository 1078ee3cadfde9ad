from pathlib import Path
from typing import Optional


class AssDialogError(Exception):
    """Base class for all assdialog errors."""


class InputOpenError(AssDialogError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Couldn't open input file '{path}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the file exist and is it readable?\n"
            f"  Tip: Omit the input argument (or pass '-') to read from stdin."
        )
        self.path = path
        self.detail = detail


class OutputOpenError(AssDialogError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Couldn't open output file '{path}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the target directory exist and is it writable?\n"
            f"  Tip: Omit -o to write to stdout."
        )
        self.path = path
        self.detail = detail


class ConfigError(AssDialogError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot load config '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is the file valid JSON matching the ConversionConfig schema?"
        )
        self.path = path
        self.detail = detail


class DialogueParseError(AssDialogError):
    """Raised for a malformed dialogue line, in strict mode only."""

    def __init__(self, line_number: int, step: str, line: str, source: Optional[Path] = None) -> None:
        where = f"{source.name}:{line_number}" if source is not None else f"line {line_number}"
        super().__init__(
            f"Malformed dialogue event at {where}.\n"
            f"  Cause: {step} field could not be read\n"
            f"  Line: {line.rstrip()!r}\n"
            f"  Tip: Run without --strict to skip malformed lines."
        )
        self.line_number = line_number
        self.step = step
        self.line = line
        self.source = source

"""assdialog CLI entry point.

Reads an ASS script (file or stdin), renders every dialogue event through a
format string and writes the result to a file or stdout.  Typed errors are
shown as Rich panels on stderr; stdout carries only rendered records.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from assdialog.config import ConversionConfig, load_config
from assdialog.convert import convert
from assdialog.errors import AssDialogError
from assdialog.timing import parse_frame_rate

app = typer.Typer(
    name="assdialog",
    help="Convert ASS dialogue lines into a custom text format.",
    add_completion=False,
)
err_console = Console(stderr=True)

_FORMAT_HELP = (
    "Output format. Patterns: !layer !start !end !style !actor !effect !text; "
    "escapes: \\t \\n. Default: !start-!end\\t!actor\\t!text\\n"
)


def _input_error(message: str) -> None:
    err_console.print(Panel(
        message,
        title="[red]Input Error[/red]",
        border_style="red",
    ))
    raise typer.Exit(1)


def _check_fps(value: Optional[str], flag: str) -> None:
    if value is None:
        return
    try:
        fps = parse_frame_rate(value)
    except ValueError:
        fps = None
    if fps is None or fps <= 0:
        _input_error(f"Expected a valid number (>0) for {flag}, got [bold]{escape(value)}[/bold]")


@app.command()
def main(
    ctx: typer.Context,
    input_file: Annotated[
        Optional[Path],
        typer.Argument(
            metavar="[ASS_FILE]",
            help="Input ASS script, or '-' for stdin. Stdin is also read when other options are given.",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file. Writes stdout when omitted or '-'."),
    ] = None,
    old_fps: Annotated[
        Optional[str],
        typer.Option("--ofps", help="Old FPS as conversion base (e.g. 23.976 or 24000/1001)."),
    ] = None,
    new_fps: Annotated[
        Optional[str],
        typer.Option("--nfps", help="New FPS as conversion result."),
    ] = None,
    format_string: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help=_FORMAT_HELP, show_default=False),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config", "-c",
            dir_okay=False,
            help="JSON conversion config. Explicit flags override its values.",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on the first malformed Dialogue line instead of skipping it."),
    ] = False,
    single_pass: Annotated[
        bool,
        typer.Option(
            "--single-pass",
            help="Substitute all patterns at once so field values are never re-substituted.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress and a summary to stderr."),
    ] = False,
) -> None:
    """Render each Dialogue event of an ASS script through a format string."""
    if all(value in (None, False) for value in ctx.params.values()):
        # Bare invocation; stdin needs an explicit "-".
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    _check_fps(old_fps, "--ofps")
    _check_fps(new_fps, "--nfps")

    try:
        base = load_config(config) if config is not None else ConversionConfig()
        overrides: dict[str, Any] = {
            "input_path": input_file,
            "output_path": output,
            "old_fps": old_fps,
            "new_fps": new_fps,
            "template": format_string,
        }
        settings = base.model_dump()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        settings["strict"] = strict or base.strict
        settings["single_pass"] = single_pass or base.single_pass
        conversion = ConversionConfig.model_validate(settings)

        stats = convert(conversion)
    except AssDialogError as e:
        # Typed errors become a panel, never a traceback.
        err_console.print(Panel(
            escape(str(e)),
            title="[red]Conversion Error[/red]",
            border_style="red",
        ))
        raise typer.Exit(1)

    if verbose:
        err_console.print(
            f"[green]Converted {stats.lines_converted} dialogue lines[/green] "
            f"({stats.lines_read} read, {stats.lines_malformed} malformed)"
        )

"""
SOLE RESPONSIBILITY: Defines the Typer command line: wires stdin (or a file) and stdout
to the stream runner and sets up diagnostic logging.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from .. import __version__
from ..core.runner import run_filter
from ..logger import log_lifecycle, setup_logger
from .config import FilterConfig

app = typer.Typer(
    name="claude-stream-filter",
    help="""
Summarize Claude CLI [cyan]--output-format stream-json[/cyan] output, one short line per record.

[bold]Usage[/bold]
  $ claude -p "fix the tests" --output-format stream-json --verbose | claude-stream-filter
  $ claude-stream-filter session.jsonl
""",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
)

# Stdout belongs to the filtered stream
console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"claude-stream-filter {__version__}")
        raise typer.Exit()


@app.command()
def main(
    file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Read records from FILE instead of stdin.",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    debug: Annotated[
        Optional[bool],
        typer.Option(
            "--debug/--no-debug",
            help="Log skipped lines to ~/.claude-stream-filter/logs/filter.log "
            "(or $CLAUDE_STREAM_FILTER_LOG_DIR).",
        ),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = None,
):
    """Filter a stream-json transcript into readable progress lines."""
    config = FilterConfig.load(debug=debug)
    setup_logger(config.debug, config.log_dir)

    sink = typer.get_binary_stream("stdout")

    try:
        if file is None:
            with log_lifecycle("stdin"):
                run_filter(typer.get_binary_stream("stdin"), sink)
            return

        try:
            source = open(file, "rb")
        except OSError as e:
            console.print(f"[red]Cannot open {file}: {e}[/red]")
            raise typer.Exit(1)

        with source, log_lifecycle(str(file)):
            run_filter(source, sink)
    except KeyboardInterrupt:
        raise typer.Exit(130)


if __name__ == "__main__":
    app()

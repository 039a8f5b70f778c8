"""Command-line interface for modviz."""

from __future__ import annotations

import logging
import os
import stat
import sys
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .core import ModvizError
from .core.exceptions import InputAccessError
from .visualization import GraphBuilder, GraphRenderer

# Diagnostics go to stderr, stdout carries the DOT document
console = Console(stderr=True)

USAGES = {
    "darwin": "go mod graph | modviz | dot -T svg | open -f -a /System/Applications/Preview.app",
    "linux": "go mod graph | modviz | dot -T svg -o /tmp/modv.svg | xdg-open /tmp/modv.svg",
    "win32": "go mod graph | modviz | dot -T png -o graph.png; start graph.png",
}


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def print_usage(platform: str | None = None) -> None:
    """Print the pipeline to use on the current platform."""
    usage = USAGES.get(platform or sys.platform, USAGES["linux"])
    console.print("\nUsages:\n", highlight=False)
    console.print(f"\t{usage}\n", style="yellow", highlight=False, markup=False, soft_wrap=True)


def ensure_piped_input(stream: TextIO) -> None:
    """Refuse to read from anything but a pipe.

    Raises:
        InputAccessError: ``stream`` cannot be stat'ed or is not a pipe.
    """
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError) as e:
        raise InputAccessError(f"cannot stat standard input: {e}") from e

    if not stat.S_ISFIFO(mode):
        raise InputAccessError("command is intended to work with pipes")


@click.command()
@click.argument("focus", required=False, default="")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="modviz")
def cli(focus: str, verbose: bool) -> None:
    """modviz - Go module dependency graph visualization tool.

    Reads `go mod graph` output from a pipe and writes a Graphviz DOT
    document to stdout. FOCUS (name@version) restricts the graph to the
    modules that package depends on.

    \b
    Examples:
      go mod graph | modviz | dot -T svg -o deps.svg
      go mod graph | modviz golang.org/x/net@v0.17.0 | dot -T png -o net.png
    """
    setup_logging(verbose)

    stdin = click.get_text_stream("stdin", encoding="utf-8", errors="strict")
    stdout = click.get_text_stream("stdout", encoding="utf-8")

    try:
        ensure_piped_input(stdin)
        graph = GraphBuilder().parse(stdin)
        GraphRenderer().render(graph, stdout, focus)
    except ModvizError as e:
        console.print(f"❌ {e.stage} error: {e}", style="red", markup=False, soft_wrap=True)
        if verbose:
            console.print_exception()
        print_usage()
        sys.exit(1)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

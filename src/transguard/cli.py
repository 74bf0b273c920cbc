"""
transguard CLI - Command Line Interface

Entry point for classifying fragments, decoding escapes, natural sorting,
and reviewing files of extracted strings.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from transguard.core.exceptions import TransguardError

# Version
__version__ = "0.1.0"

# Create CLI app
app = typer.Typer(
    name="transguard",
    help="transguard - Find code artifacts hiding in translatable strings",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ============================================================================
# Main Commands
# ============================================================================

@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]transguard[/bold cyan] version [yellow]{__version__}[/yellow]")


@app.command()
def classify(
    texts: List[str] = typer.Argument(..., help="Fragments to classify"),
) -> None:
    """
    Show whether each fragment is a URL or file address.
    """
    from transguard.classifier.address import is_file_address, is_url
    from transguard.review.reviewer import FragmentReviewer

    reviewer = FragmentReviewer()

    table = Table(title="Fragment Classification")
    table.add_column("Fragment", style="cyan")
    table.add_column("URL", style="yellow")
    table.add_column("File Address", style="yellow")
    table.add_column("Kind", style="magenta")

    for text in texts:
        result = reviewer.review(text)
        table.add_row(
            escape(text),
            "yes" if is_url(text) else "no",
            "yes" if is_file_address(text) else "no",
            result.kind.value,
        )

    console.print(table)


@app.command()
def decode(
    text: str = typer.Argument(..., help="Text holding escape sequences"),
    control: bool = typer.Option(
        False,
        "--control",
        "-c",
        help="Also blank out escaped \\n, \\r and \\t",
    ),
) -> None:
    """
    Decode escaped Unicode values ("\\u266f", "\\x0440") in text.
    """
    from transguard.text.escapes import (
        decode_escaped_unicode_values,
        replace_escaped_control_chars,
    )

    if control:
        text = replace_escaped_control_chars(text)
    # markup=False keeps brackets in the decoded text literal
    console.print(decode_escaped_unicode_values(text), markup=False, highlight=False)


@app.command()
def sort(
    file: Path = typer.Argument(..., help="File with one string per line", exists=True),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        "-i",
        help="Compare letters without regard to case",
    ),
    reverse: bool = typer.Option(
        False,
        "--reverse",
        "-r",
        help="Sort in descending order",
    ),
) -> None:
    """
    Sort lines in natural order ("item2" before "item12").
    """
    from transguard.text.natural import natural_sorted

    try:
        lines = file.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {file}:[/red] {e}")
        raise typer.Exit(code=1)

    for line in natural_sorted(lines, case_insensitive=ignore_case, reverse=reverse):
        console.print(line, markup=False, highlight=False)


@app.command()
def review(
    file: Path = typer.Argument(..., help="File with one fragment per line", exists=True),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Review settings YAML file",
        exists=True,
    ),
    artifacts_only: bool = typer.Option(
        False,
        "--artifacts-only",
        "-a",
        help="Only list fragments that are code artifacts",
    ),
    sort_output: bool = typer.Option(
        False,
        "--sort",
        "-s",
        help="List fragments in natural order",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON",
    ),
) -> None:
    """
    Review extracted strings and flag the ones translators should not see.
    """
    from transguard.core.config import load_review_settings
    from transguard.review.reviewer import FragmentReviewer

    try:
        settings = load_review_settings(config)
        reviewer = FragmentReviewer(settings)
        reviews = reviewer.review_file(file, artifacts_only=artifacts_only, sort=sort_output)
    except TransguardError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if as_json:
        data = {
            "source": str(file),
            "statistics": reviewer.get_statistics(reviews),
            "fragments": [r.to_dict() for r in reviews],
        }
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    if not reviews:
        console.print("[yellow]No fragments to report.[/yellow]")
        return

    table = Table(title=f"Review of {file.name}")
    table.add_column("Line", style="blue", justify="right")
    table.add_column("Fragment", style="cyan")
    table.add_column("Kind", style="magenta")

    for result in reviews:
        kind_color = "red" if result.is_code_artifact else "green"
        table.add_row(
            str(result.line) if result.line is not None else "-",
            escape(result.original),
            f"[{kind_color}]{result.kind.value}[/{kind_color}]",
        )

    console.print(table)
    stats = reviewer.get_statistics(reviews)
    console.print(f"[dim]{stats['artifacts']} of {stats['total']} fragments are code artifacts[/dim]")


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

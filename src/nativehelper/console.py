"""Rich console output for the native-helper command line."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nativehelper.domain.architecture import extract_architecture_from_artifact
from nativehelper.domain.models import Architecture, Artifact, PackagingKind

console = Console()
error_console = Console(stderr=True)


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_success(message: str) -> None:
    console.print(Panel(message, title="Success", border_style="green"))


def print_native_dependencies(
    artifacts: Iterable[Artifact], default_architecture: Architecture
) -> None:
    """Print native dependencies as a table, sorted by artifact id."""
    artifacts = sorted(artifacts, key=lambda a: a.id)
    if not artifacts:
        console.print("[yellow]No native dependencies found.[/yellow]")
        return

    table = Table(show_header=True, box=None)
    table.add_column("Artifact", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Scope")
    table.add_column("ABI", style="green")

    for artifact in artifacts:
        # Library packages may bundle several ABIs
        abi = (
            "(bundled)"
            if artifact.kind is PackagingKind.LIBRARY_PACKAGE
            else str(extract_architecture_from_artifact(artifact, default_architecture))
        )
        table.add_row(artifact.id, artifact.type, artifact.scope or "attached", abi)

    console.print(table)

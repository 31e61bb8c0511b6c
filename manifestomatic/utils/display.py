"""Utility functions to print formatted CLI messages and record previews."""

from __future__ import annotations

import sys
from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from manifestomatic.models import ResolvedRecord

__all__ = ["echo_banner", "echo_record", "echo_success", "render_records"]


def echo_banner(text: str) -> None:
    """Print a colourful banner announcing a processing step.

    Args:
        text: Banner text.
    """
    click.secho(f"\n=== {text} ===", fg="cyan")


def echo_record(record: ResolvedRecord) -> None:
    """Echo a bullet naming the object and whether it will be verified."""
    if record.verify_flag:
        click.echo(f"  • {record.name} (verify)")
    else:
        click.echo(f"  • {record.name}")


def echo_success(text: str) -> None:
    """Echo a green success message prefixed with a tick.

    Args:
        text: Message to display.
    """
    click.secho(f"✓ {text}", fg="green")


def render_records(records: Sequence[ResolvedRecord]) -> None:
    """Print *records* as a table on stdout.

    Verification columns appear only when any record has a verification path.
    """
    with_verification = any(r.has_verification for r in records)

    table = Table(title=f"{len(records)} record(s)", show_lines=False)
    table.add_column("name", style="bold")
    table.add_column("source")
    table.add_column("workspace")
    table.add_column("compressed_destination")
    if with_verification:
        table.add_column("verification_path")
        table.add_column("verify", justify="center")

    for r in records:
        cells = [r.name, r.source_location, r.workspace_path, r.compressed_archive_path]
        if with_verification:
            cells.append(r.verification_path or "")
            cells.append("✓" if r.verify_flag else "")
        table.add_row(*cells)

    Console(file=sys.stdout, width=200).print(table)

"""
Expand a manifest and write the inventory file.

Invoked through ``manifestomatic-cli expand``. The whole manifest is expanded
in memory before anything is written, so an invalid manifest never produces
an output file.
"""

from __future__ import annotations

import random
from pathlib import Path

import click
import structlog

from manifestomatic.errors import ManifestError
from manifestomatic.expander import expand_file
from manifestomatic.io.writer import FORMATS, output_path, write_inventory
from manifestomatic.utils.display import (
    echo_banner,
    echo_record,
    echo_success,
    render_records,
)

log = structlog.get_logger()


@click.command(
    name="expand",
    context_settings=dict(help_option_names=["-h", "--help"], show_default=True, max_content_width=120),
    help="Expand MANIFEST into one inventory row per object.",
)
@click.argument(
    "manifest",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file; its extension is replaced to match --format. "
    "Defaults to ./inventory.<ext>.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(FORMATS)),
    default="csv",
    help="Inventory file format.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed identifiers and the verification sample for reproducible output.",
)
@click.option("--dry-run", is_flag=True, help="Print the records instead of writing a file.")
def cli(  # noqa: D401 – Click demands this callback name
    manifest: Path,
    output: Path | None,
    fmt: str,
    seed: int | None,
    dry_run: bool,
) -> None:
    """Entry-point for ``manifestomatic-cli expand``.

    Raises:
        click.ClickException: For manifest or filesystem errors.
    """
    rng = random.Random(seed) if seed is not None else None

    try:
        records = expand_file(manifest, rng=rng)
    except ManifestError as exc:
        raise click.ClickException(str(exc)) from exc

    echo_banner(manifest.name)
    if dry_run:
        render_records(records)
        return

    for record in records:
        echo_record(record)

    target = output_path(output, fmt)
    try:
        written = write_inventory(records, target, fmt)
    except OSError as exc:
        raise click.ClickException(f"Could not write {target}: {exc}") from exc

    log.info("inventory_written", path=str(written), records=len(records))
    echo_success(f"{fmt.upper()} written to {written} ({len(records)} record(s)).")

"""
Write a starter manifest (``manifestomatic-cli init PATH``).

The template ships inside the wheel (``manifestomatic/resources``) and
documents every field the expander understands.
"""

from __future__ import annotations

from pathlib import Path

import click

from manifestomatic.config import template_text
from manifestomatic.utils.display import echo_success


@click.command(
    name="init",
    context_settings=dict(help_option_names=["-h", "--help"], show_default=True, max_content_width=120),
    help="Create a template manifest at PATH.",
)
@click.argument("path", type=click.Path(dir_okay=False, writable=True, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite PATH if it already exists.")
def cli(path: Path, force: bool) -> None:  # noqa: D401 – Click demands this callback name
    """Entry-point for ``manifestomatic-cli init``."""
    path = path.expanduser()
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists – use --force to overwrite.")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(template_text(), encoding="utf-8")
    echo_success(f"Template manifest written to {path}.")

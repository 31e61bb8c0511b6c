"""Check a manifest without expanding it (``manifestomatic-cli validate``)."""

from __future__ import annotations

from pathlib import Path

import click

from manifestomatic.config import load_manifest
from manifestomatic.errors import ManifestError
from manifestomatic.paths import RetrievalMethod
from manifestomatic.sampling import SampleKind
from manifestomatic.utils.display import echo_banner, echo_success
from manifestomatic.validation import validate


@click.command(
    name="validate",
    context_settings=dict(help_option_names=["-h", "--help"], show_default=True, max_content_width=120),
    help="Validate MANIFEST and report what an expansion would produce.",
)
@click.argument(
    "manifest",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def cli(manifest: Path) -> None:  # noqa: D401 – Click demands this callback name
    """Entry-point for ``manifestomatic-cli validate``."""
    echo_banner(manifest.name)
    try:
        parsed = load_manifest(manifest)
        directive = validate(parsed)
        method = RetrievalMethod.parse(parsed.method)
    except ManifestError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"  objects:      {len(parsed.directive_names)}")
    click.echo(f"  method:       {method.value}")
    if directive.kind is SampleKind.NONE:
        sampling = "none"
    else:
        sampling = directive.raw
    click.echo(f"  verification: {sampling}")
    echo_success("Manifest is valid.")

"""Expose the project-wide Click group for the ``manifestomatic-cli`` script.

The module:

* declares a single Click *group* called :pyfunc:`main`;
* wires the global logging flags (verbosity, debug, plain-text mirror);
* sets up logging via :pyfunc:`manifestomatic.utils.logging.setup_logging`;
* registers every sub-command located in sibling modules.

No state is mutated outside the Click context, which keeps the CLI layer
easy to test.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Dict

import click

from manifestomatic import __version__
from manifestomatic.utils.logging import setup_logging


class LazyGroup(click.Group):
    """Click group that imports sub-commands lazily."""

    def __init__(self, *args, **kwargs):
        self._lazy: dict[str, str] = {}
        super().__init__(*args, **kwargs)

    def set_lazy_command(self, name: str, target: str) -> None:
        """Register *name* to be imported from ``target`` on first use."""
        self._lazy[name] = target

    def list_commands(self, ctx):
        return sorted(set(super().list_commands(ctx)) | set(self._lazy))

    def get_command(self, ctx, cmd_name):  # noqa: D401 - Click signature
        """Resolve *cmd_name* from the eager map or import table."""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        target = self._lazy.get(cmd_name)
        if not target:
            return None
        module_name, attr = target.split(":", 1)
        cmd = getattr(importlib.import_module(module_name), attr)
        self.add_command(cmd, name=cmd_name)
        return cmd


# ─────────────────────────────────────────────────────────────────────────────
# Context settings shared by the entire Click hierarchy
# ─────────────────────────────────────────────────────────────────────────────
CONTEXT_SETTINGS: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
    max_content_width=120,
)


@click.group(
    cls=LazyGroup,
    context_settings=CONTEXT_SETTINGS,
    help="""\b
manifestomatic-cli – expand archival manifests into inventory files.
""",
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="INFO-level console output.")
@click.option("--debug", is_flag=True, help="DEBUG-level console output.")
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror console output into this plain-text file.",
)
@click.pass_context
def main(  # noqa: D401 – Click requires the callback to be named “main”.
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    save_logfile: Path | None,
) -> None:
    """Root command executed by *manifestomatic-cli*.

    Args:
        ctx: Click runtime context that carries objects across sub-commands.
        verbose: Emit INFO-level messages.
        debug: Emit DEBUG-level messages.
        save_logfile: Optional path for a plain-text log mirror.
    """
    setup_logging(verbose=verbose, debug=debug, extra_text_log=save_logfile)
    ctx.obj = {"verbose": verbose, "debug": debug}


main.set_lazy_command("expand", "manifestomatic.cli.expand:cli")
main.set_lazy_command("validate", "manifestomatic.cli.validate:cli")
main.set_lazy_command("init", "manifestomatic.cli.init:cli")

# The public symbol exported by this module.  Required for ``python -m`` entry-points.
cli = main
__all__: list[str] = ["main", "CONTEXT_SETTINGS"]

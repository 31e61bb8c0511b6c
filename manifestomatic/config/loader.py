"""
YAML manifest loader.

The loader reads a manifest document from disk (YAML, or JSON which YAML
accepts verbatim), checks that it has the basic shape expected by
:class:`manifestomatic.config.schema.Manifest`, and returns the parsed model.

Completeness checks are *not* performed here; they belong to
:func:`manifestomatic.validation.validate` so that every missing field can be
reported together.

The packaged template used by ``manifestomatic-cli init`` is also resolved
here so that all resource lookups live in one module.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml
from pydantic import ValidationError

from manifestomatic.errors import ManifestParseError

from .schema import Manifest

log = structlog.get_logger()

_TEMPLATE_NAME = "template.yaml"

_NUMERIC_TAGS = {"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"}


class _ManifestLoader(yaml.SafeLoader):
    """Safe loader that keeps unquoted numbers as text.

    Object names such as ``0042`` or extensions such as ``1.10`` must reach
    the path builders exactly as written, not as the YAML 1.1 octal or float
    they would otherwise resolve to.
    """


_ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# --------------------------------------------------------------------------- #
# Helper functions                                                            #
# --------------------------------------------------------------------------- #
def _load_yaml(path: Path) -> Any:
    """Read *path* and return the parsed YAML document.

    Args:
        path: Location of the manifest.

    Returns:
        The parsed document (numbers kept as strings), or ``{}`` for an empty file.

    Raises:
        ManifestParseError: If the file is missing or not valid YAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestParseError(f"Cannot read manifest {path}: {exc}") from exc

    try:
        return yaml.load(text, Loader=_ManifestLoader) or {}
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Malformed manifest {path}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def parse_manifest(document: Mapping[str, Any], *, origin: str = "<manifest>") -> Manifest:
    """Turn an already-decoded document into a :class:`Manifest`.

    Args:
        document: Mapping produced by a YAML/JSON parser.
        origin: Label used in error messages (usually the file path).

    Returns:
        The parsed manifest.

    Raises:
        ManifestParseError: When the document is not a mapping or a field has
            the wrong shape.
    """
    if not isinstance(document, Mapping):
        raise ManifestParseError(
            f"Malformed manifest {origin}: top level must be a mapping, "
            f"got {type(document).__name__}"
        )
    try:
        return Manifest.model_validate(dict(document))
    except ValidationError as exc:
        raise ManifestParseError(f"Malformed manifest {origin}: {exc}") from exc


def load_manifest(path: str | Path) -> Manifest:
    """Load and parse the manifest stored at *path*.

    Args:
        path: YAML (or JSON) manifest file.

    Returns:
        A :class:`Manifest` ready for validation and expansion.

    Raises:
        ManifestParseError: For unreadable or malformed documents.
    """
    path = Path(path).expanduser()
    document = _load_yaml(path)
    manifest = parse_manifest(document, origin=str(path))
    log.debug(
        "manifest_loaded",
        path=str(path),
        objects=len(manifest.directive_names or []),
    )
    return manifest


def template_text() -> str:
    """Return the packaged template manifest as text."""
    return files("manifestomatic.resources").joinpath(_TEMPLATE_NAME).read_text(
        encoding="utf-8"
    )

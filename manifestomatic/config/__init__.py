"""
Configuration package façade.

Exports the small, stable surface that external callers rely on:

* :func:`load_manifest` – Read and parse a manifest file into a
  :class:`Manifest` instance.
* :func:`parse_manifest` – Same, for an already-decoded mapping.
* :class:`Manifest` – Pydantic model representing the parsed document.

Anything not imported here is considered private implementation detail.
"""

from .loader import load_manifest, parse_manifest, template_text  # noqa: F401
from .schema import REQUIRED_FIELDS, Manifest  # noqa: F401

__all__: list[str] = [
    "load_manifest",
    "parse_manifest",
    "template_text",
    "Manifest",
    "REQUIRED_FIELDS",
]

"""
Pydantic model mirroring the YAML archival manifest.

Every field is optional at parse time. Whether a manifest is *complete* is a
separate question answered by :mod:`manifestomatic.validation`, which reports
all missing fields together instead of stopping at the first one the way a
strict schema would.

The model only normalises shapes:

* scalar values (``2024``, ``1.5``) become strings. The YAML loader already
  keeps unquoted numbers as written, so this only matters for documents
  built in Python;
* a leading ``.`` on ``compressed_extension`` is dropped.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Required fields in the order they are reported when missing.
REQUIRED_FIELDS: tuple[str, ...] = (
    "source",
    "workspace",
    "compressed_destination",
    "compressed_extension",
    "description_values",
    "vault",
    "application",
    "method",
    "directive_names",
)


def _scalar_to_str(value: Any) -> Any:
    """Return *value* as ``str`` when it is a plain YAML scalar."""
    if isinstance(value, bool):
        # ``yes``/``no`` would otherwise turn into ``"True"``/``"False"``.
        raise ValueError("expected a string, got a boolean")
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Manifest(BaseModel):
    """Parsed archival manifest.

    Attributes:
        directive_names: Ordered names of the objects to archive.
        source: Base path or URI the objects are retrieved from.
        workspace: Root under which per-object staging folders are created.
        compressed_destination: Root for compressed archives.
        compressed_extension: Archive extension without the leading dot.
        verification_destination: Optional root for verification staging.
        verification_sample_size: Optional sampling directive.
        description_values: Descriptive metadata template.
        vault: Cold-storage vault name.
        application: Owning application or workflow.
        method: Retrieval method token (``gitannex`` / ``rsync``).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    directive_names: Optional[List[str]] = None
    source: Optional[str] = None
    workspace: Optional[str] = None
    compressed_destination: Optional[str] = None
    compressed_extension: Optional[str] = None
    verification_destination: Optional[str] = None
    verification_sample_size: Optional[str] = None
    description_values: Optional[Dict[str, Any]] = None
    vault: Optional[str] = None
    application: Optional[str] = None
    method: Optional[str] = None

    # ------------------------------------------------------------------ #
    # Shape normalisation                                                #
    # ------------------------------------------------------------------ #
    @field_validator("directive_names", mode="before")
    @classmethod
    def _names_as_strings(cls, value: Any) -> Any:
        """Coerce numeric directive names to strings."""
        if isinstance(value, list):
            return [_scalar_to_str(v) if v is not None else "" for v in value]
        return value

    @field_validator(
        "source",
        "workspace",
        "compressed_destination",
        "compressed_extension",
        "verification_destination",
        "verification_sample_size",
        "vault",
        "application",
        "method",
        mode="before",
    )
    @classmethod
    def _scalars_as_strings(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("compressed_extension")
    @classmethod
    def _strip_leading_dot(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return value.strip().lstrip(".")

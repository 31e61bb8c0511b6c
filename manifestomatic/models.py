"""
Domain-level record model handed from the expander to the writers.

:class:`ResolvedRecord` is one fully derived inventory row. Instances are
frozen; the writer layer turns them into plain dictionaries through
:meth:`ResolvedRecord.as_row`.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, model_validator

__all__ = ["BASE_COLUMNS", "VERIFICATION_COLUMNS", "ResolvedRecord"]

# Column order of the written inventory.
BASE_COLUMNS: Tuple[str, ...] = (
    "name",
    "id",
    "source",
    "workspace",
    "compressed_destination",
    "cleanup_paths",
    "description",
    "vault",
    "application",
    "method",
)
VERIFICATION_COLUMNS: Tuple[str, ...] = ("verification_path", "verify")

CLEANUP_SEPARATOR = ";"


class ResolvedRecord(BaseModel, frozen=True):
    """One object of the manifest with every path resolved.

    Attributes:
        name: Directive name.
        id: Object identifier; equal to *name* for now.
        source_location: Where the object is retrieved from.
        workspace_path: Per-run staging folder.
        compressed_archive_path: Per-run archive file.
        cleanup_paths: Folders to delete after the job, without duplicates.
        description_payload: JSON snapshot of the descriptive metadata.
        vault: Cold-storage vault.
        application: Owning application.
        method: Retrieval method token.
        verification_path: Verification staging folder, if configured.
        verify_flag: Whether the object was sampled for verification; only
            set together with *verification_path*.
    """

    name: str
    id: str
    source_location: str
    workspace_path: str
    compressed_archive_path: str
    cleanup_paths: Tuple[str, ...]
    description_payload: str
    vault: str
    application: str
    method: str
    verification_path: Optional[str] = None
    verify_flag: Optional[bool] = None

    @model_validator(mode="after")
    def _verification_fields_together(self):
        """Reject records carrying only one of the two verification fields."""
        if (self.verification_path is None) != (self.verify_flag is None):
            raise ValueError(
                "verification_path and verify_flag must be set together"
            )
        return self

    @property
    def has_verification(self) -> bool:
        return self.verification_path is not None

    def as_row(self, *, with_verification: bool = False) -> Dict[str, object]:
        """Return the record as an ordered column → value mapping.

        Args:
            with_verification: Include the verification columns. Records
                without verification data get empty cells.
        """
        row: Dict[str, object] = {
            "name": self.name,
            "id": self.id,
            "source": self.source_location,
            "workspace": self.workspace_path,
            "compressed_destination": self.compressed_archive_path,
            "cleanup_paths": CLEANUP_SEPARATOR.join(self.cleanup_paths),
            "description": self.description_payload,
            "vault": self.vault,
            "application": self.application,
            "method": self.method,
        }
        if with_verification:
            row["verification_path"] = self.verification_path or ""
            if self.verify_flag is None:
                row["verify"] = ""
            else:
                row["verify"] = "true" if self.verify_flag else "false"
        return row

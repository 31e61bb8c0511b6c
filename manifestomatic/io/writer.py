"""Inventory writers (CSV and XLSX).

The writers turn a list of :class:`~manifestomatic.models.ResolvedRecord`
objects into a :class:`pandas.DataFrame` and persist it. Output is written to
a temporary sibling first and moved into place with :func:`os.replace`, so a
failed write never leaves a truncated inventory behind.

Verification columns are only emitted when at least one record carries a
verification path.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Dict, Sequence

import pandas as pd

from manifestomatic.models import BASE_COLUMNS, VERIFICATION_COLUMNS, ResolvedRecord

__all__ = ["FORMATS", "inventory_frame", "output_path", "write_inventory"]

log = logging.getLogger(__name__)

# Format name → file extension.
FORMATS: Dict[str, str] = {"csv": ".csv", "xlsx": ".xlsx"}

DEFAULT_STEM = "inventory"


def _default_file_mode() -> int:
    """Return the mode a plain ``open(path, "w")`` would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def inventory_frame(records: Sequence[ResolvedRecord]) -> pd.DataFrame:
    """Return *records* as a DataFrame with the documented column order."""
    with_verification = any(r.has_verification for r in records)
    columns = list(BASE_COLUMNS)
    if with_verification:
        columns.extend(VERIFICATION_COLUMNS)
    rows = [r.as_row(with_verification=with_verification) for r in records]
    return pd.DataFrame(rows, columns=columns, dtype=object)


def output_path(requested: Path | None, fmt: str) -> Path:
    """Return the file the inventory should be written to.

    Args:
        requested: User-supplied path or ``None`` for the default
            ``inventory.<ext>`` in the working directory.
        fmt: Key of :data:`FORMATS`.

    Returns:
        *requested* with its suffix replaced by the format's extension.
    """
    ext = FORMATS[fmt]
    if requested is None:
        return Path(DEFAULT_STEM).with_suffix(ext)
    return requested.with_suffix(ext)


def _to_csv(df: pd.DataFrame, path: Path) -> None:
    df.to_csv(path, index=False)


def _to_xlsx(df: pd.DataFrame, path: Path) -> None:
    df.to_excel(path, index=False, sheet_name="inventory", engine="openpyxl")


_WRITERS: Dict[str, Callable[[pd.DataFrame, Path], None]] = {
    "csv": _to_csv,
    "xlsx": _to_xlsx,
}


def write_inventory(
    records: Sequence[ResolvedRecord], path: Path, fmt: str = "csv"
) -> Path:
    """Write *records* to *path* atomically.

    Args:
        records: Expanded records, already in manifest order.
        path: Destination file.
        fmt: ``"csv"`` or ``"xlsx"``.

    Returns:
        The destination path.

    Raises:
        ValueError: For an unknown *fmt*.
        OSError: When the destination cannot be written.
    """
    if fmt not in _WRITERS:
        raise ValueError(f"Unsupported format {fmt!r} (choose from {', '.join(FORMATS)})")

    df = inventory_frame(records)
    path = path.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.stem}-", suffix=FORMATS[fmt], dir=path.parent
    )
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        _WRITERS[fmt](df, tmp)
        os.chmod(tmp, _default_file_mode())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

    log.info("[inventory] wrote %s (%d row(s))", path, len(df))
    return path

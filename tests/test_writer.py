import os
import random
import stat
import sys
from pathlib import Path

import pandas as pd
import pytest

from manifestomatic import expand_manifest
from manifestomatic.config import Manifest
from manifestomatic.io import writer
from manifestomatic.io.writer import output_path, write_inventory
from manifestomatic.models import BASE_COLUMNS


def _read_csv(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def test_csv_without_verification_columns(tmp_path: Path, manifest_doc):
    """Verify optional columns are dropped when no record carries them."""
    records = expand_manifest(Manifest(**manifest_doc))
    out = write_inventory(records, tmp_path / "inventory.csv")

    df = _read_csv(out)
    assert list(df.columns) == list(BASE_COLUMNS)
    assert list(df["name"]) == ["alpha", "beta", "gamma"]
    assert df.loc[0, "source"] == "/data/src/alpha.git"
    assert df.loc[0, "cleanup_paths"].split(";") == list(records[0].cleanup_paths)


def test_csv_with_verification_columns(tmp_path: Path, manifest_doc):
    """Verify verification columns and boolean cells."""
    manifest_doc["verification_destination"] = "/verify"
    manifest_doc["verification_sample_size"] = "all"
    records = expand_manifest(Manifest(**manifest_doc))
    df = _read_csv(write_inventory(records, tmp_path / "inventory.csv"))

    assert list(df.columns)[-2:] == ["verification_path", "verify"]
    assert set(df["verify"]) == {"true"}


def test_failed_write_leaves_no_file(tmp_path: Path, manifest_doc, monkeypatch):
    """Verify a failing writer leaves neither target nor temporary file."""
    records = expand_manifest(Manifest(**manifest_doc))

    def _boom(df, path):
        Path(path).write_text("partial")
        raise OSError("disk full")

    monkeypatch.setitem(writer._WRITERS, "csv", _boom)
    target = tmp_path / "out" / "inventory.csv"
    with pytest.raises(OSError):
        write_inventory(records, target)
    assert not target.exists()
    assert list(target.parent.iterdir()) == []


def test_unknown_format(tmp_path: Path, manifest_doc):
    """Verify unknown formats are rejected before writing."""
    records = expand_manifest(Manifest(**manifest_doc))
    with pytest.raises(ValueError):
        write_inventory(records, tmp_path / "x.txt", "txt")


def test_output_path_replaces_suffix():
    """Verify output naming rules."""
    assert output_path(None, "csv") == Path("inventory.csv")
    assert output_path(Path("runs/batch1.yaml"), "xlsx") == Path("runs/batch1.xlsx")


def test_xlsx_round_trip(tmp_path: Path, manifest_doc):
    """Verify spreadsheet output through openpyxl."""
    pytest.importorskip("openpyxl")
    records = expand_manifest(Manifest(**manifest_doc), rng=random.Random(2))
    out = write_inventory(records, tmp_path / "inventory.xlsx", "xlsx")

    df = pd.read_excel(out, sheet_name="inventory", dtype=str)
    assert list(df["name"]) == ["alpha", "beta", "gamma"]
    assert list(df["workspace"]) == [r.workspace_path for r in records]


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_written_file_follows_umask(tmp_path: Path, manifest_doc):
    """Verify the inventory gets the usual umask mode, not an owner-only one."""
    records = expand_manifest(Manifest(**manifest_doc))
    previous = os.umask(0o022)
    try:
        out = write_inventory(records, tmp_path / "inventory.csv")
    finally:
        os.umask(previous)
    assert stat.S_IMODE(out.stat().st_mode) == 0o644

"""Pytest configuration for manifestomatic tests."""

from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest
import yaml

from manifestomatic.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def _isolated_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the rotating log file out of the installed package."""
    monkeypatch.setenv("MANIFESTOMATIC_LOG_DIR", str(tmp_path / "logs"))
    yield
    reset_logging()


@pytest.fixture
def manifest_doc() -> Dict[str, Any]:
    """Return a complete manifest document without verification settings."""
    return {
        "directive_names": ["alpha", "beta", "gamma"],
        "source": "/data/src",
        "workspace": "/scratch/ws",
        "compressed_destination": "/scratch/out",
        "compressed_extension": "tar.gz",
        "description_values": {"description": "", "collection": "Papers"},
        "vault": "cold-vault",
        "application": "archiver",
        "method": "gitannex",
    }


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """Return a helper that dumps a document to ``tmp_path/manifest.yaml``."""

    def _write(doc: Dict[str, Any], name: str = "manifest.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(doc, sort_keys=False))
        return path

    return _write

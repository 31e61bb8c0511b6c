import logging
import logging.handlers
from pathlib import Path

import pandas as pd
from click.testing import CliRunner

from manifestomatic.cli import main


def test_expand_writes_csv(tmp_path: Path, write_manifest, manifest_doc):
    """Verify expand writes the inventory next to the requested name."""
    manifest = write_manifest(manifest_doc)
    runner = CliRunner()
    result = runner.invoke(
        main, ["expand", str(manifest), "-o", str(tmp_path / "batch.txt"), "--seed", "3"]
    )

    assert result.exit_code == 0, result.output
    out = tmp_path / "batch.csv"
    assert out.exists()
    df = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert list(df["name"]) == ["alpha", "beta", "gamma"]
    assert "3 record(s)" in result.output


def test_expand_seed_is_reproducible(tmp_path: Path, write_manifest, manifest_doc):
    """Verify the same seed writes identical inventories."""
    manifest = write_manifest(manifest_doc)
    runner = CliRunner()
    for name in ("one", "two"):
        result = runner.invoke(
            main, ["expand", str(manifest), "-o", str(tmp_path / name), "--seed", "8"]
        )
        assert result.exit_code == 0, result.output
    assert (tmp_path / "one.csv").read_text() == (tmp_path / "two.csv").read_text()


def test_expand_defaults_to_inventory_csv(tmp_path: Path, write_manifest, manifest_doc, monkeypatch):
    """Verify the default output file name."""
    manifest = write_manifest(manifest_doc)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(main, ["expand", str(manifest)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "inventory.csv").exists()


def test_invalid_manifest_writes_nothing(tmp_path: Path, write_manifest, manifest_doc):
    """Verify a failing manifest exits non-zero without output."""
    del manifest_doc["vault"]
    del manifest_doc["application"]
    manifest = write_manifest(manifest_doc)
    out = tmp_path / "inventory.csv"

    result = CliRunner().invoke(main, ["expand", str(manifest), "-o", str(out)])
    assert result.exit_code == 1
    assert "vault" in result.output and "application" in result.output
    assert not out.exists()


def test_dry_run_prints_table(tmp_path: Path, write_manifest, manifest_doc):
    """Verify dry-run previews records without writing."""
    manifest_doc["verification_destination"] = "/verify"
    manifest_doc["verification_sample_size"] = "ALL"
    manifest = write_manifest(manifest_doc)
    out = tmp_path / "inventory.csv"

    result = CliRunner().invoke(main, ["expand", str(manifest), "-o", str(out), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "3 record(s)" in result.output
    assert "gamma" in result.output
    assert not out.exists()


def test_validate_reports_summary(write_manifest, manifest_doc):
    """Verify validate prints a summary for a good manifest."""
    manifest_doc["verification_destination"] = "/verify"
    manifest_doc["verification_sample_size"] = "1/3"
    result = CliRunner().invoke(main, ["validate", str(write_manifest(manifest_doc))])
    assert result.exit_code == 0, result.output
    assert "objects:      3" in result.output
    assert "verification: 1/3" in result.output


def test_validate_rejects_unknown_method(write_manifest, manifest_doc):
    """Verify validate surfaces unsupported methods."""
    manifest_doc["method"] = "ftp"
    result = CliRunner().invoke(main, ["validate", str(write_manifest(manifest_doc))])
    assert result.exit_code == 1
    assert "ftp" in result.output


def test_init_writes_template(tmp_path: Path):
    """Verify init writes a template and refuses to overwrite."""
    target = tmp_path / "new.yaml"
    runner = CliRunner()

    result = runner.invoke(main, ["init", str(target)])
    assert result.exit_code == 0, result.output
    assert "directive_names" in target.read_text()

    again = runner.invoke(main, ["init", str(target)])
    assert again.exit_code == 1
    assert runner.invoke(main, ["init", str(target), "--force"]).exit_code == 0


def test_expanded_template_round_trip(tmp_path: Path):
    """Verify the packaged template expands through the CLI."""
    target = tmp_path / "manifest.yaml"
    runner = CliRunner()
    assert runner.invoke(main, ["init", str(target)]).exit_code == 0
    result = runner.invoke(main, ["expand", str(target), "-o", str(tmp_path / "inv"), "--seed", "1"])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(tmp_path / "inv.csv", dtype=str, keep_default_na=False)
    assert list(df.columns)[-2:] == ["verification_path", "verify"]


def _owned_file_handlers() -> list[logging.handlers.RotatingFileHandler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
        and getattr(h, "_manifestomatic_handler", False)
    ]


def test_repeated_invocations_replace_log_handlers(tmp_path: Path, monkeypatch):
    """Verify each invocation logs to its own directory with one open log file."""
    runner = CliRunner()
    for name in ("first", "second"):
        monkeypatch.setenv("MANIFESTOMATIC_LOG_DIR", str(tmp_path / name))
        result = runner.invoke(main, ["init", str(tmp_path / f"{name}.yaml")])
        assert result.exit_code == 0, result.output

    handlers = _owned_file_handlers()
    assert len(handlers) == 1
    assert Path(handlers[0].baseFilename).parent == tmp_path / "second"
    assert (tmp_path / "first" / "manifestomatic.log").exists()
    assert (tmp_path / "second" / "manifestomatic.log").exists()

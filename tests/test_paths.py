import pytest

from manifestomatic.errors import UnknownRetrievalMethod
from manifestomatic.paths import (
    RetrievalMethod,
    cleanup_paths,
    resolve_compressed_dest,
    resolve_source,
    resolve_verification_dir,
    resolve_workspace,
)


def test_gitannex_source_appends_git_suffix():
    """Verify gitannex source behavior."""
    assert resolve_source("gitannex", "/data/src", "Obj1") == "/data/src/Obj1.git"


def test_rsync_source_keeps_uri():
    """Verify rsync source behavior."""
    assert resolve_source("rsync", "rsync://host/base", "Obj1") == "rsync://host/base/Obj1"


def test_source_ignores_trailing_slash():
    """Verify trailing separators on the base are not doubled."""
    assert resolve_source(RetrievalMethod.RSYNC, "/data/src/", "Obj1") == "/data/src/Obj1"


def test_unknown_method_names_value():
    """Verify unknown method behavior."""
    with pytest.raises(UnknownRetrievalMethod) as exc:
        resolve_source("ftp", "/data/src", "Obj1")
    assert exc.value.method == "ftp"
    assert "ftp" in str(exc.value)


def test_method_parse_is_case_insensitive():
    """Verify method tokens are matched case-insensitively."""
    assert RetrievalMethod.parse(" GitAnnex ") is RetrievalMethod.GITANNEX


@pytest.mark.parametrize("root", ["scratch/ws", "/scratch/ws", "/scratch/ws/"])
def test_workspace_is_absolute(root):
    """Verify workspace paths carry exactly one leading separator."""
    assert resolve_workspace(root, "Obj1", "abc") == "/scratch/ws/Obj1-abc"


def test_compressed_dest_nests_per_object_folder():
    """Verify compressed destination layout."""
    got = resolve_compressed_dest("out", "Obj1", "abc", "tar.gz")
    assert got == "/out/Obj1-abc/Obj1.tar.gz"


def test_verification_dir_optional():
    """Verify verification dir behavior."""
    assert resolve_verification_dir(None, "Obj1", "abc") is None
    assert resolve_verification_dir("  ", "Obj1", "abc") is None
    assert resolve_verification_dir("/verify", "Obj1", "abc") == "/verify/Obj1-abc"


def test_cleanup_paths_order():
    """Verify cleanup paths keep workspace, archive folder, verification order."""
    paths = cleanup_paths("/ws/A-1", "/out/A-1/A.tgz", "/verify/A-1")
    assert paths == ("/ws/A-1", "/out/A-1", "/verify/A-1")


def test_cleanup_paths_without_duplicates():
    """Verify coinciding workspace and archive folder appear once."""
    workspace = resolve_workspace("/shared", "A", "1")
    archive = resolve_compressed_dest("/shared", "A", "1", "tgz")
    paths = cleanup_paths(workspace, archive, None)
    assert paths == ("/shared/A-1",)
    assert len(paths) == len(set(paths))

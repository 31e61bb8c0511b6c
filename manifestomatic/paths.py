"""Path derivation for a single manifest object.

All helpers are pure string functions: the paths they return describe where
an archival job *will* work, nothing is created on disk. Results use POSIX
separators because they are consumed by remote jobs, not the local OS.

Layout for an object ``name`` with identifier ``id``::

    /<workspace>/<name>-<id>
    /<compressed_destination>/<name>-<id>/<name>.<ext>
    /<verification_destination>/<name>-<id>

The identifier keeps repeated runs over the same object apart and lets each
object's folders be removed independently after the job.
"""

from __future__ import annotations

import enum
import posixpath
from typing import Callable, Dict, Optional, Tuple

import structlog

from manifestomatic.errors import UnknownRetrievalMethod

log = structlog.get_logger()

__all__ = [
    "RetrievalMethod",
    "resolve_source",
    "resolve_workspace",
    "resolve_compressed_dest",
    "resolve_verification_dir",
    "cleanup_paths",
]


class RetrievalMethod(str, enum.Enum):
    """Supported ways of fetching an object's source."""

    GITANNEX = "gitannex"
    RSYNC = "rsync"

    @classmethod
    def parse(cls, value: "str | RetrievalMethod") -> "RetrievalMethod":
        """Return the member matching *value*.

        Raises:
            UnknownRetrievalMethod: For anything outside the enum.
        """
        if isinstance(value, cls):
            return value
        token = str(value).strip().lower()
        for member in cls:
            if member.value == token:
                return member
        raise UnknownRetrievalMethod(value, known=(m.value for m in cls))


def _gitannex_source(base: str, name: str) -> str:
    return f"{base}/{name}.git"


def _rsync_source(base: str, name: str) -> str:
    return f"{base}/{name}"


_SOURCE_RESOLVERS: Dict[RetrievalMethod, Callable[[str, str], str]] = {
    RetrievalMethod.GITANNEX: _gitannex_source,
    RetrievalMethod.RSYNC: _rsync_source,
}


def _rooted(root: str, *parts: str) -> str:
    """Join *parts* under *root* and force exactly one leading ``/``."""
    base = root.strip().strip("/")
    return "/" + "/".join([base, *parts] if base else parts)


def resolve_source(method: "str | RetrievalMethod", source_base: str, name: str) -> str:
    """Return the retrieval location of *name*.

    Args:
        method: ``gitannex`` or ``rsync`` (string or enum member).
        source_base: Base path or URI from the manifest.
        name: Object name.

    Returns:
        ``<source_base>/<name>.git`` for git-annex, ``<source_base>/<name>``
        for rsync.

    Raises:
        UnknownRetrievalMethod: When *method* is not supported.
    """
    resolver = _SOURCE_RESOLVERS[RetrievalMethod.parse(method)]
    return resolver(source_base.strip().rstrip("/"), name)


def resolve_workspace(workspace_root: str, name: str, identifier: str) -> str:
    """Return ``/<workspace_root>/<name>-<identifier>``."""
    return _rooted(workspace_root, f"{name}-{identifier}")


def resolve_compressed_dest(
    dest_root: str, name: str, identifier: str, extension: str
) -> str:
    """Return ``/<dest_root>/<name>-<identifier>/<name>.<extension>``."""
    return _rooted(dest_root, f"{name}-{identifier}", f"{name}.{extension}")


def resolve_verification_dir(
    verification_root: Optional[str], name: str, identifier: str
) -> Optional[str]:
    """Return the verification staging folder or ``None`` when not configured."""
    if verification_root is None or not verification_root.strip():
        return None
    return _rooted(verification_root, f"{name}-{identifier}")


def cleanup_paths(
    workspace: str, compressed_dest: str, verification_dir: Optional[str] = None
) -> Tuple[str, ...]:
    """Return the folders to remove once the object's job has finished.

    Order is workspace, the archive's parent folder, then the verification
    folder. Duplicates are dropped while keeping the first occurrence.
    """
    candidates = [workspace, posixpath.dirname(compressed_dest)]
    if verification_dir:
        candidates.append(verification_dir)
    unique = tuple(dict.fromkeys(candidates))
    if len(unique) != len(candidates):
        log.debug("cleanup_paths_deduplicated", paths=list(unique))
    return unique

"""
Manifest expansion – one manifest in, one record per object out.

Stages, in order:

1. **Validate** the manifest (:func:`manifestomatic.validation.validate`).
2. **Sample once** over the complete ``directive_names`` list so the
   requested proportion is applied to the true total.
3. **Expand** every name in declared order: draw an identifier, resolve the
   paths, snapshot the descriptive metadata with ``description`` set to the
   name, and attach the verification flag when a verification folder exists.

Records are collected in memory and returned only after every name has been
expanded, so a failure part-way through yields no output at all.

The descriptive-metadata template from the manifest is never mutated; each
record serialises its own deep copy.
"""

from __future__ import annotations

import copy
import json
import random
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from manifestomatic.config import Manifest, load_manifest
from manifestomatic.identifiers import default_rng, new_identifier
from manifestomatic.models import ResolvedRecord
from manifestomatic.paths import (
    RetrievalMethod,
    cleanup_paths,
    resolve_compressed_dest,
    resolve_source,
    resolve_verification_dir,
    resolve_workspace,
)
from manifestomatic.sampling import select_sample
from manifestomatic.validation import validate

log = structlog.get_logger()

__all__ = ["describe", "expand_manifest", "expand_file"]


def describe(template: Dict[str, Any], name: str) -> str:
    """Return the JSON description payload for *name*.

    Args:
        template: Descriptive metadata from the manifest. Left untouched.
        name: Object name written to the ``description`` key.

    Returns:
        Compact JSON text with keys in template order.
    """
    snapshot = copy.deepcopy(template)
    snapshot["description"] = name
    return json.dumps(snapshot, ensure_ascii=False, default=str)


def expand_manifest(
    manifest: Manifest, *, rng: Optional[random.Random] = None
) -> List[ResolvedRecord]:
    """Expand *manifest* into one :class:`ResolvedRecord` per directive name.

    Args:
        manifest: Parsed manifest.
        rng: Random source for identifiers and the verification sample.
            Inject a seeded :class:`random.Random` for reproducible output.

    Returns:
        Records in ``directive_names`` order.

    Raises:
        ManifestError: Any validation or resolution failure; no records are
            returned in that case.
    """
    directive = validate(manifest)
    rng = rng or default_rng()
    names: List[str] = list(manifest.directive_names)

    dupes = sorted(n for n, c in Counter(names).items() if c > 1)
    if dupes:
        log.warning("duplicate_directive_names", names=dupes)

    # Fail on an unsupported method before drawing anything.
    method = RetrievalMethod.parse(manifest.method)

    sample = select_sample(directive, names, rng)

    records: List[ResolvedRecord] = []
    for name in names:
        ident = new_identifier(rng)
        workspace = resolve_workspace(manifest.workspace, name, ident)
        compressed = resolve_compressed_dest(
            manifest.compressed_destination,
            name,
            ident,
            manifest.compressed_extension,
        )
        verification = resolve_verification_dir(
            manifest.verification_destination, name, ident
        )
        record = ResolvedRecord(
            name=name,
            id=name,
            source_location=resolve_source(method, manifest.source, name),
            workspace_path=workspace,
            compressed_archive_path=compressed,
            cleanup_paths=cleanup_paths(workspace, compressed, verification),
            description_payload=describe(manifest.description_values, name),
            vault=manifest.vault,
            application=manifest.application,
            method=manifest.method,
            verification_path=verification,
            verify_flag=(name in sample) if verification is not None else None,
        )
        log.debug("record_expanded", name=name, workspace=workspace)
        records.append(record)

    log.info(
        "manifest_expanded",
        records=len(records),
        sampled=sum(1 for r in records if r.verify_flag),
    )
    return records


def expand_file(
    path: str | Path, *, rng: Optional[random.Random] = None
) -> List[ResolvedRecord]:
    """Load the manifest at *path* and expand it.

    Raises:
        ManifestParseError: When the file cannot be parsed.
        ManifestError: Any failure raised by :func:`expand_manifest`.
    """
    return expand_manifest(load_manifest(path), rng=rng)

"""Completeness checks run before any record is produced.

:func:`validate` inspects a parsed :class:`~manifestomatic.config.Manifest`
and raises when expansion cannot proceed. All problems found in one pass are
reported together: a single problem is raised as its own exception type, two
or more are wrapped in :class:`ManifestValidationError`.
"""

from __future__ import annotations

from typing import Any, List

import structlog

from manifestomatic.config.schema import REQUIRED_FIELDS, Manifest
from manifestomatic.errors import (
    ConfigurationError,
    InvalidSamplingDirective,
    ManifestError,
    ManifestValidationError,
    MissingVerificationDestination,
)
from manifestomatic.sampling import SamplingDirective, parse_directive

log = structlog.get_logger()

__all__ = ["is_blank", "missing_fields", "validate"]


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None``, whitespace-only strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def missing_fields(manifest: Manifest) -> List[str]:
    """Return every required field that is absent or blank.

    A ``directive_names`` list containing a blank entry counts as blank.
    """
    missing: List[str] = []
    for name in REQUIRED_FIELDS:
        value = getattr(manifest, name)
        if is_blank(value):
            missing.append(name)
        elif name == "directive_names" and any(is_blank(v) for v in value):
            missing.append(name)
    return missing


def validate(manifest: Manifest) -> SamplingDirective:
    """Check *manifest* and return its parsed sampling directive.

    Args:
        manifest: Parsed manifest.

    Returns:
        The :class:`SamplingDirective` so callers do not parse it twice.

    Raises:
        ConfigurationError: Required fields are missing or blank.
        InvalidSamplingDirective: ``verification_sample_size`` is malformed.
        MissingVerificationDestination: A sample is requested without a
            verification destination.
        ManifestValidationError: More than one of the above applies.
    """
    problems: List[ManifestError] = []

    missing = missing_fields(manifest)
    if missing:
        problems.append(ConfigurationError(missing))

    directive = parse_directive(None)
    try:
        directive = parse_directive(manifest.verification_sample_size)
    except InvalidSamplingDirective as exc:
        problems.append(exc)

    raw = manifest.verification_sample_size
    if not is_blank(raw) and is_blank(manifest.verification_destination):
        problems.append(MissingVerificationDestination(raw))

    if problems:
        log.error("manifest_invalid", problems=[str(p) for p in problems])
        if len(problems) == 1:
            raise problems[0]
        raise ManifestValidationError(problems)

    log.debug("manifest_valid", objects=len(manifest.directive_names))
    return directive

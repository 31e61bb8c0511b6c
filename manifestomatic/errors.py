"""Exception hierarchy shared by the loader, validator, and expander.

Every failure raised while turning a manifest into inventory records derives
from :class:`ManifestError` so the CLI layer can translate them into a single
``click.ClickException`` without caring about the concrete type.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class ManifestError(RuntimeError):
    """Base class for all manifest-related failures."""

    pass


class ManifestParseError(ManifestError):
    """Raised when the manifest document cannot be read or parsed."""

    pass


class ConfigurationError(ManifestError):
    """Raised when required manifest fields are missing or blank.

    Attributes:
        fields: Names of every offending field, in manifest declaration order.
    """

    def __init__(self, fields: Iterable[str]):
        self.fields: List[str] = list(fields)
        super().__init__(
            "Manifest is missing required field(s): " + ", ".join(self.fields)
        )


class InvalidSamplingDirective(ManifestError):
    """Raised when ``verification_sample_size`` cannot be interpreted."""

    def __init__(self, directive: object, reason: Optional[str] = None):
        self.directive = directive
        msg = f"Invalid sampling directive {directive!r}"
        if reason:
            msg += f" ({reason})"
        msg += " – expected 'all', a blank value, or '<numerator>/<denominator>'"
        super().__init__(msg)


class MissingVerificationDestination(ManifestError):
    """Raised when a sample is requested but nowhere to stage it is declared."""

    def __init__(self, directive: object):
        self.directive = directive
        super().__init__(
            f"verification_sample_size is {directive!r} but "
            "verification_destination is not set"
        )


class UnknownRetrievalMethod(ManifestError):
    """Raised for a ``method`` value outside the supported set."""

    def __init__(self, method: object, known: Iterable[str] = ()):
        self.method = method
        known = sorted(known)
        msg = f"Unknown retrieval method {method!r}"
        if known:
            msg += " (supported: " + ", ".join(known) + ")"
        super().__init__(msg)


class ManifestValidationError(ManifestError):
    """Aggregate of several validation failures detected in one pass.

    Attributes:
        errors: The individual :class:`ManifestError` instances.
    """

    def __init__(self, errors: Iterable[ManifestError]):
        self.errors: List[ManifestError] = list(errors)
        lines = "\n".join(f"  - {err}" for err in self.errors)
        super().__init__(f"Manifest failed validation:\n{lines}")


__all__ = [
    "ManifestError",
    "ManifestParseError",
    "ConfigurationError",
    "InvalidSamplingDirective",
    "MissingVerificationDestination",
    "UnknownRetrievalMethod",
    "ManifestValidationError",
]

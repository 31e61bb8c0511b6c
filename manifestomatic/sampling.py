"""Verification sample selection.

A manifest may ask for a subset of its objects to be verified after
compression. ``verification_sample_size`` accepts three spellings:

* blank / absent – verify nothing;
* ``all`` (any case) – verify every object;
* ``<numerator>/<denominator>`` – verify that proportion of the objects,
  e.g. ``1/4`` or ``3 / 10``.

The sample size for a proportion is ``numerator / denominator * count``
rounded to the nearest integer with ties rounded up (``2.5`` → ``3``). The
arithmetic is done with :class:`fractions.Fraction` so ties are detected
exactly.
"""

from __future__ import annotations

import enum
import math
import random
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import FrozenSet, Optional, Sequence

import structlog

from manifestomatic.errors import InvalidSamplingDirective
from manifestomatic.identifiers import default_rng

log = structlog.get_logger()

__all__ = [
    "SampleKind",
    "SamplingDirective",
    "parse_directive",
    "sample_size",
    "select_sample",
]

_ALL_KEYWORD = "all"
_PROPORTION_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$")


class SampleKind(enum.Enum):
    NONE = "none"
    ALL = "all"
    PROPORTION = "proportion"


@dataclass(frozen=True, slots=True)
class SamplingDirective:
    """Parsed form of ``verification_sample_size``.

    Attributes:
        kind: Which of the three spellings was used.
        ratio: Requested proportion; only set for :attr:`SampleKind.PROPORTION`.
        raw: Original text, kept for messages.
    """

    kind: SampleKind
    ratio: Optional[Fraction] = None
    raw: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """``True`` when the directive asks for verification at all."""
        return self.kind is not SampleKind.NONE


def parse_directive(raw: Optional[str]) -> SamplingDirective:
    """Interpret the manifest's ``verification_sample_size`` value.

    Args:
        raw: Value from the manifest (``None`` when absent).

    Returns:
        The parsed :class:`SamplingDirective`.

    Raises:
        InvalidSamplingDirective: For unrecognised text or a zero denominator.
    """
    if raw is None or not str(raw).strip():
        return SamplingDirective(SampleKind.NONE, raw=raw)

    text = str(raw).strip()
    if text.lower() == _ALL_KEYWORD:
        return SamplingDirective(SampleKind.ALL, raw=text)

    m = _PROPORTION_RE.match(text)
    if not m:
        raise InvalidSamplingDirective(raw)

    numerator, denominator = int(m.group(1)), int(m.group(2))
    if denominator == 0:
        raise InvalidSamplingDirective(raw, "denominator is zero")
    return SamplingDirective(
        SampleKind.PROPORTION, ratio=Fraction(numerator, denominator), raw=text
    )


def sample_size(ratio: Fraction, count: int) -> int:
    """Return ``round(ratio * count)`` with halves rounded up."""
    return math.floor(ratio * count + Fraction(1, 2))


def select_sample(
    directive: "SamplingDirective | str | None",
    all_names: Sequence[str],
    rng: Optional[random.Random] = None,
) -> FrozenSet[str]:
    """Choose the names that should be verified.

    Args:
        directive: Parsed directive or the raw manifest value.
        all_names: Every directive name of the manifest, duplicates included.
            The proportion is applied to this full count.
        rng: Random source for the draw. ``None`` uses OS entropy.

    Returns:
        Frozen set of selected names (no name appears twice).

    Raises:
        InvalidSamplingDirective: When a raw *directive* cannot be parsed.
    """
    if not isinstance(directive, SamplingDirective):
        directive = parse_directive(directive)

    if directive.kind is SampleKind.NONE:
        return frozenset()

    distinct = list(dict.fromkeys(all_names))
    if directive.kind is SampleKind.ALL:
        return frozenset(distinct)

    k = sample_size(directive.ratio, len(all_names))
    if k <= 0:
        selected: FrozenSet[str] = frozenset()
    elif k >= len(distinct):
        selected = frozenset(distinct)
    else:
        selected = frozenset((rng or default_rng()).sample(distinct, k))

    log.info(
        "verification_sample",
        directive=directive.raw,
        requested=k,
        selected=len(selected),
        total=len(all_names),
    )
    return selected

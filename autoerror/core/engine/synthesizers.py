"""
Behavior synthesizers — policy list in, behavior bodies out.

Three independent consumers of the same resolved policies:

    synthesize_display      one branch per variant, no fallback
    synthesize_source       one branch per variant, cause or none
    synthesize_conversions  one entry per make_from variant

None of them re-inspects annotations; every decision was taken by the
resolver.
"""

from __future__ import annotations

import logging
import re

from autoerror.core.errors import (
    ConflictingConversion,
    IncompleteCoverage,
    MalformedInput,
)
from autoerror.core.models.generation import (
    ConversionImpl,
    DisplayBody,
    DisplayBranch,
    SourceBody,
    SourceBranch,
)
from autoerror.core.models.policy import ResolvedPolicy

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _bindings(policy: ResolvedPolicy) -> tuple[str, ...]:
    return tuple(f"f{f.index}" for f in policy.variant.fields)


def _check_coverage(kind: str, policies: list[ResolvedPolicy], branches: tuple) -> None:
    covered = {b.variant for b in branches}
    missing = [p.name for p in policies if p.name not in covered]
    if missing or len(branches) != len(policies):
        raise IncompleteCoverage(
            f"{kind} body covers {len(branches)} of {len(policies)} variants"
            + (f" (missing: {', '.join(missing)})" if missing else "")
        )


def synthesize_display(policies: list[ResolvedPolicy]) -> DisplayBody:
    """Build the formatting body.

    Raises:
        IncompleteCoverage: If any variant is left without a branch.
    """
    branches = tuple(
        DisplayBranch(
            variant=p.name,
            shape=p.variant.shape,
            bindings=_bindings(p),
            display=p.display,
        )
        for p in policies
    )
    _check_coverage("Display", policies, branches)
    return DisplayBody(branches=branches)


def synthesize_source(policies: list[ResolvedPolicy]) -> SourceBody:
    """Build the cause accessor body.

    Cause-bearing variants bind their sole field and return it; every
    other variant gets an explicit "no cause" branch.

    Raises:
        IncompleteCoverage: If any variant is left without a branch.
    """
    branches = tuple(
        SourceBranch(
            variant=p.name,
            shape=p.variant.shape,
            field_count=p.variant.field_count,
            cause="e" if p.is_cause else None,
        )
        for p in policies
    )
    _check_coverage("Source", policies, branches)
    return SourceBody(branches=branches)


def normalize_type_ref(type_ref: str) -> str:
    """Collapse whitespace so ``Vec< u8 >`` and ``Vec<u8>`` compare equal."""
    return _WHITESPACE.sub("", type_ref)


def synthesize_conversions(policies: list[ResolvedPolicy]) -> tuple[ConversionImpl, ...]:
    """Build one conversion per make_from variant.

    Raises:
        ConflictingConversion: If two variants share a source type.
    """
    by_source: dict[str, list[ResolvedPolicy]] = {}
    for p in policies:
        if not p.make_from:
            continue
        field = p.variant.sole_field
        if field is None:
            raise MalformedInput(
                "Conversion requested without a single field", variant=p.name
            )
        by_source.setdefault(normalize_type_ref(field.type_ref), []).append(p)

    for group in by_source.values():
        if len(group) > 1:
            raise ConflictingConversion(
                group[0].variant.fields[0].type_ref,
                [p.name for p in group],
            )

    conversions = tuple(
        ConversionImpl(source_type=group[0].variant.fields[0].type_ref, variant=group[0].name)
        for group in by_source.values()
    )
    logger.debug("Synthesized %d conversions", len(conversions))
    return conversions

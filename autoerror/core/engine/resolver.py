"""
Annotation resolver — explicit annotations over inferred defaults.

Precedence per variant:

    is_cause   err annotation       else: one field AND error-like type
    make_from  make_from annotation else: one field AND is_cause
    display    format_str (literal) else: "Name", "Name: {}", "Name: {} {}"...

Cause-chaining and conversion only ever act on a single field, so
forcing either on a variant without exactly one field is rejected
rather than guessed.
"""

from __future__ import annotations

import logging

from autoerror.core.errors import MalformedInput
from autoerror.core.models.declaration import Variant
from autoerror.core.models.policy import PLACEHOLDER, DisplaySpec, ResolvedPolicy
from autoerror.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

_PATH_SEPARATORS = ("::", ".")


def is_error_like(type_ref: str, settings: GeneratorSettings | None = None) -> bool:
    """Name heuristic: is this type reference an error type?

    Generic arguments are ignored (``Box<T>`` → ``Box``).  In
    "last_segment" mode ``std::io::Error`` matches ``Error`` but
    ``IoError`` and ``ErrorKind`` do not.
    """
    settings = settings or GeneratorSettings()
    base = type_ref.split("<", 1)[0].strip()
    if not base:
        return False

    if settings.error_match == "full_path":
        return base in settings.error_type_names

    segment = base
    for sep in _PATH_SEPARATORS:
        segment = segment.rsplit(sep, 1)[-1]
    return segment.strip() in settings.error_type_names


def infer_is_cause(variant: Variant, settings: GeneratorSettings | None = None) -> bool:
    field = variant.sole_field
    if field is None:
        return False
    return is_error_like(field.type_ref, settings)


def default_display(variant: Variant, settings: GeneratorSettings | None = None) -> DisplaySpec:
    """Default template: the variant name, then one placeholder per field."""
    settings = settings or GeneratorSettings()
    if not variant.fields:
        return DisplaySpec.template(variant.name)
    placeholders = settings.field_delimiter.join(PLACEHOLDER for _ in variant.fields)
    return DisplaySpec.template(f"{variant.name}: {placeholders}")


def resolve_policy(variant: Variant, settings: GeneratorSettings | None = None) -> ResolvedPolicy:
    """Resolve one variant.

    Raises:
        MalformedInput: err or make_from forced on an ineligible variant.
    """
    ann = variant.annotations

    if ann.err is not None:
        is_cause = ann.err
        if is_cause and variant.field_count != 1:
            raise MalformedInput(
                "Wrapped errors should have exactly 1 field", variant=variant.name
            )
    else:
        is_cause = infer_is_cause(variant, settings)

    if ann.make_from is not None:
        make_from = ann.make_from
        if make_from and variant.field_count != 1:
            raise MalformedInput(
                "Can only derive conversions for variants with 1 field", variant=variant.name
            )
    else:
        make_from = variant.field_count == 1 and is_cause

    if ann.format_str is not None:
        display = DisplaySpec.literal(ann.format_str)
    else:
        display = default_display(variant, settings)

    return ResolvedPolicy(
        variant=variant,
        display=display,
        is_cause=is_cause,
        make_from=make_from,
    )


def resolve_policies(
    variants: list[Variant],
    settings: GeneratorSettings | None = None,
) -> list[ResolvedPolicy]:
    """Resolve every variant, in declaration order."""
    policies = [resolve_policy(v, settings) for v in variants]
    for p in policies:
        logger.debug(
            "Resolved %s: display=%r is_cause=%s make_from=%s",
            p.name, p.display.text, p.is_cause, p.make_from,
        )
    return policies

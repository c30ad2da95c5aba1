"""
Variant descriptor extractor — raw declaration in, Variant records out.

Catches every structural problem before resolution starts:
non-enum input, bad or repeated variant names, struct-shaped variants,
and unknown, repeated or mistyped annotation keys.
"""

from __future__ import annotations

import logging

from autoerror.core.errors import MalformedInput
from autoerror.core.models.declaration import (
    Annotations,
    Field,
    TypeDeclaration,
    Variant,
    VariantDecl,
)

logger = logging.getLogger(__name__)

# Recognized annotation keys and the value type each must carry
ANNOTATION_KEYS: dict[str, type] = {
    "format_str": str,
    "make_from": bool,
    "err": bool,
}


def extract_variants(decl: TypeDeclaration) -> list[Variant]:
    """Normalize a declaration into ordered Variant records.

    Raises:
        MalformedInput: On any structural or annotation problem.
    """
    if decl.kind != "enum":
        raise MalformedInput(f"AutoError only supports enums, '{decl.name}' is a {decl.kind}")
    if not decl.name.isidentifier():
        raise MalformedInput(f"Invalid type name '{decl.name}'")

    variants: list[Variant] = []
    seen: set[str] = set()

    for raw in decl.variants:
        if not raw.name.isidentifier():
            raise MalformedInput(f"Invalid variant name '{raw.name}'")
        if raw.name in seen:
            raise MalformedInput("Duplicate variant name", variant=raw.name)
        seen.add(raw.name)

        variants.append(
            Variant(
                name=raw.name,
                shape=_resolve_shape(raw),
                fields=_extract_fields(raw),
                annotations=_extract_annotations(raw),
            )
        )

    logger.debug("Extracted %d variants from %s", len(variants), decl.name)
    return variants


def _resolve_shape(raw: VariantDecl) -> str:
    if raw.shape is None:
        return "tuple" if raw.fields else "unit"
    if raw.shape == "struct":
        raise MalformedInput("Named fields not supported", variant=raw.name)
    if raw.shape == "unit" and raw.fields:
        raise MalformedInput("Unit variant cannot carry fields", variant=raw.name)
    return raw.shape


def _extract_fields(raw: VariantDecl) -> tuple[Field, ...]:
    fields = []
    for index, type_ref in enumerate(raw.fields):
        if not type_ref.strip():
            raise MalformedInput(f"Field {index} has an empty type", variant=raw.name)
        fields.append(Field(index=index, type_ref=type_ref.strip()))
    return tuple(fields)


def _extract_annotations(raw: VariantDecl) -> Annotations:
    """Flatten attribute groups into one Annotations record.

    A key may appear once across all groups of the variant.
    """
    values: dict[str, object] = {}

    for group in raw.annotations:
        for key, value in group.items():
            expected = ANNOTATION_KEYS.get(key)
            if expected is None:
                raise MalformedInput(f"Unknown annotation key '{key}'", variant=raw.name)
            if key in values:
                raise MalformedInput(f"Duplicate annotation key '{key}'", variant=raw.name)
            if not isinstance(value, expected):
                raise MalformedInput(
                    f"Incorrect value for {key}, expected {expected.__name__}",
                    variant=raw.name,
                )
            values[key] = value

    return Annotations(**values)

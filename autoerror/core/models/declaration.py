"""
Declaration models — the sum type handed to the generator.

Two layers:

    TypeDeclaration / VariantDecl   raw input, as the upstream parser
                                    (or a YAML file) describes it
    Variant / Field / Annotations   normalized records produced by the
                                    extractor, immutable for the pass
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field as PydanticField

VariantShape = Literal["unit", "tuple", "struct"]


# ── Raw input ───────────────────────────────────────────────────


class VariantDecl(BaseModel):
    """One variant as declared.

    ``annotations`` is a list of attribute groups, one per
    ``#[auto_error(...)]`` occurrence.  Keeping the groups apart is what
    makes a key repeated across two attributes detectable.
    """

    name: str
    shape: VariantShape | None = None   # None = infer from field count
    fields: list[str] = PydanticField(default_factory=list)
    annotations: list[dict[str, Any]] = PydanticField(default_factory=list)


class TypeDeclaration(BaseModel):
    """The input type: a name and its ordered variants."""

    name: str
    kind: Literal["enum", "struct", "union"] = "enum"
    variants: list[VariantDecl] = PydanticField(default_factory=list)


# ── Normalized records ──────────────────────────────────────────


class Field(BaseModel):
    """An unnamed field: its position and an opaque type reference."""

    model_config = ConfigDict(frozen=True)

    index: int
    type_ref: str


class Annotations(BaseModel):
    """Recognized per-variant overrides; None means "infer"."""

    model_config = ConfigDict(frozen=True)

    format_str: str | None = None
    make_from: bool | None = None
    err: bool | None = None


class Variant(BaseModel):
    """A variant after extraction."""

    model_config = ConfigDict(frozen=True)

    name: str
    shape: VariantShape
    fields: tuple[Field, ...] = ()
    annotations: Annotations = PydanticField(default_factory=Annotations)

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def sole_field(self) -> Field | None:
        """The single field, or None unless there is exactly one."""
        if len(self.fields) != 1:
            return None
        return self.fields[0]

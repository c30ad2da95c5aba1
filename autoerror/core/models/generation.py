"""
Synthesized behavior bodies and the generation result.

These are the hand-off to a code-emission facility: decision tables and
template strings, no host-language syntax.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from autoerror.core.models.declaration import VariantShape
from autoerror.core.models.policy import DisplaySpec, ResolvedPolicy


class DisplayBranch(BaseModel):
    """``Self::Name(f0, f1, ...) => <write display>``"""

    model_config = ConfigDict(frozen=True)

    variant: str
    shape: VariantShape
    bindings: tuple[str, ...] = ()
    display: DisplaySpec


class DisplayBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    branches: tuple[DisplayBranch, ...] = ()


class SourceBranch(BaseModel):
    """``Self::Name(..) => Some(binding)`` when ``cause`` is set, else None."""

    model_config = ConfigDict(frozen=True)

    variant: str
    shape: VariantShape
    field_count: int = 0
    cause: str | None = None


class SourceBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    branches: tuple[SourceBranch, ...] = ()


class ConversionImpl(BaseModel):
    """A wrapping conversion ``source_type -> Type::variant(value)``."""

    model_config = ConfigDict(frozen=True)

    source_type: str
    variant: str


class GenerationResult(BaseModel):
    """Everything one generation pass produces for one type."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    policies: tuple[ResolvedPolicy, ...] = ()
    display: DisplayBody
    source: SourceBody
    conversions: tuple[ConversionImpl, ...] = ()

    def policy(self, variant: str) -> ResolvedPolicy | None:
        """Look up the policy of a variant by name."""
        for p in self.policies:
            if p.name == variant:
                return p
        return None

    def to_dict(self) -> dict:
        return {
            "type": self.type_name,
            "variants": [p.to_dict() for p in self.policies],
            "conversions": [c.model_dump() for c in self.conversions],
        }

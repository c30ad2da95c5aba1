"""
Resolved policy — the per-variant decision record.

Built once by the resolver, before any synthesizer runs, and never
mutated afterwards.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from autoerror.core.models.declaration import Variant

PLACEHOLDER = "{}"


class DisplaySpec(BaseModel):
    """What the Display body writes for one variant.

    kind="literal":  ``text`` is written verbatim, fields are ignored.
    kind="template": ``text`` holds one positional ``{}`` per field,
                     filled in field order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal", "template"]
    text: str

    @classmethod
    def literal(cls, text: str) -> DisplaySpec:
        return cls(kind="literal", text=text)

    @classmethod
    def template(cls, text: str) -> DisplaySpec:
        return cls(kind="template", text=text)

    @property
    def interpolates(self) -> bool:
        return self.kind == "template"

    def render(self, values: list[str] | tuple[str, ...] = ()) -> str:
        """Produce the display text for concrete field values."""
        if not self.interpolates:
            return self.text
        parts = self.text.split(PLACEHOLDER)
        if len(parts) - 1 != len(values):
            raise ValueError(
                f"Template '{self.text}' expects {len(parts) - 1} values, got {len(values)}"
            )
        out = [parts[0]]
        for value, tail in zip(values, parts[1:]):
            out.append(str(value))
            out.append(tail)
        return "".join(out)


class ResolvedPolicy(BaseModel):
    """Fully resolved behavior of one variant."""

    model_config = ConfigDict(frozen=True)

    variant: Variant
    display: DisplaySpec
    is_cause: bool = False
    make_from: bool = False

    @property
    def name(self) -> str:
        return self.variant.name

    def to_dict(self) -> dict:
        return {
            "variant": self.variant.name,
            "fields": [f.type_ref for f in self.variant.fields],
            "display": {"kind": self.display.kind, "text": self.display.text},
            "is_cause": self.is_cause,
            "make_from": self.make_from,
        }

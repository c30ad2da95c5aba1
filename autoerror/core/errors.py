"""
Generation errors — every failure aborts the whole pass.

Raised by the engine at the earliest stage that can observe the problem:

    MalformedInput          extractor / resolver (structure, annotations)
    IncompleteCoverage      synthesizers (branch count != variant count)
    ConflictingConversion   conversion synthesizer (shared source type)
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generation-time failures."""

    def __init__(self, message: str, variant: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.variant = variant

    def __str__(self) -> str:
        if self.variant:
            return f"{self.variant}: {self.message}"
        return self.message


class MalformedInput(GenerationError):
    """The declaration or one of its annotations is not acceptable."""


class IncompleteCoverage(GenerationError):
    """A synthesizer produced fewer branches than the type has variants."""


class ConflictingConversion(GenerationError):
    """Two or more variants would convert from the identical source type."""

    def __init__(self, source_type: str, variants: list[str]) -> None:
        super().__init__(
            f"Conflicting conversions from '{source_type}' "
            f"into variants {', '.join(variants)}"
        )
        self.source_type = source_type
        self.variants = variants

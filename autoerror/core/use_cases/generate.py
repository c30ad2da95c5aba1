"""
Generate use case — declaration file in, rendered source out.

Ties together settings loading, declaration loading, the generation
engine and the Rust generator.  A failure in any type aborts the whole
file: no partial output is ever rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from autoerror.core.config.declaration_loader import load_declarations
from autoerror.core.config.loader import ConfigError, load_settings
from autoerror.core.engine.orchestrator import generate
from autoerror.core.errors import GenerationError
from autoerror.core.models.generation import GenerationResult
from autoerror.core.models.template import GeneratedFile
from autoerror.core.services.generators.rust import generate_rust

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    declaration_path: Path | None = None
    results: list[GenerationResult] = field(default_factory=list)
    generated: GeneratedFile | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error:
            return {"ok": False, "error": self.error, "kind": self.error_kind}
        return {
            "ok": True,
            "declaration": str(self.declaration_path) if self.declaration_path else None,
            "types": [r.to_dict() for r in self.results],
            "file": self.generated.model_dump() if self.generated else None,
        }


def run_generate(
    declaration_path: Path,
    settings_path: Path | None = None,
    output_path: str | None = None,
    overwrite: bool = False,
) -> GenerateResult:
    """Generate Display/Error/From impls for every type in a file.

    Args:
        declaration_path: YAML file with one or more type declarations.
        settings_path: Optional explicit autoerror.yml.
        output_path: Path recorded on the GeneratedFile.
        overwrite: Whether the file may replace an existing one.

    Returns:
        GenerateResult with per-type results and the rendered file.
    """
    result = GenerateResult(declaration_path=declaration_path)

    try:
        settings = load_settings(settings_path)
        decls = load_declarations(declaration_path)
    except ConfigError as e:
        result.error = str(e)
        result.error_kind = "ConfigError"
        return result

    results: list[GenerationResult] = []
    for decl in decls:
        try:
            results.append(generate(decl, settings))
        except GenerationError as e:
            logger.info("Generation failed for %s: %s", decl.name, e)
            result.error = f"{decl.name}: {e}"
            result.error_kind = type(e).__name__
            return result

    result.results = results
    result.generated = generate_rust(
        results,
        path=output_path or f"{declaration_path.stem}.rs",
        overwrite=overwrite,
    )
    return result

"""
Generation orchestrator — one declaration, one pass.

Flow:
    declaration → extract variants → resolve policies →
        {display body, source body, conversions} → GenerationResult

Strictly linear.  The three synthesizers read the same policy list and
never feed each other.  Any GenerationError propagates out untouched, so
a failed pass never yields a partial result.
"""

from __future__ import annotations

import logging

from autoerror.core.engine.extractor import extract_variants
from autoerror.core.engine.resolver import resolve_policies
from autoerror.core.engine.synthesizers import (
    synthesize_conversions,
    synthesize_display,
    synthesize_source,
)
from autoerror.core.models.declaration import TypeDeclaration
from autoerror.core.models.generation import GenerationResult
from autoerror.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)


def generate(
    decl: TypeDeclaration,
    settings: GeneratorSettings | None = None,
) -> GenerationResult:
    """Run a full generation pass for one type.

    Args:
        decl: The sum type to derive behaviors for.
        settings: Inference settings (default: GeneratorSettings()).

    Returns:
        GenerationResult with policies and the three behavior bodies.

    Raises:
        GenerationError: MalformedInput, IncompleteCoverage or
            ConflictingConversion, whichever stage fails first.
    """
    settings = settings or GeneratorSettings()

    variants = extract_variants(decl)
    policies = resolve_policies(variants, settings)

    display = synthesize_display(policies)
    source = synthesize_source(policies)
    conversions = synthesize_conversions(policies)

    result = GenerationResult(
        type_name=decl.name,
        policies=tuple(policies),
        display=display,
        source=source,
        conversions=conversions,
    )
    logger.info(
        "Generated %s: %d variants, %d causes, %d conversions",
        decl.name,
        len(policies),
        sum(1 for p in policies if p.is_cause),
        len(conversions),
    )
    return result

"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from autoerror.core.models import TypeDeclaration, Variant, ResolvedPolicy
"""

from autoerror.core.models.declaration import (
    Annotations,
    Field,
    TypeDeclaration,
    Variant,
    VariantDecl,
)
from autoerror.core.models.generation import (
    ConversionImpl,
    DisplayBody,
    DisplayBranch,
    GenerationResult,
    SourceBody,
    SourceBranch,
)
from autoerror.core.models.policy import DisplaySpec, ResolvedPolicy
from autoerror.core.models.settings import GeneratorSettings
from autoerror.core.models.template import GeneratedFile

__all__ = [
    # declaration.py
    "Annotations",
    "Field",
    "TypeDeclaration",
    "Variant",
    "VariantDecl",
    # generation.py
    "ConversionImpl",
    "DisplayBody",
    "DisplayBranch",
    "GenerationResult",
    "SourceBody",
    "SourceBranch",
    # policy.py
    "DisplaySpec",
    "ResolvedPolicy",
    # settings.py
    "GeneratorSettings",
    # template.py
    "GeneratedFile",
]

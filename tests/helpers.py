"""
Test helpers — compact builders for declarations.
"""

from autoerror.core.models import VariantDecl


def variant(name: str, *fields: str, shape: str | None = None, **annotations) -> VariantDecl:
    """Build a VariantDecl; keyword arguments become one annotation group."""
    return VariantDecl(
        name=name,
        shape=shape,
        fields=list(fields),
        annotations=[annotations] if annotations else [],
    )

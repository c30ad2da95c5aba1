"""
Declaration loader — reads type declarations from YAML files.

A declaration file holds either a single type::

    name: Error
    variants:
      - name: NotFound
        annotations: {format_str: "Document not found"}
      - name: IO
        fields: ["std::io::Error"]

or several under a ``types:`` key.  ``annotations`` may be one mapping
or a list of mappings (one per attribute occurrence).
"""

from __future__ import annotations

import logging
from pathlib import Path

from autoerror.core.config.loader import ConfigError, read_yaml_mapping
from autoerror.core.models.declaration import TypeDeclaration

logger = logging.getLogger(__name__)


def parse_declaration(data: dict) -> TypeDeclaration:
    """Validate one declaration mapping.

    Raises:
        ConfigError: If the mapping does not match the schema.
    """
    data = dict(data)
    raw_variants = data.get("variants") or []
    if not isinstance(raw_variants, list):
        raise ConfigError(
            f"'variants' of type '{data.get('name', '?')}' must be a list, "
            f"got {type(raw_variants).__name__}"
        )

    variants = []
    for raw in raw_variants:
        if isinstance(raw, str):
            raw = {"name": raw}
        elif isinstance(raw, dict):
            raw = dict(raw)
            annotations = raw.get("annotations")
            if isinstance(annotations, dict):
                raw["annotations"] = [annotations]
            elif annotations is None:
                raw.pop("annotations", None)
        variants.append(raw)
    data["variants"] = variants

    try:
        return TypeDeclaration.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid type declaration: {e}") from e


def load_declarations(path: Path) -> list[TypeDeclaration]:
    """Load every type declaration in a YAML file.

    Args:
        path: Path to the declaration file.

    Returns:
        Declarations in file order.

    Raises:
        ConfigError: If the file is missing, malformed, or empty.
    """
    data = read_yaml_mapping(path)

    if "types" in data:
        entries = data["types"]
        if not isinstance(entries, list):
            raise ConfigError(f"'types' in {path} must be a list")
    elif data:
        entries = [data]
    else:
        entries = []

    if not entries:
        raise ConfigError(f"No type declarations in {path}")

    decls = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError(f"Expected a mapping per type in {path}, got {type(entry).__name__}")
        decls.append(parse_declaration(entry))

    logger.info("Loaded %d declarations from %s", len(decls), path)
    return decls

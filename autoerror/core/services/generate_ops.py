"""
Generate operations — write rendered files to disk.
"""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

from autoerror.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def write_generated_file(root: Path, generated: GeneratedFile) -> dict:
    """Write a GeneratedFile under ``root``.

    Args:
        root: Directory the file path is relative to.
        generated: The rendered file.

    Returns:
        {"ok": True, "path": "...", "written": True, "changed": bool}
        or {"error": "...", "path": "...", "written": False}
    """
    rel_path = generated.path
    if not rel_path or not generated.content:
        return {"error": "Missing path or content", "path": rel_path, "written": False}

    target = root / rel_path

    if target.exists() and not generated.overwrite:
        return {
            "error": f"File already exists: {rel_path} (use --overwrite to replace)",
            "path": rel_path,
            "written": False,
        }

    old_content = ""
    if target.exists():
        try:
            old_content = target.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            logger.debug("Could not read previous content of %s", target)

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(generated.content, encoding="utf-8")
    logger.info("Wrote generated file: %s", target)

    result: dict = {
        "ok": True,
        "path": rel_path,
        "written": True,
        "changed": old_content != generated.content,
    }

    if old_content and result["changed"]:
        diff_lines = list(difflib.unified_diff(
            old_content.splitlines(),
            generated.content.splitlines(),
            fromfile=f"a/{rel_path}",
            tofile=f"b/{rel_path}",
            lineterm="",
        ))
        result["lines_added"] = sum(
            1 for l in diff_lines if l.startswith("+") and not l.startswith("+++")
        )
        result["lines_removed"] = sum(
            1 for l in diff_lines if l.startswith("-") and not l.startswith("---")
        )

    return result

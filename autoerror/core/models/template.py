"""
Generated file model — what the emitters hand to the writer.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A rendered source file.

    Attributes:
        path:      Output path, relative to the chosen root.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Which type the file was generated for.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""

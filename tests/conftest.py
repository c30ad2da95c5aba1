"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from autoerror.core.models import TypeDeclaration

from helpers import variant


@pytest.fixture
def document_error() -> TypeDeclaration:
    """NotFound / IO(IoError) / Other(String) — the canonical example."""
    return TypeDeclaration(
        name="Error",
        variants=[
            variant("NotFound", format_str="Document not found"),
            variant("IO", "IoError"),
            variant("Other", "String", make_from=True),
        ],
    )


@pytest.fixture
def mixed_error() -> TypeDeclaration:
    """One variant per inference path."""
    return TypeDeclaration(
        name="Error",
        variants=[
            variant("A", "e1::Error"),
            variant("B", "e2::Error", err=False, make_from=False, format_str="Error {}"),
            variant("C", "e3::NotError", err=True, make_from=True),
            variant("D", "e4::NotError", make_from=True),
            variant("E", "String", "isize"),
            variant("F", shape="tuple"),
        ],
    )


@pytest.fixture
def declaration_file(tmp_path: Path) -> Path:
    """A declaration YAML file for the canonical example."""
    content = textwrap.dedent("""\
        name: Error
        variants:
          - name: NotFound
            annotations:
              format_str: "Document not found"
          - name: IO
            fields:
              - IoError
          - name: Other
            fields:
              - String
            annotations:
              make_from: true
    """)
    path = tmp_path / "errors.yml"
    path.write_text(content)
    return path

"""
Rust generator — render a GenerationResult as trait implementations.

Produces, in this order:

    impl From<T> for Type        one per conversion
    impl Display for Type        exhaustive match, one arm per variant
    impl std::error::Error       exhaustive match, cause or None

Output depends only on the result, so identical input renders
byte-identical text.
"""

from __future__ import annotations

from autoerror.core.models.generation import (
    ConversionImpl,
    DisplayBranch,
    GenerationResult,
    SourceBranch,
)
from autoerror.core.models.policy import PLACEHOLDER
from autoerror.core.models.template import GeneratedFile

_INDENT = "    "


# ── Literals ────────────────────────────────────────────────────


def rust_string(text: str) -> str:
    """Quote text as a Rust string literal."""
    out = []
    for ch in text:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def _format_string(template: str) -> str:
    """Quote a ``{}`` template as a format string, escaping literal braces."""
    pieces = [p.replace("{", "{{").replace("}", "}}") for p in template.split(PLACEHOLDER)]
    return rust_string(PLACEHOLDER.join(pieces))


def _pattern(variant: str, shape: str, bindings: tuple[str, ...] | None) -> str:
    """Match pattern for a variant; ``bindings=None`` ignores all fields."""
    if shape == "unit":
        return f"Self::{variant}"
    if bindings is None:
        return f"Self::{variant}(..)"
    return f"Self::{variant}({', '.join(bindings)})"


# ── Arms ────────────────────────────────────────────────────────


def _display_arm(branch: DisplayBranch) -> str:
    spec = branch.display
    if spec.interpolates and branch.bindings:
        pattern = _pattern(branch.variant, branch.shape, branch.bindings)
        args = "".join(f", {b}" for b in branch.bindings)
        return f"{pattern} => write!(f, {_format_string(spec.text)}{args}),"

    pattern = _pattern(branch.variant, branch.shape, None if branch.bindings else ())
    return f"{pattern} => f.write_str({rust_string(spec.text)}),"


def _source_arm(branch: SourceBranch) -> str:
    if branch.cause:
        return f"Self::{branch.variant}({branch.cause}) => Some({branch.cause}),"
    pattern = _pattern(branch.variant, branch.shape, None if branch.field_count else ())
    return f"{pattern} => None,"


def _match_block(arms: list[str], depth: int) -> list[str]:
    pad = _INDENT * depth
    if not arms:
        return [f"{pad}match *self {{}}"]
    lines = [f"{pad}match self {{"]
    lines.extend(f"{pad}{_INDENT}{arm}" for arm in arms)
    lines.append(f"{pad}}}")
    return lines


# ── Impl blocks ─────────────────────────────────────────────────


def _from_impl(type_name: str, conv: ConversionImpl) -> str:
    return (
        f"impl ::std::convert::From<{conv.source_type}> for {type_name} {{\n"
        f"    fn from(e: {conv.source_type}) -> Self {{\n"
        f"        Self::{conv.variant}(e)\n"
        f"    }}\n"
        f"}}\n"
    )


def _display_impl(result: GenerationResult) -> str:
    arms = [_display_arm(b) for b in result.display.branches]
    lines = [
        f"impl ::std::fmt::Display for {result.type_name} {{",
        "    fn fmt(&self, f: &mut ::std::fmt::Formatter<'_>) -> ::std::fmt::Result {",
        *_match_block(arms, 2),
        "    }",
        "}",
    ]
    return "\n".join(lines) + "\n"


def _error_impl(result: GenerationResult) -> str:
    arms = [_source_arm(b) for b in result.source.branches]
    lines = [
        f"impl ::std::error::Error for {result.type_name} {{",
        "    fn source(&self) -> ::std::option::Option<&(dyn ::std::error::Error + 'static)> {",
        *_match_block(arms, 2),
        "    }",
        "}",
    ]
    return "\n".join(lines) + "\n"


def render_rust(result: GenerationResult) -> str:
    """Render all generated impls for one type."""
    blocks = [_from_impl(result.type_name, c) for c in result.conversions]
    blocks.append(_display_impl(result))
    blocks.append(_error_impl(result))
    return "\n".join(blocks)


def generate_rust(
    results: list[GenerationResult],
    path: str = "auto_error.rs",
    overwrite: bool = False,
) -> GeneratedFile:
    """Render several types into one file.

    Returns:
        GeneratedFile with the concatenated impls.
    """
    header = "// @generated by autoerror. Do not edit.\n"
    body = "\n".join(render_rust(r) for r in results)
    return GeneratedFile(
        path=path,
        content=header + "\n" + body,
        overwrite=overwrite,
        reason=", ".join(r.type_name for r in results),
    )

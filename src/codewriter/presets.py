"""Pre-defined WriterOptions for common languages and language families.

Each preset is a factory returning a fresh WriterOptions. Keyword
overrides are applied on top, so presets combine with any other option:

    >>> from codewriter import CodeWriter
    >>> from codewriter.presets import csharp
    >>> writer = CodeWriter(csharp(indent_size=2, newline="\\n"))
    >>> with writer.block("class Program"):
    ...     writer.comment("entry point")

The writer core knows nothing about languages; everything here is built
from the public CodeWriter methods.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from codewriter.config import DocCommentFn, StartBlockFn, WriterOptions
from codewriter.errors import ConfigurationError

if TYPE_CHECKING:
    from codewriter.writer import CodeWriter


class BraceLayout(Enum):
    """Placement of the opening brace in C-family blocks."""

    END_OF_LINE = "end_of_line"  # if (x) {
    END_OF_LINE_NO_SPACE = "end_of_line_no_space"  # if (x){
    NEXT_LINE = "next_line"  # if (x)\n{


# =============================================================================
# C family
# =============================================================================


def _slash_comment(writer: CodeWriter, comment: str) -> None:
    writer.line(f"// {comment}")


def _block_comment(writer: CodeWriter, comments: list[str]) -> None:
    writer.line("/*").repeat(comments, lambda w, c, i, a: w.line(f"   {c}")).line(" */")


def _brace_start_block(layout: BraceLayout) -> StartBlockFn:
    def start_block(writer: CodeWriter, code: str | None) -> None:
        if layout is BraceLayout.NEXT_LINE:
            writer.line_if(bool(code), code or "").line("{")
        else:
            (
                writer.inline(code or "", bool(code))
                .inline(" ", bool(code) and layout is BraceLayout.END_OF_LINE)
                .inline("{")
                .done()
            )
        writer.indent()

    return start_block


def _brace_end_block(writer: CodeWriter, code: str | None) -> None:
    writer.unindent(code or "}")


def _cpp_doc_comment(writer: CodeWriter, comments: list[str]) -> None:
    writer.line("/**").repeat(comments, lambda w, c, i, a: w.line(f"    {c}")).line("*/")


def _jsdoc_comment(writer: CodeWriter, comments: list[str]) -> None:
    writer.line("/**").repeat(comments, lambda w, c, i, a: w.line(f" * {c}")).line(" */")


def _xmldoc_comment(writer: CodeWriter, comments: list[str]) -> None:
    (
        writer.line("/// <summary>")
        .repeat(comments, lambda w, c, i, a: w.line(f"/// {c}"))
        .line("/// </summary>")
    )


def c_language_family(
    brace_layout: BraceLayout | str = BraceLayout.END_OF_LINE, **overrides: Any
) -> WriterOptions:
    """Options shared by C, C++, C#, Java, JavaScript and TypeScript.

    Args:
        brace_layout: Where the opening brace of a block goes
        **overrides: Any other WriterOptions field

    Returns:
        WriterOptions with comment and block formatters, no doc comments
    """
    try:
        layout = BraceLayout(brace_layout)
    except ValueError:
        raise ConfigurationError(
            f"unknown brace layout {brace_layout!r}", "brace_layout"
        ) from None

    options = WriterOptions(
        single_line_comment=_slash_comment,
        multi_line_comment=_block_comment,
        start_block=_brace_start_block(layout),
        end_block=_brace_end_block,
    )
    return options.replace(**overrides) if overrides else options


def _with_doc(doc: DocCommentFn, layout: BraceLayout, overrides: dict[str, Any]) -> WriterOptions:
    return c_language_family(layout, **{"doc_comment": doc, **overrides})


def c(**overrides: Any) -> WriterOptions:
    """Options for C."""
    return _with_doc(_cpp_doc_comment, BraceLayout.END_OF_LINE, overrides)


def cpp(**overrides: Any) -> WriterOptions:
    """Options for C++."""
    return _with_doc(_cpp_doc_comment, BraceLayout.END_OF_LINE, overrides)


def csharp(**overrides: Any) -> WriterOptions:
    """Options for C#: braces on their own line, XML doc comments."""
    return _with_doc(_xmldoc_comment, BraceLayout.NEXT_LINE, overrides)


def java(**overrides: Any) -> WriterOptions:
    """Options for Java."""
    return _with_doc(_jsdoc_comment, BraceLayout.END_OF_LINE, overrides)


def javascript(**overrides: Any) -> WriterOptions:
    """Options for JavaScript."""
    return _with_doc(_jsdoc_comment, BraceLayout.END_OF_LINE, overrides)


def typescript(**overrides: Any) -> WriterOptions:
    """Options for TypeScript."""
    return _with_doc(_jsdoc_comment, BraceLayout.END_OF_LINE, overrides)


# =============================================================================
# Python
# =============================================================================


def _hash_comment(writer: CodeWriter, comment: str) -> None:
    writer.line(f"# {comment}")


def _docstring(writer: CodeWriter, comments: list[str]) -> None:
    # One line: """ text """. Several: """ first / ... / closing """.
    # Empty entries after the first are blank lines.
    def doc_line(w: CodeWriter, comment: str, i: int, arr: list[str]) -> None:
        if not comment and i > 0:
            w.blank()
            return
        w.inline('""" ', i == 0).inline(comment).inline(' """', len(arr) == 1).done()

    writer.repeat(comments, doc_line).line_if(len(comments) > 1, '"""')


def _colon_start_block(writer: CodeWriter, code: str | None) -> None:
    if code:
        writer.line(code)
    writer.indent()


def _dedent_end_block(writer: CodeWriter, code: str | None) -> None:
    writer.unindent()
    if code:
        writer.line(code)


def python(**overrides: Any) -> WriterOptions:
    """Options for Python: hash comments, docstrings, indentation blocks.

    No multi-line formatter is set, so multi_line_comment() writes one
    hash comment per line.
    """
    options = WriterOptions(
        single_line_comment=_hash_comment,
        doc_comment=_docstring,
        start_block=_colon_start_block,
        end_block=_dedent_end_block,
    )
    return options.replace(**overrides) if overrides else options


# =============================================================================
# Registry
# =============================================================================

PRESETS: dict[str, Callable[..., WriterOptions]] = {
    "c": c,
    "cpp": cpp,
    "csharp": csharp,
    "java": java,
    "javascript": javascript,
    "python": python,
    "typescript": typescript,
}


def get_preset(name: str, **overrides: Any) -> WriterOptions:
    """Look up a preset by name.

    Raises:
        ConfigurationError: If no preset has that name
    """
    factory = PRESETS.get(name)
    if factory is None:
        available = ", ".join(sorted(PRESETS))
        raise ConfigurationError(f"unknown preset {name!r} (available: {available})")
    return factory(**overrides)


__all__ = [
    "PRESETS",
    "BraceLayout",
    "c",
    "c_language_family",
    "cpp",
    "csharp",
    "get_preset",
    "java",
    "javascript",
    "python",
    "typescript",
]

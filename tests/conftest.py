"""Shared fixtures for codewriter tests."""

from __future__ import annotations

import pytest

from codewriter import CodeWriter, WriterOptions


def slash_comment(cw: CodeWriter, comment: str) -> None:
    cw.line(f"// {comment}")


def star_comment(cw: CodeWriter, comments: list[str]) -> None:
    cw.line("/*").repeat(comments, lambda w, c, i, a: w.line(f" * {c}")).line(" */")


def open_brace(cw: CodeWriter, code: str | None) -> None:
    if code:
        cw.line(code)
    cw.line("{").indent()


def close_brace(cw: CodeWriter, code: str | None) -> None:
    cw.unindent("}")


@pytest.fixture
def writer() -> CodeWriter:
    """Writer with default formatting and a fixed newline."""
    return CodeWriter(WriterOptions(newline="\n"))


@pytest.fixture
def c_writer() -> CodeWriter:
    """Writer with hand-written C-style formatters."""
    return CodeWriter(
        WriterOptions(
            newline="\n",
            single_line_comment=slash_comment,
            multi_line_comment=star_comment,
            start_block=open_brace,
            end_block=close_brace,
        )
    )

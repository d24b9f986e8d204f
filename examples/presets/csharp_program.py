"""C# console program skeleton using hand-written formatters."""

from codewriter import CodeWriter, WriterOptions


def slash_comment(cw: CodeWriter, comment: str) -> None:
    cw.line(f"// {comment}")


def star_comment(cw: CodeWriter, comments: list[str]) -> None:
    cw.line("/*").repeat(comments, lambda w, c, i, a: w.line(f" * {c}")).line(" */")


def open_brace(cw: CodeWriter, code: str | None) -> None:
    if code:
        cw.line(code)
    cw.line("{")
    cw.indent()


def close_brace(cw: CodeWriter, code: str | None) -> None:
    cw.unindent("}")


options = WriterOptions(
    indent_size=4,
    single_line_comment=slash_comment,
    multi_line_comment=star_comment,
    start_block=open_brace,
    end_block=close_brace,
)

writer = CodeWriter(options)
(
    writer.multi_line_comment(
        "Automatically generated using codewriter",
        "All rights reserved",
    )
    .blank()
    .line("using System;")
    .blank()
    .start_block("namespace ConsoleProgram")
    .start_block("internal static class Program")
    .start_block("private static void Main(string[] args)")
    .comment("Your code goes here")
    .end_block()
    .end_block()
    .end_block()
)

print(writer.to_text())

"""Conditional scopes, inline assembly and func() with the TypeScript preset."""

from codewriter import CodeWriter, presets

EXPORT = True
methods = ["start", "stop"]


def write_methods(cw: CodeWriter, names: list[str]) -> None:
    for name in names:
        cw.start_block(f"{name}(): void").comment(f"{name} the service").end_block()


writer = CodeWriter(presets.typescript(indent_size=2, newline="\n"))
writer.doc_comment("Service wrapper.")
writer.inline("export ", EXPORT).inline("class Service").inline(" {").done().indent()
writer.if_(len(methods) > 0).func(write_methods, methods).else_().comment("no methods").end_if()
writer.unindent("}")

print(writer.to_text())

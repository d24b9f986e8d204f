"""Generate a Python dataclass module with the python preset."""

from codewriter import CodeWriter, presets

fields = {"name": "str", "age": "int", "email": "str | None"}

writer = CodeWriter(presets.python(newline="\n"))
writer.doc_comment("Generated models.")
writer.blank().line("from dataclasses import dataclass").blank().blank()
writer.line("@dataclass")
with writer.block("class Person:"):
    writer.doc_comment("A person record.", "", "Fields are generated from a schema.")
    writer.iterate(fields, lambda w, type_, name, i: w.line(f"{name}: {type_}"))

print(writer.to_text())

"""Write three lines with one indent, no options needed."""

from codewriter import CodeWriter

writer = CodeWriter()
writer.line("A").indent().line("B").unindent().line("C")
print(writer.to_text())

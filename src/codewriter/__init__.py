"""
codewriter: Fluent line-oriented code writer for Python

Accumulates lines of generated source, tracks indentation, and delegates
language-specific formatting (comments, block delimiters) to strategy
callbacks. Zero runtime dependencies.

Quick Start:
    >>> from codewriter import CodeWriter
    >>> writer = CodeWriter({"newline": "\\n"})
    >>> print(writer.line("A").indent().line("B").unindent().line("C"))
    A
        B
    C

Language Presets:
    >>> from codewriter import CodeWriter, presets
    >>> writer = CodeWriter(presets.csharp(newline="\\n"))
    >>> writer.start_block("namespace App").comment("Hello").end_block().to_text()
    'namespace App\\n{\\n    // Hello\\n}'

Installation:
    pip install codewriter
"""

from codewriter import presets
from codewriter.config import (
    DEFAULT_OPTIONS,
    DocCommentFn,
    EndBlockFn,
    IndentStyle,
    InitialCode,
    MultiLineCommentFn,
    SingleLineCommentFn,
    StartBlockFn,
    WriterOptions,
)
from codewriter.errors import CodeWriterError, ConfigurationError, UsageError
from codewriter.presets import BraceLayout, get_preset
from codewriter.writer import CodeWriter

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "BraceLayout",
    "CodeWriter",
    "CodeWriterError",
    "ConfigurationError",
    "DocCommentFn",
    "EndBlockFn",
    "IndentStyle",
    "InitialCode",
    "MultiLineCommentFn",
    "SingleLineCommentFn",
    "StartBlockFn",
    "UsageError",
    "WriterOptions",
    "get_preset",
    "presets",
    "__version__",
]

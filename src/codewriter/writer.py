"""Fluent line-oriented code writer.

CodeWriter accumulates lines of output, tracks an indentation cursor and
hands language-specific formatting (comments, block delimiters) to the
strategy callbacks configured in WriterOptions. Every mutating method
returns the writer so calls can be chained.

Conditional Scope:
    if_(c) gates line(), blank() and done() until end_if(). else_()
    inverts the gate. Scopes do not nest:

    Unconditional --if_(True)--> ConditionTrue <--else_()--> ConditionFalse
    ConditionTrue/ConditionFalse --end_if()--> Unconditional

Thread Safety:
    A CodeWriter is plain mutable state with no locking. Use one writer
    per call stack.

Example:
    >>> from codewriter import CodeWriter
    >>> writer = CodeWriter({"newline": "\\n"})
    >>> writer.line("A").indent().line("B").unindent().line("C").to_text()
    'A\\n    B\\nC'

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from codewriter.config import DEFAULT_OPTIONS, IndentStyle, WriterOptions
from codewriter.errors import ConfigurationError, UsageError
from codewriter.stringbuilder import StringBuilder
from codewriter.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
V = TypeVar("V")


class CodeWriter:
    """Stateful accumulator of output lines with a fluent API.

    Args:
        options: WriterOptions, a dict accepted by WriterOptions.from_dict,
            or None for defaults.

    Raises:
        ConfigurationError: If options is a dict with unknown keys or
            invalid values.

    """

    __slots__ = ("_code", "_condition", "_current_indent", "_current_line", "_options")

    def __init__(self, options: WriterOptions | Mapping[str, Any] | None = None) -> None:
        if options is None:
            options = DEFAULT_OPTIONS
        elif not isinstance(options, WriterOptions):
            options = WriterOptions.from_dict(options)
        self._options = options

        self._code: list[str] = _seed_lines(options.initial_code)
        self._current_line = StringBuilder()
        self._current_indent = 0
        self._condition: bool | None = None

        logger.debug(
            "CodeWriter created: indent_size=%d style=%s seed_lines=%d",
            options.indent_size,
            options.indent_style.value,
            len(self._code),
        )

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def options(self) -> WriterOptions:
        return self._options

    @property
    def indent_level(self) -> int:
        """Current indentation, in spaces."""
        return self._current_indent

    @property
    def condition(self) -> bool | None:
        """Active condition, or None outside a conditional scope."""
        return self._condition

    @property
    def lines(self) -> tuple[str, ...]:
        """Snapshot of the committed lines."""
        return tuple(self._code)

    @property
    def pending(self) -> str:
        """Text accumulated by inline() and not yet committed by done()."""
        return self._current_line.build()

    # =========================================================================
    # Indentation
    # =========================================================================

    def indent(self, code: str | None = None) -> CodeWriter:
        """Increase the indent level, then write code if given."""
        self._current_indent += self._options.indent_size
        if code:
            self.line(code)
        return self

    def unindent(self, code: str | None = None) -> CodeWriter:
        """Decrease the indent level, then write code if given.

        The level never drops below zero.
        """
        self._current_indent -= self._options.indent_size
        if self._current_indent < 0:
            logger.debug("unindent() below zero, clamping indent to 0")
            self._current_indent = 0
        if code:
            self.line(code)
        return self

    # =========================================================================
    # Lines
    # =========================================================================

    def line(self, *code: str) -> CodeWriter:
        """Write each argument as one indented line, in order."""
        if self._suppressed:
            return self
        prefix = self._indent_prefix()
        self._code.extend(prefix + text for text in code)
        return self

    def line_if(self, condition: bool, *code: str) -> CodeWriter:
        """Write lines only when condition is true."""
        if condition:
            self.line(*code)
        return self

    def inline(self, code: str, condition: bool | None = None) -> CodeWriter:
        """Add code to the pending line.

        Chain inline() calls and finish with done() to commit the line.
        When condition is given and false, the call does nothing.
        """
        if condition is None or condition:
            self._current_line.append(code)
        return self

    def done(self) -> CodeWriter:
        """Commit the pending line built by inline().

        Inside a false conditional scope the pending text is discarded.
        Nothing is written when no text is pending.
        """
        if self._suppressed:
            self._current_line.clear()
            return self
        if self._current_line:
            self._code.append(self._indent_prefix() + self._current_line.build())
            self._current_line.clear()
        return self

    def blank(self, condition: bool | None = None) -> CodeWriter:
        """Write an empty line, optionally only when condition is true."""
        if self._suppressed:
            return self
        if condition is None or condition:
            self._code.append("")
        return self

    # =========================================================================
    # Control flow helpers
    # =========================================================================

    def repeat(
        self,
        items: Iterable[T] | None,
        fn: Callable[[CodeWriter, T, int, list[T]], Any],
    ) -> CodeWriter:
        """Call fn(writer, item, index, items) for each item, in order."""
        seq = list(items) if items is not None else []
        for index, item in enumerate(seq):
            fn(self, item, index, seq)
        return self

    def iterate(
        self,
        mapping: Mapping[str, V] | None,
        fn: Callable[[CodeWriter, V, str, int], Any],
    ) -> CodeWriter:
        """Call fn(writer, value, key, index) for each entry, in insertion order."""
        if mapping is None:
            return self
        for index, (key, value) in enumerate(mapping.items()):
            fn(self, value, key, index)
        return self

    def func(self, builder_fn: Callable[..., Any] | None, *args: Any) -> CodeWriter:
        """Call builder_fn(writer, *args).

        Escape hatch for logic the fluent chain cannot express.

        Raises:
            ConfigurationError: If builder_fn is None
        """
        if builder_fn is None:
            raise ConfigurationError("function not specified in call to func()")
        builder_fn(self, *args)
        return self

    def func_if(
        self, condition: bool, builder_fn: Callable[..., Any] | None, *args: Any
    ) -> CodeWriter:
        """Call builder_fn(writer, *args) only when condition is true.

        Raises:
            ConfigurationError: If builder_fn is None, whatever the condition
        """
        if builder_fn is None:
            raise ConfigurationError("function not specified in call to func_if()")
        if condition:
            builder_fn(self, *args)
        return self

    # =========================================================================
    # Strategy delegation
    # =========================================================================

    def comment(self, *comments: str) -> CodeWriter:
        """Write each argument as a single-line comment."""
        fn = self._options.single_line_comment
        if fn is None:
            raise ConfigurationError(
                "a single-line comment formatter must be configured", "single_line_comment"
            )
        for text in comments:
            fn(self, text)
        return self

    def multi_line_comment(self, *comments: str) -> CodeWriter:
        """Write a comment spanning several lines.

        Falls back to one single-line comment per argument when no
        multi-line formatter is configured.
        """
        multi = self._options.multi_line_comment
        if multi is not None:
            multi(self, list(comments))
            return self
        single = self._options.single_line_comment
        if single is None:
            raise ConfigurationError(
                "a multi-line or single-line comment formatter must be configured",
                "multi_line_comment",
            )
        for text in comments:
            single(self, text)
        return self

    def doc_comment(self, *comments: str) -> CodeWriter:
        """Write a documentation comment."""
        fn = self._options.doc_comment
        if fn is None:
            raise ConfigurationError("a doc comment formatter must be configured", "doc_comment")
        fn(self, list(comments))
        return self

    def start_block(self, code: str | None = None) -> CodeWriter:
        """Open a block. The formatter decides how code is placed."""
        fn = self._options.start_block
        if fn is None:
            raise ConfigurationError("a start block formatter must be configured", "start_block")
        fn(self, code)
        return self

    def end_block(self, code: str | None = None) -> CodeWriter:
        """Close a block. The formatter decides how code is placed."""
        fn = self._options.end_block
        if fn is None:
            raise ConfigurationError("an end block formatter must be configured", "end_block")
        fn(self, code)
        return self

    @contextmanager
    def block(self, code: str | None = None) -> Iterator[CodeWriter]:
        """Context manager pairing start_block(code) with end_block().

        Example:
            >>> with writer.block("class Program"):
            ...     writer.line("int x;")

        """
        self.start_block(code)
        try:
            yield self
        finally:
            self.end_block()

    # =========================================================================
    # Conditional scope
    # =========================================================================

    def if_(self, condition: bool) -> CodeWriter:
        """Open a conditional scope; output is dropped while it is false.

        Raises:
            UsageError: If a scope is already open
        """
        if self._condition is not None:
            raise UsageError("if_", "condition already active; nested conditions are not supported")
        self._condition = bool(condition)
        logger.debug("entering conditional scope (%s)", self._condition)
        return self

    def else_(self) -> CodeWriter:
        """Invert the active condition.

        Raises:
            UsageError: If no scope is open
        """
        if self._condition is None:
            raise UsageError("else_", "no condition active; call if_() first")
        self._condition = not self._condition
        return self

    def end_if(self) -> CodeWriter:
        """Close the conditional scope.

        A no-op when no scope is open, unless the writer was configured
        with strict_conditions.

        Raises:
            UsageError: In strict mode, if no scope is open
        """
        if self._condition is None:
            if self._options.strict_conditions:
                raise UsageError("end_if", "no condition active; call if_() first")
            return self
        self._condition = None
        logger.debug("leaving conditional scope")
        return self

    @contextmanager
    def when(self, condition: bool) -> Iterator[CodeWriter]:
        """Context manager pairing if_(condition) with end_if()."""
        self.if_(condition)
        try:
            yield self
        finally:
            if self._condition is not None:
                self.end_if()

    # =========================================================================
    # Output
    # =========================================================================

    def to_text(self) -> str:
        """Join the committed lines with the configured newline.

        Does not modify the writer; safe to call repeatedly.
        """
        return self._options.newline.join(self._code)

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        """Return number of committed lines."""
        return len(self._code)

    def __repr__(self) -> str:
        return (
            f"CodeWriter(lines={len(self._code)}, indent={self._current_indent}, "
            f"condition={self._condition!r})"
        )

    # =========================================================================
    # Internals
    # =========================================================================

    @property
    def _suppressed(self) -> bool:
        return self._condition is False

    def _indent_prefix(self) -> str:
        if self._options.indent_style is IndentStyle.TABS:
            return "\t" * (self._current_indent // self._options.indent_size)
        return " " * self._current_indent


def _seed_lines(initial_code: Any) -> list[str]:
    """Copy seed content into a fresh line list (never shared).

    WriterOptions has already turned sequences into a tuple of strings.
    """
    if initial_code is None:
        return []
    if isinstance(initial_code, str):
        return [initial_code] if initial_code else []
    if isinstance(initial_code, CodeWriter):
        return list(initial_code._code)
    if isinstance(initial_code, tuple):
        return list(initial_code)
    raise ConfigurationError(
        f"expected a string, a sequence of strings or a CodeWriter, "
        f"got {type(initial_code).__name__}",
        "initial_code",
    )


__all__ = ["CodeWriter"]

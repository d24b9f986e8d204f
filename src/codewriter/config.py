"""Immutable writer configuration for codewriter.

WriterOptions enumerates every option a CodeWriter understands, with its
default. Options are fixed for the lifetime of a writer; language-specific
formatting is supplied as strategy callbacks that receive the writer and
call back into its public methods.

Usage:
    from codewriter import CodeWriter, WriterOptions

    options = WriterOptions(
        indent_size=2,
        single_line_comment=lambda w, text: w.line(f"// {text}"),
    )
    writer = CodeWriter(options)

    # Or from a plain dict (unknown keys are rejected)
    writer = CodeWriter({"indent_size": 2, "indent_style": "tabs"})

"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from codewriter.errors import ConfigurationError

if TYPE_CHECKING:
    from codewriter.writer import CodeWriter


class IndentStyle(Enum):
    """How an indent level is rendered."""

    SPACES = "spaces"
    TABS = "tabs"


InitialCode = Union[str, Sequence[str], "CodeWriter", None]
SingleLineCommentFn = Callable[["CodeWriter", str], None]
MultiLineCommentFn = Callable[["CodeWriter", list[str]], None]
DocCommentFn = Callable[["CodeWriter", list[str]], None]
StartBlockFn = Callable[["CodeWriter", str | None], None]
EndBlockFn = Callable[["CodeWriter", str | None], None]

_STRATEGY_FIELDS = (
    "single_line_comment",
    "multi_line_comment",
    "doc_comment",
    "start_block",
    "end_block",
)


@dataclass(frozen=True, slots=True)
class WriterOptions:
    """Immutable writer configuration.

    Attributes:
        initial_code: Seed content (a string, a sequence of strings, or
            another CodeWriter whose committed lines are copied)
        indent_size: Spaces per indent level
        indent_style: Render indentation as spaces or tabs
        newline: Separator used by CodeWriter.to_text()
        strict_conditions: Make end_if() raise when no scope is open
        single_line_comment: Writes one comment line
        multi_line_comment: Writes a comment spanning several lines
        doc_comment: Writes a documentation comment
        start_block: Opens a block (braces, indentation, label)
        end_block: Closes a block

    """

    initial_code: InitialCode = None
    indent_size: int = 4
    indent_style: IndentStyle = IndentStyle.SPACES
    newline: str = os.linesep
    strict_conditions: bool = False
    single_line_comment: SingleLineCommentFn | None = None
    multi_line_comment: MultiLineCommentFn | None = None
    doc_comment: DocCommentFn | None = None
    start_block: StartBlockFn | None = None
    end_block: EndBlockFn | None = None

    def __post_init__(self) -> None:
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ConfigurationError(
                f"expected an int, got {type(self.indent_size).__name__}", "indent_size"
            )
        if self.indent_size < 1:
            raise ConfigurationError(
                f"must be at least 1, got {self.indent_size}", "indent_size"
            )

        if not isinstance(self.indent_style, IndentStyle):
            try:
                style = IndentStyle(self.indent_style)
            except ValueError:
                valid = ", ".join(repr(s.value) for s in IndentStyle)
                raise ConfigurationError(
                    f"unknown style {self.indent_style!r} (expected one of {valid})",
                    "indent_style",
                ) from None
            # Frozen dataclass: bypass __setattr__ for the coerced value
            object.__setattr__(self, "indent_style", style)

        if not isinstance(self.newline, str):
            raise ConfigurationError("expected a string", "newline")

        for name in _STRATEGY_FIELDS:
            fn = getattr(self, name)
            if fn is not None and not callable(fn):
                raise ConfigurationError(
                    f"expected a callable, got {type(fn).__name__}", name
                )

        self._normalize_initial_code()

    def _normalize_initial_code(self) -> None:
        code = self.initial_code
        if code is None or isinstance(code, str):
            return

        from codewriter.writer import CodeWriter

        if isinstance(code, CodeWriter):
            return
        if isinstance(code, (bytes, bytearray)) or not isinstance(code, Iterable):
            raise ConfigurationError(
                f"expected a string, a sequence of strings or a CodeWriter, "
                f"got {type(code).__name__}",
                "initial_code",
            )
        # Materialize once so one-shot iterables seed every writer
        lines = tuple(code)
        for index, line in enumerate(lines):
            if not isinstance(line, str):
                raise ConfigurationError(
                    f"line {index} is {type(line).__name__}, expected str", "initial_code"
                )
        object.__setattr__(self, "initial_code", lines)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> WriterOptions:
        """Create WriterOptions from a dictionary.

        Unlike a loose options object, every key must name a field;
        unknown keys raise instead of being ignored so typos surface
        at construction time.

        Args:
            config_dict: Mapping of option names to values

        Returns:
            New WriterOptions instance

        Raises:
            ConfigurationError: If the mapping contains unknown keys or
                invalid values

        Example:
            >>> options = WriterOptions.from_dict({"indent_size": 2})
            >>> options.indent_size
            2

        """
        _check_keys(config_dict)
        return cls(**config_dict)

    def replace(self, **changes: Any) -> WriterOptions:
        """Return a copy with the given fields changed.

        Raises:
            ConfigurationError: If a key is not a WriterOptions field
        """
        _check_keys(changes)
        return dataclasses.replace(self, **changes)


def _check_keys(config_dict: Mapping[str, Any]) -> None:
    valid_fields = {f.name for f in dataclasses.fields(WriterOptions)}
    unknown = sorted(k for k in config_dict if k not in valid_fields)
    if unknown:
        raise ConfigurationError(f"unknown option(s): {', '.join(unknown)}")


DEFAULT_OPTIONS: WriterOptions = WriterOptions()


__all__ = [
    "DEFAULT_OPTIONS",
    "DocCommentFn",
    "EndBlockFn",
    "IndentStyle",
    "InitialCode",
    "MultiLineCommentFn",
    "SingleLineCommentFn",
    "StartBlockFn",
    "WriterOptions",
]

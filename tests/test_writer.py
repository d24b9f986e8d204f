"""Tests for the CodeWriter line buffer, indentation and inline assembly."""

import os

import pytest

from codewriter import CodeWriter, ConfigurationError, WriterOptions

# =========================================================================
# line / line_if
# =========================================================================


class TestLine:
    """line() writes each argument as one indented line."""

    def test_lines_joined_with_newline(self, writer: CodeWriter) -> None:
        writer.line("a", "b").line("c")
        assert writer.to_text() == "a\nb\nc"
        assert writer.lines == ("a", "b", "c")

    def test_no_arguments_writes_nothing(self, writer: CodeWriter) -> None:
        writer.line()
        assert len(writer) == 0
        assert writer.to_text() == ""

    def test_empty_string_is_a_line(self, writer: CodeWriter) -> None:
        writer.line("")
        assert writer.lines == ("",)

    def test_returns_self(self, writer: CodeWriter) -> None:
        assert writer.line("x") is writer

    def test_line_if_true(self, writer: CodeWriter) -> None:
        writer.line_if(True, "a", "b")
        assert writer.lines == ("a", "b")

    def test_line_if_false(self, writer: CodeWriter) -> None:
        writer.line_if(False, "a").line("b")
        assert writer.lines == ("b",)

    def test_line_if_still_gated_by_active_condition(self, writer: CodeWriter) -> None:
        writer.if_(False).line_if(True, "hidden").end_if()
        assert writer.lines == ()


# =========================================================================
# Indentation
# =========================================================================


class TestIndent:
    """indent()/unindent() move the cursor by indent_size."""

    def test_end_to_end_spaces(self, writer: CodeWriter) -> None:
        writer.line("A").indent().line("B").unindent().line("C")
        assert writer.to_text() == "A\n    B\nC"

    def test_indent_with_code_writes_at_new_level(self, writer: CodeWriter) -> None:
        writer.indent("x")
        assert writer.lines == ("    x",)
        assert writer.indent_level == 4

    def test_unindent_with_code_writes_at_new_level(self, writer: CodeWriter) -> None:
        writer.indent().indent().unindent("y")
        assert writer.lines == ("    y",)

    def test_empty_code_is_not_written(self, writer: CodeWriter) -> None:
        writer.indent("").unindent("")
        assert writer.lines == ()

    def test_indent_unindent_restores_level(self, writer: CodeWriter) -> None:
        writer.indent()
        before = writer.indent_level
        writer.indent().unindent()
        assert writer.indent_level == before

    def test_unindent_clamps_at_zero(self, writer: CodeWriter) -> None:
        writer.indent().unindent().unindent().unindent()
        assert writer.indent_level == 0
        writer.line("flush")
        assert writer.lines == ("flush",)

    def test_custom_indent_size(self) -> None:
        writer = CodeWriter({"indent_size": 2, "newline": "\n"})
        writer.indent().indent().line("x")
        assert writer.lines == ("    x",)
        assert writer.indent_level == 4

    def test_tabs(self) -> None:
        writer = CodeWriter({"indent_style": "tabs", "newline": "\n"})
        writer.indent("a").indent("b").unindent().unindent("c")
        assert writer.lines == ("\ta", "\t\tb", "c")

    def test_tabs_with_custom_size(self) -> None:
        writer = CodeWriter({"indent_style": "tabs", "indent_size": 2})
        writer.indent().indent().line("x")
        assert writer.lines == ("\t\tx",)


# =========================================================================
# inline / done
# =========================================================================


class TestInline:
    """inline() assembles a pending line that done() commits."""

    def test_concatenates_without_separator(self, writer: CodeWriter) -> None:
        writer.inline("a").inline("b").done()
        assert writer.lines == ("ab",)
        assert writer.pending == ""

    def test_uses_current_indent(self, writer: CodeWriter) -> None:
        writer.indent().inline("int ").inline("x;").done()
        assert writer.lines == ("    int x;",)

    def test_uses_tab_indent(self) -> None:
        writer = CodeWriter({"indent_style": "tabs"})
        writer.indent().inline("x").done()
        assert writer.lines == ("\tx",)

    def test_false_condition_skips_fragment(self, writer: CodeWriter) -> None:
        writer.inline("public ", False).inline("class ", True).inline("Foo").done()
        assert writer.lines == ("class Foo",)

    def test_done_without_inline_writes_nothing(self, writer: CodeWriter) -> None:
        writer.done()
        assert writer.lines == ()

    def test_done_with_only_empty_fragments(self, writer: CodeWriter) -> None:
        writer.inline("").done()
        assert writer.lines == ()

    def test_inline_does_not_touch_buffer(self, writer: CodeWriter) -> None:
        writer.inline("pending")
        assert writer.lines == ()
        assert writer.pending == "pending"

    def test_pending_survives_until_done(self, writer: CodeWriter) -> None:
        writer.inline("a").line("b").inline("c").done()
        assert writer.lines == ("b", "ac")

    def test_done_twice_writes_once(self, writer: CodeWriter) -> None:
        writer.inline("x").done().done()
        assert writer.lines == ("x",)


# =========================================================================
# blank
# =========================================================================


class TestBlank:
    def test_blank(self, writer: CodeWriter) -> None:
        writer.line("a").blank().line("b")
        assert writer.to_text() == "a\n\nb"

    def test_blank_true(self, writer: CodeWriter) -> None:
        writer.blank(True)
        assert writer.lines == ("",)

    def test_blank_false(self, writer: CodeWriter) -> None:
        writer.blank(False)
        assert writer.lines == ()

    def test_blank_is_not_indented(self, writer: CodeWriter) -> None:
        writer.indent().blank()
        assert writer.lines == ("",)


# =========================================================================
# repeat / iterate / func
# =========================================================================


class TestControlFlow:
    """repeat(), iterate(), func() and func_if() call back into the writer."""

    def test_repeat_passes_item_index_and_sequence(self, writer: CodeWriter) -> None:
        calls = []

        def fn(cw, item, index, seq):
            calls.append((cw, item, index, list(seq)))
            cw.line(f"{index}:{item}")

        writer.repeat(["a", "b"], fn)
        assert writer.lines == ("0:a", "1:b")
        assert calls[0] == (writer, "a", 0, ["a", "b"])

    def test_repeat_accepts_generator(self, writer: CodeWriter) -> None:
        writer.repeat((n * 2 for n in range(3)), lambda cw, item, i, seq: cw.line(str(item)))
        assert writer.lines == ("0", "2", "4")

    def test_repeat_none_is_empty(self, writer: CodeWriter) -> None:
        assert writer.repeat(None, lambda *a: pytest.fail("called")) is writer

    def test_nested_repeat(self, writer: CodeWriter) -> None:
        rows = [["a", "b"], ["c"]]
        writer.repeat(
            rows,
            lambda cw, row, i, _: cw.line(f"row {i}")
            .indent()
            .repeat(row, lambda w, cell, j, __: w.line(cell))
            .unindent(),
        )
        assert writer.lines == ("row 0", "    a", "    b", "row 1", "    c")

    def test_iterate_insertion_order(self, writer: CodeWriter) -> None:
        fields = {"b": "int", "a": "str"}
        writer.iterate(fields, lambda cw, value, key, i: cw.line(f"{i} {key}: {value}"))
        assert writer.lines == ("0 b: int", "1 a: str")

    def test_iterate_none_is_empty(self, writer: CodeWriter) -> None:
        writer.iterate(None, lambda *a: pytest.fail("called"))
        assert writer.lines == ()

    def test_func_passes_args(self, writer: CodeWriter) -> None:
        def build(cw, name, count):
            for i in range(count):
                cw.line(f"{name}{i}")

        writer.func(build, "x", 2)
        assert writer.lines == ("x0", "x1")

    def test_func_missing_function(self, writer: CodeWriter) -> None:
        with pytest.raises(ConfigurationError):
            writer.func(None)

    def test_func_if(self, writer: CodeWriter) -> None:
        writer.func_if(True, lambda cw: cw.line("yes")).func_if(False, lambda cw: cw.line("no"))
        assert writer.lines == ("yes",)

    def test_func_if_missing_function_raises_even_when_false(self, writer: CodeWriter) -> None:
        with pytest.raises(ConfigurationError):
            writer.func_if(False, None)


# =========================================================================
# Seed content and output
# =========================================================================


class TestInitialCode:
    def test_string(self) -> None:
        writer = CodeWriter({"initial_code": "header", "newline": "\n"})
        writer.line("body")
        assert writer.to_text() == "header\nbody"

    def test_empty_string_is_no_seed(self) -> None:
        assert len(CodeWriter({"initial_code": ""})) == 0

    def test_list_is_copied(self) -> None:
        seed = ["a", "b"]
        writer = CodeWriter({"initial_code": seed})
        writer.line("c")
        assert seed == ["a", "b"]
        assert writer.lines == ("a", "b", "c")

    def test_from_writer_round_trip(self, writer: CodeWriter) -> None:
        writer.line("a").indent().line("b")
        copy = CodeWriter(WriterOptions(initial_code=writer, newline="\n"))
        assert copy.to_text() == writer.to_text()

    def test_from_writer_is_independent(self, writer: CodeWriter) -> None:
        writer.line("a")
        copy = CodeWriter({"initial_code": writer})
        writer.line("b")
        copy.line("c")
        assert writer.lines == ("a", "b")
        assert copy.lines == ("a", "c")

    def test_from_writer_does_not_inherit_indent(self, writer: CodeWriter) -> None:
        writer.indent().line("a")
        copy = CodeWriter({"initial_code": writer})
        assert copy.indent_level == 0

    def test_invalid_seed(self) -> None:
        with pytest.raises(ConfigurationError, match="initial_code"):
            CodeWriter({"initial_code": 42})


class TestOutput:
    def test_to_text_is_repeatable(self, writer: CodeWriter) -> None:
        writer.line("a", "b")
        assert writer.to_text() == writer.to_text()
        assert len(writer) == 2

    def test_str(self, writer: CodeWriter) -> None:
        writer.line("a", "b")
        assert str(writer) == "a\nb"

    def test_default_newline_is_platform(self) -> None:
        writer = CodeWriter().line("a", "b")
        assert writer.to_text() == f"a{os.linesep}b"

    def test_custom_newline(self) -> None:
        writer = CodeWriter({"newline": "\r\n"}).line("a", "b")
        assert writer.to_text() == "a\r\nb"

    def test_lines_is_snapshot(self, writer: CodeWriter) -> None:
        writer.line("a")
        snapshot = writer.lines
        writer.line("b")
        assert snapshot == ("a",)

    def test_repr(self, writer: CodeWriter) -> None:
        writer.line("a").indent()
        assert repr(writer) == "CodeWriter(lines=1, indent=4, condition=None)"

    def test_dict_options_with_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="indentSize"):
            CodeWriter({"indentSize": 2})

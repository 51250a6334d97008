"""Unit tests for the Dart formatter."""

import pytest
from messages_wrapper.generator.formatter import DartFormatter
from messages_wrapper.core.errors import FormattingFailure


class TestDartFormatter:
    """Tests for DartFormatter."""

    @pytest.fixture
    def formatter(self):
        return DartFormatter()

    def test_indents_class_members(self, formatter):
        source = "class A {\nint x;\n}\n"
        assert formatter.format(source) == "class A {\n  int x;\n}\n"

    def test_reindents_existing_indentation(self, formatter):
        source = "class A {\n        int x;\n    }"
        assert formatter.format(source) == "class A {\n  int x;\n}\n"

    def test_one_level_per_opening_line(self, formatter):
        source = "get x {\nreturn a.map((e) {\nreturn e;\n}).toList();\n}"
        assert formatter.format(source) == (
            "get x {\n"
            "  return a.map((e) {\n"
            "    return e;\n"
            "  }).toList();\n"
            "}\n"
        )

    def test_list_literal(self, formatter):
        source = "var a = [\nb,\nc,\n];"
        assert formatter.format(source) == "var a = [\n  b,\n  c,\n];\n"

    def test_collapses_blank_lines(self, formatter):
        source = "\n\nint a;\n\n\n\nint b;\n\n"
        assert formatter.format(source) == "int a;\n\nint b;\n"

    def test_drops_blank_lines_inside_braces(self, formatter):
        source = "class A {\n\nint x;\n\n}"
        assert formatter.format(source) == "class A {\n  int x;\n}\n"

    def test_ignores_brackets_in_strings_and_comments(self, formatter):
        source = "class A {\nvar s = '{(';\n// ) }\n}"
        assert formatter.format(source) == "class A {\n  var s = '{(';\n  // ) }\n}\n"

    def test_idempotent(self, formatter):
        source = "class A extends B<C> {\n@override\nbool f(D d) => g(d);\n\nvar l = [\n1,\n];\n}\n"
        once = formatter.format(source)
        assert formatter.format(once) == once

    def test_unclosed_bracket(self, formatter):
        with pytest.raises(FormattingFailure) as exc:
            formatter.format("class A {\nint x;\n")
        assert exc.value.line == 1

    def test_unexpected_closer(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("int x;\n}")

    def test_mismatched_brackets(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("var a = [1, 2);")

    def test_unterminated_string(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("var s = 'abc;")

    def test_invalid_class_name(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("class My Localizations {\n}")

    def test_invalid_extension_name(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("extension 1Ext on BuildContext {\n}")

    def test_malformed_import(self, formatter):
        with pytest.raises(FormattingFailure):
            formatter.format("import package:flutter/widgets.dart;")

    def test_private_class_name_allowed(self, formatter):
        source = "class _A extends B<C> {\n}"
        assert formatter.format(source) == "class _A extends B<C> {\n}\n"

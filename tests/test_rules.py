"""
Unit tests for the parameter list, method size, magic attribute and
naming rules.

Every rule has at least one positive and one negative case, plus the
boundary the rule's threshold defines.
"""
import sys
import textwrap
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from codesmells.config import Whitelists
from codesmells.data_structures import SmellKind
from codesmells.frontend import parse_source
from codesmells.orchestrator import analyze_tree
from codesmells.rules.literals import format_number, render_character, render_string
from codesmells.rules.size import count_valid_lines, is_bracket_only, is_valid_line

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def analyze(code: str, whitelists: Whitelists | None = None):
    tree = parse_source(textwrap.dedent(code).encode("utf-8"), "Sample.cs")
    return analyze_tree(tree, whitelists)


def analyze_verbatim(code: str):
    """Like analyze(), but keeps whitespace-only lines that dedent would empty."""
    return analyze_tree(parse_source(code.encode("utf-8"), "Sample.cs"))


def lines_of(record, kind: SmellKind) -> list[int]:
    return [finding.line for finding in record.findings if finding.kind == kind]


def method_with_body(*body_lines: str) -> str:
    """A class with one method whose body is the given lines between braces."""
    inner = "\n".join(f"        {line}" if line else "" for line in body_lines)
    return f"class Sample\n{{\n    void Run()\n    {{\n{inner}\n    }}\n}}\n"


def calls(count: int) -> list[str]:
    return [f"Step{i}();" for i in range(count)]


# ---------------------------------------------------------------------------
# LongParamList
# ---------------------------------------------------------------------------

class TestLongParamList:

    def test_four_parameters_is_fine(self):
        record = analyze("""\
            class Geometry
            {
                void Box(int x, int y, int w, int h) { }
            }
        """)

        assert lines_of(record, SmellKind.LONG_PARAM_LIST) == []

    def test_five_parameters_reported_at_declaration_line(self):
        record = analyze("""\
            class Geometry
            {
                void Box(int x, int y, int w, int h) { }

                void Cube(int x, int y, int z, int w, int h) { }
            }
        """)

        assert lines_of(record, SmellKind.LONG_PARAM_LIST) == [5]

    def test_params_and_optional_parameters_count(self):
        record = analyze("""\
            class Logger
            {
                void Log(int level, string a, string b, string c = null, params object[] rest) { }
            }
        """)

        assert lines_of(record, SmellKind.LONG_PARAM_LIST) == [3]

    def test_declaration_line_includes_attributes(self):
        record = analyze("""\
            class Geometry
            {
                [Obsolete]
                void Cube(int x, int y, int z, int w, int h) { }
            }
        """)

        assert lines_of(record, SmellKind.LONG_PARAM_LIST) == [3]


# ---------------------------------------------------------------------------
# LongMethod
# ---------------------------------------------------------------------------

class TestNoiseLines:

    def test_bracket_only_lines(self):
        assert is_bracket_only("{")
        assert is_bracket_only("        }")
        assert is_bracket_only("{}")

    def test_bracket_lines_with_other_tokens(self):
        assert not is_bracket_only("};")
        assert not is_bracket_only("{ x")
        assert not is_bracket_only("}}}")

    def test_empty_line_is_noise_but_whitespace_is_not(self):
        assert not is_valid_line("")
        assert is_valid_line("    ")

    def test_count_valid_lines(self):
        assert count_valid_lines(["{", "a();", "", "  }", "b();", "}"]) == 2


class TestLongMethod:

    def test_ten_statements_reported_unlocated(self):
        record = analyze(method_with_body(*calls(10)))   # 12 lines, 10 valid

        assert lines_of(record, SmellKind.LONG_METHOD) == [0]

    def test_eleven_line_body_all_valid(self):
        code = (
            "class Sample\n{\n    void Run()\n    { First();\n"
            + "\n".join(f"        {call}" for call in calls(9))
            + "\n        Last(); }\n}\n"
        )

        assert lines_of(analyze(code), SmellKind.LONG_METHOD) == [0]

    def test_padding_suppresses_finding(self):
        """11+ raw lines but blank and brace-only lines leave fewer than 10."""
        record = analyze(method_with_body(*calls(4), "", *calls(4), ""))   # 12 raw, 8 valid

        assert lines_of(record, SmellKind.LONG_METHOD) == []

    def test_nine_statements_not_reported(self):
        record = analyze(method_with_body(*calls(9)))   # 11 raw, 9 valid

        assert lines_of(record, SmellKind.LONG_METHOD) == []

    def test_raw_line_limit_is_inclusive(self):
        """A 10-line body is never long, even when every line counts."""
        code = (
            "class Sample\n{\n    void Run()\n    { First();\n"
            + "\n".join(f"        {call}" for call in calls(8))
            + "\n        Last(); }\n}\n"
        )

        assert lines_of(analyze(code), SmellKind.LONG_METHOD) == []

    def test_whitespace_only_lines_count(self):
        record = analyze_verbatim(method_with_body(*calls(8), "    ", "    "))   # 12 raw, 10 valid

        assert lines_of(record, SmellKind.LONG_METHOD) == [0]

    def test_inner_braces_are_noise(self):
        body = ["if (ready)", "{", *calls(4), "}", "else", "{", *calls(2), "}"]
        record = analyze(method_with_body(*body))   # 14 raw, 8 valid

        assert lines_of(record, SmellKind.LONG_METHOD) == []

    def test_method_without_body_is_skipped(self):
        record = analyze("""\
            interface IRunner
            {
                void Run();
            }
        """)

        assert lines_of(record, SmellKind.LONG_METHOD) == []


# ---------------------------------------------------------------------------
# MagicAttribute
# ---------------------------------------------------------------------------

class TestLiteralRendering:

    def test_format_number(self):
        assert format_number(1) == "1"
        assert format_number(1.0) == "1"
        assert format_number(-1) == "-1"
        assert format_number(0.5) == "0.5"
        assert format_number(1e20) == "1E+20"

    def test_format_number_switches_to_exponent_at_1e15(self):
        assert format_number(999999999999999) == "999999999999999"
        assert format_number(1e15) == "1E+15"
        assert format_number(-1e15) == "-1E+15"
        assert format_number(1234567890123456.0) == "1.234567890123456E+15"
        assert format_number(1e16) == "1E+16"

    def test_render_character(self):
        assert render_character("\0") == "'\\0'"
        assert render_character("\n") == "'\\n'"
        assert render_character("'") == "'\\''"
        assert render_character("a") == "'a'"

    def test_render_string(self):
        assert render_string("") == '""'
        assert render_string('say "hi"') == '"say \\"hi\\""'
        assert render_string("a\\b") == '"a\\\\b"'


class TestMagicAttribute:

    SOURCE = """\
        class Sample
        {
            void Run()
            {
                Use(0);
                Use(2);
                Use("");
                Use("x");
                Use('\\n');
                Use('a');
                Use(true);
                Use(null);
            }
        }
    """

    def test_default_whitelists(self):
        record = analyze(self.SOURCE)

        assert lines_of(record, SmellKind.MAGIC_ATTRIBUTE) == [6, 8, 10]

    def test_extended_whitelists(self):
        whitelists = Whitelists().extended(numbers=[2], strings=["x"], characters=["a"])

        record = analyze(self.SOURCE, whitelists)

        assert lines_of(record, SmellKind.MAGIC_ATTRIBUTE) == []

    def test_matching_is_textual(self):
        record = analyze("""\
            class Sample
            {
                double a = 1.0;
                double b = 1;
                int c = 0x1;
            }
        """)

        assert lines_of(record, SmellKind.MAGIC_ATTRIBUTE) == [3, 5]

    def test_large_whitelisted_number_matches_exponent_literal(self):
        source = """\
            class Sample
            {
                double a = 1E+15;
            }
        """

        assert lines_of(analyze(source), SmellKind.MAGIC_ATTRIBUTE) == [3]
        assert lines_of(analyze(source, Whitelists().extended(numbers=[1e15])),
                        SmellKind.MAGIC_ATTRIBUTE) == []

    def test_negative_one_is_minus_applied_to_one(self):
        record = analyze("""\
            class Sample
            {
                int a = -1;
            }
        """)

        assert lines_of(record, SmellKind.MAGIC_ATTRIBUTE) == []

    def test_verbatim_empty_string_is_reported(self):
        record = analyze("""\
            class Sample
            {
                string a = @"";
            }
        """)

        assert lines_of(record, SmellKind.MAGIC_ATTRIBUTE) == [3]

    def test_findings_follow_source_order(self):
        record = analyze("""\
            class Sample
            {
                int a = 7;
                void Run(int a, int b, int c, int d, int e)
                {
                    Use(42);
                }
            }
        """)

        assert [(f.kind, f.line) for f in record.findings] == [
            (SmellKind.MAGIC_ATTRIBUTE, 3),
            (SmellKind.LONG_PARAM_LIST, 4),
            (SmellKind.MAGIC_ATTRIBUTE, 6),
        ]


# ---------------------------------------------------------------------------
# Qualified names
# ---------------------------------------------------------------------------

class TestNaming:

    def test_namespace_and_class(self):
        record = analyze("""\
            namespace Acme.Billing
            {
                class Invoice { void Pay() { Send(); } }
            }
        """)

        assert record.name == "Acme.Billing.Invoice"

    def test_every_class_is_appended(self):
        record = analyze("""\
            namespace Acme
            {
                class Invoice { void Pay() { Send(); } }
                class Receipt { void Print() { Send(); } }
            }
        """)

        assert record.name == "Acme.Invoice.Receipt"

    def test_only_first_namespace_names_the_file(self):
        record = analyze("""\
            namespace Outer
            {
                namespace Inner
                {
                    class Invoice { void Pay() { Send(); } }
                }
            }
        """)

        assert record.name == "Outer.Invoice"

    def test_file_scoped_namespace(self):
        record = analyze("""\
            namespace Acme;

            class Invoice { void Pay() { Send(); } }
        """)

        assert record.name == "Acme.Invoice"

    def test_no_namespace_leaves_name_empty(self):
        record = analyze("""\
            class Invoice { void Pay() { Send(); } }
        """)

        assert record.name == ""

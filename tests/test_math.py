"""Tests for LaTeX/MathJax math validation."""
from material_lint.config import Config
from material_lint.core.linter.rules.math import FRAC_HINT, math_blocks, validate_math


def _lint(text, config=None):
    return list(math_blocks(text.split("\n"), config))


def _details(text):
    return [issue.detail for issue in _lint(text)]


# ---------------------------------------------------------------------------
# validate_math
# ---------------------------------------------------------------------------


def test_well_formed_content_has_no_errors():
    config = Config()
    assert validate_math(r"\frac{a}{b} + \sqrt[3]{x}", "block", config) == []
    assert validate_math(r"\{a\}", "inline", config) == []


def test_empty_content():
    assert validate_math("  ", "inline", Config()) == [
        "Empty inline math block. Add mathematical content or remove the delimiters."
    ]


def test_frac_error_suppresses_brace_check():
    assert validate_math(r"\frac{incomplete", "inline", Config()) == [FRAC_HINT]


def test_unbalanced_environment():
    details = validate_math(r"\begin{cases} x", "block", Config())
    assert details == [r"Unmatched \begin{cases} and \end{cases} in math block."]


# ---------------------------------------------------------------------------
# Block math
# ---------------------------------------------------------------------------


def test_valid_block():
    assert _lint("$$\n\\frac{a}{b}\n$$") == []


def test_empty_block():
    issues = _lint("Before\n\n$$\n$$")

    assert len(issues) == 1
    assert issues[0].line_number == 3
    assert issues[0].detail == "Math block is empty. Add mathematical content between the $$ delimiters."


def test_unclosed_block():
    issues = _lint("$$\nx + 1")

    assert [i.detail for i in issues] == ["Math block is not properly closed with $$."]
    assert issues[0].line_number == 1


def test_block_errors_report_at_opening_line():
    issues = _lint("Text\n\n$$\nf(x = 1\n$$")

    assert len(issues) == 1
    assert issues[0].line_number == 3
    assert "Unmatched parentheses in block math" in issues[0].detail
    assert issues[0].context == "$$\nf(x = 1\n$$"


def test_single_line_block():
    assert _lint(r"$$\sqrt{x}$$") == []

    issues = _lint(r"$$\sqrt$$")
    assert len(issues) == 1
    assert r"\sqrt" in issues[0].detail


# ---------------------------------------------------------------------------
# Inline math
# ---------------------------------------------------------------------------


def test_valid_inline_fraction():
    assert _lint(r"The ratio $\frac{a}{b}$ is small.") == []


def test_incomplete_fraction_names_the_command():
    issues = _lint(r"$\frac{incomplete$")

    assert len(issues) == 1
    assert r"\frac" in issues[0].detail


def test_inline_parentheses():
    assert _details("The value $x + (1$ here") == [
        "Unmatched parentheses in inline math. Check that all ( have corresponding )."
    ]


def test_long_inline_expression():
    config = Config(inline_math_max_length=10)
    issues = _lint("$a + b + c + d + e$", config)

    assert len(issues) == 1
    assert "should use block math ($$)" in issues[0].detail


def test_display_command_inline():
    details = _details(r"$\displaystyle x$")
    assert details == [r"\displaystyle should be used in block math ($$) rather than inline math ($)."]


def test_odd_underscore_count():
    details = _details("$x_1$")
    assert len(details) == 1
    assert details[0].startswith("Uneven number of underscores")


def test_lone_dollar():
    assert _details("Costs $5") == [
        "Single $ may conflict with math syntax. Use $$ for block math or escape with \\$ if literal."
    ]


def test_escaped_dollar_and_inline_code_are_literal():
    assert _lint(r"Price is \$5 today") == []
    assert _lint("Run `echo $HOME` first") == []


def test_environment_outside_math():
    details = _details(r"\begin{align} x \end{align}")
    assert details == [r"LaTeX environment \begin{align} should be inside math delimiters ($$ or $)."]


def test_math_in_fenced_code_is_ignored():
    assert _lint("```shell\n$ echo $PATH\n```") == []

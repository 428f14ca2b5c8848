"""Tests for tooltip, annotation and version banner rules."""
from material_lint.config import Config
from material_lint.core.linter.rules.tooltips import tooltip_syntax
from material_lint.core.linter.rules.versions import version_banners


def _lint(rule, text, config=None):
    return list(rule(text.split("\n"), config))


def _details(rule, text, config=None):
    return [issue.detail for issue in _lint(rule, text, config)]


# ---------------------------------------------------------------------------
# Link tooltips
# ---------------------------------------------------------------------------


def test_valid_tooltip():
    assert _lint(tooltip_syntax, '[Docs](https://example.com "Read the documentation")') == []


def test_empty_tooltip():
    assert _details(tooltip_syntax, '[Docs](https://example.com "")') == [
        "Tooltip text cannot be empty. Provide descriptive text within quotes."
    ]


def test_short_tooltip():
    assert _details(tooltip_syntax, '[Docs](https://example.com "ab")') == [
        "Tooltip text should be descriptive (at least 3 characters)."
    ]


def test_tooltip_repeating_link_text():
    assert _details(tooltip_syntax, '[Docs](https://example.com "docs")') == [
        "Tooltip text should provide additional information, not duplicate the link text."
    ]


def test_tooltip_needs_space():
    assert _details(tooltip_syntax, '[Docs](https://example.com"Read more")') == [
        "Add a space before the tooltip text in markdown links."
    ]


def test_single_quoted_tooltip():
    assert _details(tooltip_syntax, "[Docs](https://example.com 'Read more')") == [
        "Use double quotes for tooltip text, not single quotes."
    ]


def test_unclosed_tooltip():
    details = _details(tooltip_syntax, '[Docs](https://example.com "Read more')
    assert details == ["Unclosed tooltip quote. Make sure to close the tooltip with a quote and parenthesis."]


# ---------------------------------------------------------------------------
# Annotations
# ---------------------------------------------------------------------------


def test_spaced_annotation_is_valid():
    assert _lint(tooltip_syntax, "Some text (1) here and (2)! there") == []


def test_annotation_needs_space():
    assert _details(tooltip_syntax, "Some text(1) here") == [
        "Add a space before the annotation marker for better readability."
    ]


def test_annotation_numbers():
    assert _details(tooltip_syntax, "Text (0)") == ["Annotation numbers should start from 1, not 0."]
    assert len(_lint(tooltip_syntax, "Text (101)")) == 1
    assert _lint(tooltip_syntax, "Text (101)", Config(annotation_max_number=200)) == []


def test_malformed_annotations():
    assert _details(tooltip_syntax, "Option (a) here") == [
        "Annotation markers should use numbers, not letters. Use (1), (2), etc."
    ]
    assert _details(tooltip_syntax, "Call () now") == [
        "Empty annotation marker. Provide a number like (1) or (2)."
    ]


def test_code_and_headings_are_skipped():
    assert _lint(tooltip_syntax, "Use `f(1)` in code") == []
    assert _lint(tooltip_syntax, "# Heading(1)") == []
    assert _lint(tooltip_syntax, "```\nprint(0)\n```") == []
    assert _lint(tooltip_syntax, "    indented(0)") == []


# ---------------------------------------------------------------------------
# Snippet includes
# ---------------------------------------------------------------------------


def test_standard_banner_include():
    assert _lint(version_banners, '--8<-- "version-banner.md"') == []
    assert _lint(version_banners, '--8<-- "includes/abbreviations.md"') == []


def test_empty_include():
    assert _details(version_banners, '--8<-- ""') == ["Snippet include filename cannot be empty."]


def test_non_standard_banner_name():
    details = _details(version_banners, '--8<-- "includes/version-notice.txt"')

    assert len(details) == 1
    assert details[0].startswith("Consider using standard banner filenames")


def test_banner_extension():
    assert _details(version_banners, '--8<-- "banner.json"') == [
        'Version banner files should have .md, .txt, or .html extension. Found: "banner.json".'
    ]


def test_malformed_includes():
    assert _details(version_banners, "--8<-- banner.md") == [
        "Snippet include filenames must be enclosed in double quotes."
    ]
    assert _details(version_banners, "--8<-- 'banner.md'") == [
        "Use double quotes for snippet include filenames, not single quotes."
    ]
    assert _details(version_banners, "--8<--") == [
        "Incomplete snippet include. Add filename in quotes after --8<--."
    ]


# ---------------------------------------------------------------------------
# Versions and deprecation notices
# ---------------------------------------------------------------------------


def test_mixed_version_prefixes():
    assert len(_lint(version_banners, "Added in v1.2 and changed in 1.3")) == 1
    assert _lint(version_banners, "Since v1.2 through v1.3") == []


def test_deprecation_without_version():
    issues = _lint(version_banners, '!!! warning "Deprecated"\n    This feature is going away.')

    assert len(issues) == 1
    assert issues[0].line_number == 1
    assert "should include version information" in issues[0].detail


def test_deprecation_with_version():
    assert _lint(version_banners, '!!! warning "Deprecated"\n    Deprecated since 2.0.') == []


def test_notice_admonition_type():
    assert _details(version_banners, '!!! info "Deprecated since 1.0"') == [
        'Consider using admonition type "warning" for deprecated notices instead of "info".'
    ]
    assert _lint(version_banners, '!!! tip "Added in 1.4"') == []


def test_version_checks_skip_code():
    assert _lint(version_banners, '```\n--8<-- banner.md\n```') == []

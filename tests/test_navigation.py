"""Tests for heading structure, list numbering and blank-line spacing."""
from material_lint.core.linter.engine import apply_fixes
from material_lint.core.linter.rules.lists import list_auto_numbering
from material_lint.core.linter.rules.navigation import navigation_structure
from material_lint.core.linter.rules.spacing import blank_lines_spacing


def _lint(rule, text):
    return list(rule(text.split("\n")))


def _fixed(rule, text):
    fixed, _ = apply_fixes(text.split("\n"), _lint(rule, text))
    return "\n".join(fixed)


# ---------------------------------------------------------------------------
# Heading hierarchy
# ---------------------------------------------------------------------------


def test_clean_hierarchy():
    text = "# Guide\n\n## Install\n\n### Linux\n\n## Configure"
    assert _lint(navigation_structure, text) == []


def test_skipped_level():
    issues = _lint(navigation_structure, "# A\n\n### C")

    assert len(issues) == 1
    assert issues[0].line_number == 3
    assert "h1 → h3" in issues[0].detail
    assert "Use h2 instead" in issues[0].detail


def test_heading_too_deep():
    issues = _lint(navigation_structure, "# a\n## b\n### c\n#### d\n##### e\n###### f")

    assert len(issues) == 1
    assert issues[0].line_number == 6
    assert "Heading too deep (level 6)" in issues[0].detail


def test_empty_heading():
    assert [i.detail for i in _lint(navigation_structure, "# ")] == ["Heading cannot be empty"]


def test_duplicate_sibling():
    issues = _lint(navigation_structure, "# Guide\n\n## Setup\n\n## Setup")

    assert len(issues) == 1
    assert issues[0].line_number == 5
    assert issues[0].detail.startswith('Duplicate heading "Setup"')


def test_similar_sibling():
    issues = _lint(navigation_structure, "## Installation\n## Installation guide")

    assert len(issues) == 1
    assert 'is very similar to "Installation"' in issues[0].detail


def test_same_title_under_different_parents():
    assert _lint(navigation_structure, "# A\n## Setup\n# B\n## Setup") == []


def test_headings_in_code_and_front_matter_are_ignored():
    assert _lint(navigation_structure, "```\n# not a heading\n### also not\n```") == []
    assert _lint(navigation_structure, "---\n# yaml comment\n---\n# Title") == []


# ---------------------------------------------------------------------------
# Heading style
# ---------------------------------------------------------------------------


def test_vague_heading():
    issues = _lint(navigation_structure, "# Overview")

    assert len(issues) == 1
    assert 'instead of "Overview"' in issues[0].detail


def test_too_many_words():
    issues = _lint(navigation_structure, "# one two three four five six seven eight nine")

    assert len(issues) == 1
    assert issues[0].detail.startswith("Heading has 9 words.")


def test_all_caps_fix():
    issues = _lint(navigation_structure, "# INSTALL GUIDE")

    assert len(issues) == 1
    assert _fixed(navigation_structure, "# INSTALL GUIDE") == "# Install guide"


def test_punctuation_fix():
    issues = _lint(navigation_structure, "# Wait, what?!")

    assert len(issues) == 1
    fixed = _fixed(navigation_structure, "# Wait, what?!")
    assert fixed == "# Wait what"
    assert _lint(navigation_structure, fixed) == []


# ---------------------------------------------------------------------------
# List numbering
# ---------------------------------------------------------------------------


def test_literal_numbering():
    issues = _lint(list_auto_numbering, "1. a\n2. b\n3. c")

    assert [i.line_number for i in issues] == [2, 3]
    assert all(i.fix_info.insert_text == "1" for i in issues)
    assert issues[0].detail == 'Ordered list items should use "1." for auto-numbering (found "2.")'
    assert _fixed(list_auto_numbering, "1. a\n2. b\n3. c") == "1. a\n1. b\n1. c"


def test_auto_numbering_and_other_starts_are_valid():
    assert _lint(list_auto_numbering, "1. a\n1. b\n1. c") == []
    assert _lint(list_auto_numbering, "3. a\n4. b") == []


def test_blank_lines_keep_the_list_open():
    assert [i.line_number for i in _lint(list_auto_numbering, "1. a\n\n2. b")] == [3]


def test_paragraph_ends_the_list():
    assert _lint(list_auto_numbering, "1. a\nParagraph\n2. b") == []


def test_nested_list_is_checked_separately():
    issues = _lint(list_auto_numbering, "1. a\n    1. x\n    2. y")

    assert [i.line_number for i in issues] == [3]
    assert issues[0].fix_info.edit_column == 5


# ---------------------------------------------------------------------------
# Blank-line spacing
# ---------------------------------------------------------------------------


def test_well_spaced_document():
    text = "# Title\n\nText\n\n## Section\n\n```\ncode\n```\n\nMore"
    assert _lint(blank_lines_spacing, text) == []


def test_heading_needs_blank_lines():
    issues = _lint(blank_lines_spacing, "Text\n# Title\nMore")

    assert [(i.line_number, i.detail) for i in issues] == [
        (2, "Headers should be preceded by a blank line"),
        (3, "Headers should be followed by a blank line"),
    ]


def test_spacing_fix_inserts_lines():
    fixed = _fixed(blank_lines_spacing, "Text\n# Title\nMore")

    assert fixed == "Text\n\n# Title\n\nMore"
    assert _lint(blank_lines_spacing, fixed) == []


def test_adjacent_headings_are_exempt():
    assert _lint(blank_lines_spacing, "# A\n## B\n\ntext") == []


def test_code_block_needs_following_blank_line():
    issues = _lint(blank_lines_spacing, "```\ncode\n```\nText")

    assert len(issues) == 1
    assert issues[0].line_number == 4
    assert issues[0].detail == "Code blocks should be followed by a blank line"


def test_code_block_followed_by_heading():
    issues = _lint(blank_lines_spacing, "```\ncode\n```\n# H")

    assert "Code blocks should be followed by a blank line" not in [i.detail for i in issues]


def test_admonition_content_is_not_checked():
    assert _lint(blank_lines_spacing, "!!! note\n    ```\n    code\n    ```\n    Text") == []


def test_heading_right_after_front_matter():
    assert _lint(blank_lines_spacing, "---\ntitle: x\n---\n# Title\n\ntext") == []

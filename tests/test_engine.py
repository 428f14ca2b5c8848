"""Tests for the lint engine: rule selection, severities, fixes and file handling."""
import asyncio
import logging

import pytest

from material_lint.config import Config
from material_lint.core.linter import engine
from material_lint.core.linter.models import Diagnostic, Document, FixEdit, Rule, Severity
from material_lint.core.linter.rules import ALIASES, RULES, find_rule
from material_lint.core.linter.rules import admonitions, code, lists, navigation, spacing, tabs


def _run(coro):
    """Run async coroutine synchronously (avoids pytest-asyncio dep)."""
    return asyncio.run(coro)


def _issue(line_number, edit_column, text, rule="test-rule"):
    fix = FixEdit(line_number=line_number, edit_column=edit_column, delete_count=0, insert_text=text)
    return Diagnostic(rule=rule, line_number=line_number, detail="", fix_info=fix)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def test_registry_lists_every_rule():
    rules = engine.get_available_rules()

    assert len(rules) == 17
    assert "material-shell-language" in rules
    assert rules["material-admonition-types"] == "Material for MkDocs admonitions must use valid types"


def test_aliases_resolve_to_the_same_rule():
    assert find_rule("material-valid-admonition-types") is RULES["material-admonition-types"]
    assert find_rule("list-auto-numbering") is RULES["material-list-auto-numbering"]
    assert find_rule("nope") is None
    assert all(ALIASES[name] is rule for rule in RULES.values() for name in rule.names)


def test_rule_severity_comes_from_tags():
    assert RULES["material-admonition-types"].severity == Severity.ERROR
    assert RULES["material-blank-lines-spacing"].severity == Severity.WARNING
    assert RULES["material-version-banners"].severity == Severity.INFO


# ---------------------------------------------------------------------------
# lint_content / lint_lines
# ---------------------------------------------------------------------------


def test_lint_content_with_selected_rule():
    report = _run(engine.lint_content("!!! nte\n    Body", rules=["material-admonition-types"]))

    assert report.source_path == "<string>"
    assert report.total_issues == 1
    assert report.errors == 1
    assert report.fixable == 1
    assert report.issues[0].severity == Severity.ERROR


def test_alias_selects_rule():
    report = engine.lint_lines(["!!! nte", "    Body"], rules=["material-valid-admonition-types"])
    assert [i.rule for i in report.issues] == ["material-admonition-types"]


def test_unknown_rule_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        report = engine.lint_lines(["# Title"], rules=["no-such-rule"])

    assert report.total_issues == 0
    assert "Unknown rule: no-such-rule" in caplog.text


def test_severity_is_stamped_per_rule():
    report = engine.lint_lines(
        ["1. a", "2. b"],
        rules=["material-list-auto-numbering"]
    )

    assert report.warnings == 1
    assert report.issues[0].severity == Severity.WARNING


def test_config_disables_rules():
    config = Config(disabled_rules=["material-metadata"])
    report = engine.lint_lines(["# Title"], config=config)

    assert all(i.rule != "material-meta-tags" for i in report.issues)


def test_config_enables_only_listed_rules():
    config = Config(enabled_rules=["material-code-blocks"])
    report = engine.lint_lines(["# TITLE", "```python", "x"], config=config)

    assert [i.rule for i in report.issues] == ["material-code-block-syntax"]


def test_explicit_rules_override_config():
    config = Config(disabled_rules=["material-code-block-syntax"])
    report = engine.lint_lines(["```python"], rules=["material-code-block-syntax"], config=config)

    assert report.total_issues == 1


def test_failing_rule_does_not_stop_others(monkeypatch, caplog):
    def explode(lines, config=None):
        raise RuntimeError("boom")

    broken = Rule(names=("material-admonition-types",), description="", tags=("error",), function=explode)
    monkeypatch.setitem(RULES, "material-admonition-types", broken)
    config = Config(enabled_rules=["material-admonition-types", "material-admonition-empty"])

    with caplog.at_level(logging.ERROR):
        report = engine.lint_lines(["!!! note"], config=config)

    assert [i.rule for i in report.issues] == ["material-admonition-empty"]
    assert "Rule material-admonition-types failed: boom" in caplog.text


def test_lint_document_runs_rules_over_lines():
    document = Document(lines=["1. a", "2. b"])
    report = engine.lint_document(document, rules=["material-list-auto-numbering"])

    assert [i.line_number for i in report.issues] == [2]


def test_lint_content_does_not_force_tokenizing():
    """Line rules never read tokens, so the tokenizer is left uncalled."""
    calls = []

    def tokenizer(text):
        calls.append(text)
        return []

    report = _run(engine.lint_content("1. a\n2. b", rules=["material-list-auto-numbering"], tokenizer=tokenizer))

    assert report.total_issues == 1
    assert calls == []


def test_issues_sorted_by_line():
    text = "Intro\n# Title\n1. a\n2. b\n```python\nx"
    report = _run(engine.lint_content(text))

    numbers = [i.line_number for i in report.issues]
    assert numbers == sorted(numbers)
    assert report.total_issues == report.errors + report.warnings + report.infos


# ---------------------------------------------------------------------------
# apply_fixes
# ---------------------------------------------------------------------------


def test_apply_fixes_one_edit_per_line():
    """The lowest-column fix wins when two rules edit the same line."""
    lines = ["abc", "def"]
    issues = [_issue(1, 3, "X", "late"), _issue(1, 1, "Y", "early"), _issue(2, 1, "Z", "other")]

    fixed, rules = engine.apply_fixes(lines, issues)

    assert fixed == ["Yabc", "Zdef"]
    assert rules == ["early", "other"]


def test_apply_fixes_resplits_inserted_lines():
    fixed, _ = engine.apply_fixes(["a", "b"], [_issue(2, 1, "\n")])
    assert fixed == ["a", "", "b"]


def test_apply_fixes_ignores_out_of_range_edits():
    fixed, rules = engine.apply_fixes(["a"], [_issue(5, 1, "x")])

    assert fixed == ["a"]
    assert rules == []


@pytest.mark.parametrize("rule, text", [
    (admonitions.admonition_types, "!!! nte\n    Body"),
    (admonitions.admonition_indentation, "!!! note\n      Six"),
    (tabs.content_tabs, '==== "Tab"\n    Body'),
    (tabs.content_tabs, "=== Tab\n    Body"),
    (code.code_annotations, "```python\nx = 1  // (1)\n```"),
    (code.code_block_syntax, "```python\nx\n```python"),
    (code.shell_language, "```bash\necho hi\n```"),
    (lists.list_auto_numbering, "1. a\n2. b\n3. c"),
    (spacing.blank_lines_spacing, "Text\n# Title\nMore"),
    (navigation.navigation_structure, "# INSTALL GUIDE"),
])
def test_fixes_are_idempotent(rule, text):
    """Re-linting fixed output yields no further diagnostics from the rule."""
    lines = text.split("\n")
    issues = list(rule(lines))
    assert issues

    fixed, _ = engine.apply_fixes(lines, issues)
    assert list(rule(fixed)) == []


# ---------------------------------------------------------------------------
# lint_file
# ---------------------------------------------------------------------------


def test_lint_file_writes_fixes(tmp_path):
    page = tmp_path / "page.md"
    page.write_text("1. a\n2. b\n3. c\n", encoding="utf-8")

    report = _run(engine.lint_file(page, fix=True, rules=["material-list-auto-numbering"]))

    assert report.total_issues == 2
    assert report.fixed == ["material-list-auto-numbering"]
    assert page.read_text(encoding="utf-8") == "1. a\n1. b\n1. c\n"


def test_lint_file_without_fix_leaves_file(tmp_path):
    page = tmp_path / "page.md"
    page.write_text("1. a\n2. b\n", encoding="utf-8")

    report = _run(engine.lint_file(page, rules=["material-list-auto-numbering"]))

    assert report.fixed == []
    assert report.source_path == str(page)
    assert page.read_text(encoding="utf-8") == "1. a\n2. b\n"


def test_lint_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        _run(engine.lint_file(tmp_path / "missing.md"))

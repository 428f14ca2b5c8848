"""Lint engine - runs rules and applies fixes."""
import logging
from pathlib import Path
from typing import Optional

from material_lint.config import Config

from .models import Diagnostic, Document, LintReport
from .rules import RULES, find_rule

logger = logging.getLogger(__name__)


async def lint_file(
    path: Path,
    fix: bool = False,
    rules: Optional[list[str]] = None,
    config: Optional[Config] = None
) -> LintReport:
    """
    Lint a markdown file.

    Args:
        path: Path to the .md file
        fix: If True, apply fixes and write back
        rules: Specific rule ids or aliases to run (default: all enabled)
        config: Thresholds and rule selection (default: built-in defaults)

    Returns:
        LintReport with all issues found
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    content = path.read_text(encoding='utf-8')

    report = await lint_content(content, str(path), rules=rules, config=config)

    if fix and report.fixable > 0:
        fixed_lines, fixed_rules = apply_fixes(content.split('\n'), report.issues)
        report.fixed = fixed_rules

        fixed_content = '\n'.join(fixed_lines)
        if fixed_content != content:
            path.write_text(fixed_content, encoding='utf-8')
            logger.info(f"Wrote fixes from {len(fixed_rules)} rules to {path}")

    return report


async def lint_content(
    content: str,
    source_path: str = "<string>",
    rules: Optional[list[str]] = None,
    config: Optional[Config] = None,
    tokenizer=None
) -> LintReport:
    """
    Lint markdown content.

    Args:
        content: The markdown content to lint
        source_path: Path for reporting (doesn't need to exist)
        rules: Specific rule ids or aliases to run (default: all enabled)
        config: Thresholds and rule selection
        tokenizer: Optional callable producing markdown tokens, run lazily

    Returns:
        LintReport with all issues found
    """
    document = Document.from_text(content, tokenizer=tokenizer)
    return lint_document(document, source_path, rules=rules, config=config)


def lint_lines(
    lines: list[str],
    source_path: str = "<string>",
    rules: Optional[list[str]] = None,
    config: Optional[Config] = None
) -> LintReport:
    """Run rules over already-split lines."""
    return lint_document(Document(lines=lines), source_path, rules=rules, config=config)


def lint_document(
    document: Document,
    source_path: str = "<string>",
    rules: Optional[list[str]] = None,
    config: Optional[Config] = None
) -> LintReport:
    """
    Run rules over a document.

    A rule that raises is logged and skipped; the remaining rules still
    run. Diagnostics are stamped with their rule's severity and sorted by
    line number.
    """
    config = config or Config()
    report = LintReport(source_path=source_path)

    # Determine which rules to run
    if rules:
        selected = []
        for name in rules:
            rule = find_rule(name)
            if rule is None:
                logger.warning(f"Unknown rule: {name}")
            elif rule not in selected:
                selected.append(rule)
    else:
        selected = [rule for rule in RULES.values() if config.is_rule_enabled(rule.names)]

    for rule in selected:
        try:
            for issue in rule.function(document.lines, config):
                issue.severity = rule.severity
                report.add_issue(issue)
        except Exception as e:
            logger.error(f"Rule {rule.name} failed: {e}")

    # Sort issues by line number
    report.issues.sort(key=lambda i: i.line_number)

    return report


def apply_fixes(lines: list[str], issues: list[Diagnostic]) -> tuple[list[str], list[str]]:
    """
    Apply fixes to lines.

    At most one fix is applied per line (the one with the lowest column), so
    overlapping edits never interleave. Lines are edited bottom-up and the
    result is re-split on newlines, which turns blank-line insertions into
    real lines.

    Args:
        lines: Original lines
        issues: Diagnostics from linting

    Returns:
        Tuple of (fixed_lines, sorted list of applied rule ids)
    """
    chosen: dict[int, Diagnostic] = {}
    for issue in issues:
        fix = issue.fix_info
        if fix is None or not 1 <= fix.line_number <= len(lines):
            continue
        current = chosen.get(fix.line_number)
        if current is None or fix.edit_column < current.fix_info.edit_column:
            chosen[fix.line_number] = issue

    if not chosen:
        return list(lines), []

    fixed = list(lines)
    applied_rules: set[str] = set()

    for line_number in sorted(chosen, reverse=True):
        issue = chosen[line_number]
        fixed[line_number - 1] = issue.fix_info.apply(fixed[line_number - 1])
        applied_rules.add(issue.rule)

    return '\n'.join(fixed).split('\n'), sorted(applied_rules)


def get_available_rules() -> dict[str, str]:
    """
    Get list of available rules with descriptions.

    Returns:
        Dict mapping primary rule id to description
    """
    return {name: rule.description for name, rule in RULES.items()}

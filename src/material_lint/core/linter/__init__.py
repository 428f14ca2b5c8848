"""Markdown linter for Material for MkDocs documents."""
from .engine import apply_fixes, get_available_rules, lint_content, lint_document, lint_file, lint_lines
from .models import Diagnostic, Document, FixEdit, LintReport, Rule, Severity

__all__ = [
    "lint_file", "lint_content", "lint_lines", "lint_document", "apply_fixes", "get_available_rules",
    "Diagnostic", "Document", "FixEdit", "LintReport", "Rule", "Severity",
]

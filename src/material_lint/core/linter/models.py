"""Data models for the linter."""
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Callable, Optional


class Severity(Enum):
    """Severity levels for diagnostics, derived from rule tags."""
    ERROR = "error"        # Must address
    WARNING = "warning"    # Needs review
    INFO = "info"          # Advisory only


@dataclass(frozen=True)
class FixEdit:
    """
    A single-line edit proposed for a diagnostic.

    Columns are 1-based. Applying the edit replaces ``delete_count``
    characters starting at ``edit_column`` with ``insert_text``.
    """
    line_number: int
    edit_column: int
    delete_count: int
    insert_text: str

    def apply(self, line: str) -> str:
        """Return ``line`` with this edit applied."""
        start = max(self.edit_column - 1, 0)
        return line[:start] + self.insert_text + line[start + self.delete_count:]

    def to_dict(self) -> dict:
        return {
            "line_number": self.line_number,
            "edit_column": self.edit_column,
            "delete_count": self.delete_count,
            "insert_text": self.insert_text,
        }


@dataclass
class Diagnostic:
    """A single violation found in the document."""
    rule: str
    line_number: int
    detail: str
    context: str = ""
    severity: Severity = Severity.ERROR
    fix_info: Optional[FixEdit] = None

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "line_number": self.line_number,
            "detail": self.detail,
            "context": self.context,
            "fix_info": self.fix_info.to_dict() if self.fix_info else None,
        }


@dataclass(frozen=True)
class Rule:
    """Registration metadata for a rule, consumed by the host."""
    names: tuple[str, ...]
    description: str
    tags: tuple[str, ...]
    function: Callable
    parser: str = "markdownit"

    @property
    def name(self) -> str:
        return self.names[0]

    @property
    def severity(self) -> Severity:
        for severity in Severity:
            if severity.value in self.tags:
                return severity
        return Severity.WARNING


@dataclass
class Document:
    """
    Raw lines of one markdown document.

    ``tokenizer`` is an optional callable supplied by the host that turns the
    source text into a token stream; it is only invoked when ``tokens`` is read.
    """
    lines: list[str]
    tokenizer: Optional[Callable[[str], list[Any]]] = None

    @classmethod
    def from_text(cls, content: str, tokenizer=None) -> "Document":
        return cls(lines=content.split('\n'), tokenizer=tokenizer)

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

    @cached_property
    def tokens(self) -> list[Any]:
        if self.tokenizer is None:
            return []
        return self.tokenizer(self.text)


@dataclass
class LintReport:
    """Complete lint report for a document."""
    source_path: str
    total_issues: int = 0
    fixable: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    issues: list[Diagnostic] = field(default_factory=list)
    fixed: list[str] = field(default_factory=list)

    def add_issue(self, issue: Diagnostic) -> None:
        """Add an issue to the report and update counts."""
        self.issues.append(issue)
        self.total_issues += 1

        if issue.fix_info is not None:
            self.fixable += 1

        if issue.severity == Severity.ERROR:
            self.errors += 1
        elif issue.severity == Severity.WARNING:
            self.warnings += 1
        elif issue.severity == Severity.INFO:
            self.infos += 1

    def to_dict(self) -> dict:
        return {
            "source_path": self.source_path,
            "total_issues": self.total_issues,
            "fixable": self.fixable,
            "errors": self.errors,
            "warnings": self.warnings,
            "infos": self.infos,
            "issues": [i.to_dict() for i in self.issues],
            "fixed": self.fixed
        }

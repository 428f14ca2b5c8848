"""Lint tool implementations."""
import logging
from pathlib import Path

from material_lint.config import Config
from material_lint.core.linter import engine

logger = logging.getLogger(__name__)


def register(mcp, config: Config):
    """Register lint tools with MCP server."""

    @mcp.tool()
    async def lint_document(
        path: str,
        fix: bool = False,
        rules: list[str] | None = None
    ) -> dict:
        """
        Lint a Material for MkDocs markdown page.

        Checks admonitions, content tabs, code blocks and annotations,
        headings, footnotes, icons, math, Mermaid diagrams, front matter,
        tooltips and version banners. Fixable issues (admonition type typos,
        indentation, tab delimiters, list numbering, missing blank lines,
        closing fence languages, ...) can be applied in place.

        Args:
            path: Path to the .md file
            fix: Apply available fixes and write back to file (default: False)
            rules: Rule ids or aliases to run (default: all enabled rules)

        Returns:
            Dictionary with:
            - source_path (str): Path that was linted
            - total_issues (int): Total issues found
            - fixable (int): Issues that carry a fix
            - errors / warnings / infos (int): Counts by severity
            - issues (list): Individual diagnostics with line numbers
            - fixed (list): Rules whose fixes were applied (if fix=True)

        Example:
            {
                "path": "docs/getting-started.md",
                "fix": true,
                "rules": ["material-admonition-types"]
            }
        """
        doc_path = Path(path).expanduser()

        if not doc_path.exists():
            return {"error": f"File not found: {doc_path}"}

        if doc_path.suffix != '.md':
            return {"error": f"Expected .md file, got: {doc_path.suffix}"}

        logger.info(f"Linting {doc_path} (fix={fix}, rules={rules})")

        try:
            report = await engine.lint_file(doc_path, fix=fix, rules=rules, config=config)

            logger.info(
                f"Lint complete: {report.total_issues} issues "
                f"({report.fixable} fixable, {report.errors} errors)"
            )

            if fix and report.fixed:
                logger.info(f"Fixed: {', '.join(report.fixed)}")

            return report.to_dict()

        except Exception as e:
            logger.error(f"Lint failed: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    async def lint_markdown(
        content: str,
        rules: list[str] | None = None
    ) -> dict:
        """
        Lint markdown text without touching the filesystem.

        Args:
            content: Markdown source of one page
            rules: Rule ids or aliases to run (default: all enabled rules)

        Returns:
            The same report dictionary as lint_document, with
            source_path "<string>" and an empty fixed list.
        """
        try:
            report = await engine.lint_content(content, rules=rules, config=config)
            return report.to_dict()
        except Exception as e:
            logger.error(f"Lint failed: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    async def generate_lint_report(
        path: str,
        output_path: str | None = None
    ) -> dict:
        """
        Generate a markdown lint report for manual review.

        Creates a lint-report.md file next to the page (or at output_path)
        listing all issues grouped by rule with line numbers.

        Args:
            path: Path to the .md file to lint
            output_path: Optional custom output path (default: same dir as page)

        Returns:
            Dictionary with:
            - report_path (str): Path to generated report
            - total_issues (int): Total issues found
            - errors (int): Number of error-severity issues
        """
        doc_path = Path(path).expanduser()

        if not doc_path.exists():
            return {"error": f"File not found: {doc_path}"}

        try:
            report = await engine.lint_file(doc_path, fix=False, config=config)
        except Exception as e:
            logger.error(f"Lint failed: {e}", exc_info=True)
            return {"error": str(e)}

        out_path = Path(output_path) if output_path else doc_path.parent / "lint-report.md"
        out_path.write_text(format_report(report, doc_path), encoding="utf-8")

        logger.info(f"Lint report written to {out_path}")

        return {
            "report_path": str(out_path),
            "total_issues": report.total_issues,
            "errors": report.errors
        }

    @mcp.tool()
    async def get_lint_rules() -> dict:
        """
        Get list of available lint rules with descriptions.

        Returns:
            Dictionary mapping rule ids to their descriptions.

        Example response:
            {
                "rules": {
                    "material-admonition-types": "Material for MkDocs admonitions must use valid types",
                    ...
                }
            }
        """
        return {"rules": engine.get_available_rules()}


def format_report(report, path: Path) -> str:
    """Render a report as markdown, one section per rule."""
    lines = [
        f"# Lint Report: {path.stem}",
        "",
        f"**Source:** `{path.name}`",
        f"**Total issues:** {report.total_issues}",
        f"**Fixable:** {report.fixable}",
        f"**Errors:** {report.errors}",
        f"**Warnings:** {report.warnings}",
        "",
        "---",
        "",
    ]

    # Group by rule
    by_rule: dict[str, list] = {}
    for issue in report.issues:
        by_rule.setdefault(issue.rule, []).append(issue)

    for rule, issues in sorted(by_rule.items()):
        lines.append(f"## {rule} ({len(issues)} issues, {issues[0].severity.value})")
        lines.append("")

        for issue in issues:
            msg = issue.detail[:120] + "..." if len(issue.detail) > 120 else issue.detail
            lines.append(f"- **Line {issue.line_number}**: {msg}")

        lines.append("")

    return "\n".join(lines)

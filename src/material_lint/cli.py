"""CLI for material-lint.

Provides direct terminal access to the linter without MCP.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from material_lint import __version__
from material_lint.config import Config
from material_lint.core.linter import engine
from material_lint.core.linter.models import LintReport, Severity
from material_lint.core.linter.rules import RULES

SEVERITY_STYLES = {
    Severity.ERROR: "bold #d75f5f",      # Muted red
    Severity.WARNING: "bold #d7af5f",    # Muted amber
    Severity.INFO: "#5f8787",            # Muted teal
}


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="material-lint",
        description="Lint Material for MkDocs markdown pages"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log progress to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # lint command
    lint = subparsers.add_parser("lint", help="Lint markdown files or directories")
    lint.add_argument("paths", type=Path, nargs="+", help="Markdown files or directories")
    lint.add_argument(
        "--fix", action="store_true",
        help="Apply available fixes and write files back"
    )
    lint.add_argument(
        "--rules",
        help="Comma-separated rule ids or aliases to run (default: all enabled)"
    )
    lint.add_argument(
        "--json", action="store_true",
        help="Print reports as JSON instead of a table"
    )
    lint.add_argument(
        "--config", type=Path,
        help="YAML config file (default: .material-lint.yml if present)"
    )

    # rules command
    subparsers.add_parser("rules", help="List available rules")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    if args.command == "lint":
        sys.exit(asyncio.run(lint_command(args)))
    elif args.command == "rules":
        rules_command()


def collect_markdown_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the .md files below them."""
    files = []
    for path in paths:
        path = path.expanduser()
        if path.is_dir():
            files.extend(sorted(path.rglob("*.md")))
        else:
            files.append(path)
    return files


async def lint_command(args) -> int:
    """Execute the lint command. Returns the process exit code."""
    console = Console()

    try:
        config = Config.load(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 2

    rules = [r.strip() for r in args.rules.split(",") if r.strip()] if args.rules else None
    files = collect_markdown_files(args.paths)
    if not files:
        print("Error: No markdown files found", file=sys.stderr)
        return 2

    reports = []
    for path in files:
        try:
            report = await engine.lint_file(path, fix=args.fix, rules=rules, config=config)
            if report.fixed:
                fixed = report.fixed
                # Report what is left after fixing
                report = await engine.lint_file(path, rules=rules, config=config)
                report.fixed = fixed
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        reports.append(report)

    if args.json:
        print(json.dumps([r.to_dict() for r in reports], indent=2))
    else:
        for report in reports:
            render_report(console, report)
        total = sum(r.total_issues for r in reports)
        console.print(f"{total} issues in {len(reports)} files")

    return 1 if any(r.total_issues for r in reports) else 0


def render_report(console: Console, report: LintReport) -> None:
    """Print one file's diagnostics as a table."""
    if report.fixed:
        console.print(Text(f"{report.source_path}: fixed {', '.join(report.fixed)}", style="dim"))

    if not report.issues:
        return

    table = Table(title=report.source_path, title_justify="left", show_lines=False)
    table.add_column("Line", justify="right", style="bold")
    table.add_column("Severity")
    table.add_column("Rule", style="dim")
    table.add_column("Detail")
    table.add_column("Fix", justify="center")

    for issue in report.issues:
        table.add_row(
            str(issue.line_number),
            Text(issue.severity.value, style=SEVERITY_STYLES[issue.severity]),
            issue.rule,
            issue.detail,
            "✓" if issue.fix_info else ""
        )

    console.print(table)


def rules_command():
    """Execute the rules command."""
    console = Console()

    table = Table(title=f"material-lint v{__version__} rules", title_justify="left")
    table.add_column("Rule", style="bold")
    table.add_column("Aliases", style="dim")
    table.add_column("Severity")
    table.add_column("Description")

    for name, rule in RULES.items():
        table.add_row(
            name,
            ", ".join(rule.names[1:]),
            Text(rule.severity.value, style=SEVERITY_STYLES[rule.severity]),
            rule.description
        )

    console.print(table)


if __name__ == "__main__":
    main()

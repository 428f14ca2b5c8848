"""Content tab rules."""
import re
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..fixes import generate_indentation_fix, generate_tab_delimiter_fix, round_up_indent
from ..models import Diagnostic
from ..syntax import (
    PARTIAL_TAB,
    UNQUOTED_TAB,
    has_tab_indent,
    is_blank,
    leading_spaces,
    leading_whitespace,
    match_tab_delimiter,
)

_SETEXT_UNDERLINE = re.compile(r'^=+$')


def content_tabs(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check ``=== "Title"`` content tab delimiters and the content below them.

    A delimiter must use exactly three equals signs and a quoted, non-empty
    title. Content inside a tab group is indented in steps of four spaces;
    the first non-blank line at column 0 ends the group.
    """
    config = config or Config()
    fences = FenceTracker()
    in_group = False

    for line_number, line in enumerate(lines, 1):
        if is_blank(line):
            continue

        transition = fences.feed(line, line_number)
        if fences.inside and transition == Transition.NONE:
            continue

        stripped = line.strip()
        delimiter = match_tab_delimiter(stripped)

        if delimiter:
            equals, title = delimiter.groups()

            if in_group and leading_spaces(line) > 0:
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail="Nested content tabs are not supported. Use separate tab groups instead",
                    context=line
                )
                continue

            in_group = True

            if len(equals) != 3:
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail=f'Content tabs must use exactly "===" delimiter (found {len(equals)} equals)',
                    context=line,
                    fix_info=generate_tab_delimiter_fix(line_number, line, title)
                )
                continue

            if len(title) > config.tab_title_max_length:
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail=(
                        f"Tab title is too long ({len(title)} chars). "
                        f"Keep under {config.tab_title_max_length} characters for better UX"
                    ),
                    context=line
                )

            if not title.strip():
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail="Tab title cannot be empty",
                    context=line
                )
            continue

        unquoted = UNQUOTED_TAB.match(stripped)
        if unquoted:
            title = unquoted.group(2).strip()
            yield Diagnostic(
                rule="material-content-tabs",
                line_number=line_number,
                detail=f'Tab title must be quoted. Use === "{title}" instead',
                context=line,
                fix_info=generate_tab_delimiter_fix(line_number, line, title)
            )
            continue

        if PARTIAL_TAB.match(stripped):
            yield Diagnostic(
                rule="material-content-tabs",
                line_number=line_number,
                detail='Possible malformed tab delimiter. Use === "Title" for content tabs',
                context=line
            )
            continue

        if in_group:
            if has_tab_indent(line):
                width = len(leading_whitespace(line).expandtabs(4))
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail="Tab content must be indented with spaces, not tabs",
                    context=line,
                    fix_info=generate_indentation_fix(line_number, line, round_up_indent(width))
                )
                continue

            spaces = leading_spaces(line)
            if spaces == 0:
                in_group = False
            elif spaces % 4 != 0:
                yield Diagnostic(
                    rule="material-content-tabs",
                    line_number=line_number,
                    detail=f"Tab content should use 4-space indentation (found {spaces} spaces)",
                    context=line,
                    fix_info=generate_indentation_fix(line_number, line, round_up_indent(spaces))
                )
                continue

        # Setext heading underline
        if _SETEXT_UNDERLINE.match(stripped) and len(stripped) > 2:
            yield Diagnostic(
                rule="material-content-tabs",
                line_number=line_number,
                detail=(
                    'If this is intended as a tab delimiter, use === "Title" format. '
                    "For markdown headings, use # syntax instead of underlines"
                ),
                context=line
            )

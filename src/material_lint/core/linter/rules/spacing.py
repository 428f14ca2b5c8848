"""Blank-line spacing around headings and code blocks."""
from typing import Generator

from material_lint.config import Config

from ..blocks import AdmonitionTracker, FenceTracker, Transition
from ..fixes import generate_blank_line_fix
from ..models import Diagnostic
from ..syntax import front_matter_end, is_blank, is_heading


def _needs_gap(neighbor: str | None) -> bool:
    """True when a neighboring line is text that should be separated by a blank line."""
    return neighbor is not None and not is_blank(neighbor) and not is_heading(neighbor)


def blank_lines_spacing(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Headings need a blank line on both sides, code blocks one after.

    Adjacent headings and document boundaries are exempt, and a code block
    may be followed directly by a heading. Content inside admonitions is
    not checked. Each diagnostic carries a fix inserting the missing line.
    """
    fences = FenceTracker()
    admonitions = AdmonitionTracker()
    front_matter = front_matter_end(lines)
    body_start = front_matter + 1 if front_matter is not None else 0

    for index in range(body_start, len(lines)):
        line = lines[index]
        line_number = index + 1
        following = lines[index + 1] if index + 1 < len(lines) else None

        if not fences.inside and admonitions.feed(line, line_number) == Transition.OPENED:
            continue

        transition = fences.feed(line, line_number)
        if transition == Transition.CLOSED:
            if not admonitions.inside and _needs_gap(following):
                yield Diagnostic(
                    rule="material-blank-lines-spacing",
                    line_number=line_number + 1,
                    detail="Code blocks should be followed by a blank line",
                    context=following,
                    fix_info=generate_blank_line_fix(line_number + 1)
                )
            continue

        if fences.inside or admonitions.inside or not is_heading(line):
            continue

        previous = lines[index - 1] if index > 0 else None
        if index != body_start and _needs_gap(previous):
            yield Diagnostic(
                rule="material-blank-lines-spacing",
                line_number=line_number,
                detail="Headers should be preceded by a blank line",
                context=line,
                fix_info=generate_blank_line_fix(line_number)
            )

        if _needs_gap(following):
            yield Diagnostic(
                rule="material-blank-lines-spacing",
                line_number=line_number + 1,
                detail="Headers should be followed by a blank line",
                context=following,
                fix_info=generate_blank_line_fix(line_number + 1)
            )

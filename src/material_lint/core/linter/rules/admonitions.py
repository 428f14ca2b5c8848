"""Admonition rules: type vocabulary, content indentation, empty bodies."""
from typing import Generator

from material_lint.config import Config

from ..blocks import AdmonitionTracker, FenceTracker, Transition
from ..constants import ADMONITION_TYPES
from ..fixes import generate_admonition_type_fix, generate_indentation_fix, round_up_indent
from ..models import Diagnostic
from ..syntax import (
    has_tab_indent,
    is_admonition_start,
    is_blank,
    leading_spaces,
    leading_whitespace,
    match_admonition,
)
from ..text import closest_match


def admonition_types(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Flag admonitions whose type is not a supported Material type.

    Types are case-sensitive. When a valid type is within a few edits of the
    invalid one, the diagnostic suggests it and carries a fix that replaces
    only the type token. Markers inside fenced code are examples, not
    admonitions, and are skipped.
    """
    config = config or Config()
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        marker = match_admonition(line)
        if marker is None or marker.kind in ADMONITION_TYPES:
            continue

        detail = (
            f'Invalid admonition type: "{marker.kind}". '
            f'Valid types are: {", ".join(ADMONITION_TYPES)}'
        )
        fix = None

        suggestion = closest_match(marker.kind, ADMONITION_TYPES, config.suggestion_max_distance)
        if suggestion:
            detail += f'. Did you mean "{suggestion}"?'
            fix = generate_admonition_type_fix(line_number, line, marker.kind, suggestion)

        yield Diagnostic(
            rule="material-admonition-types",
            line_number=line_number,
            detail=detail,
            context=line,
            fix_info=fix
        )


def admonition_indentation(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Flag admonition content that is not indented with spaces in steps of four.

    Tabs in the leading whitespace are always reported, in preference to the
    indentation-multiple check. Lines inside fenced code within the
    admonition are not checked; the fence lines themselves are.
    """
    config = config or Config()
    multiple = config.admonition_indent_multiple
    admonitions = AdmonitionTracker()
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if not admonitions.inside:
            if fences.feed(line, line_number) != Transition.NONE or fences.inside:
                continue

        transition = admonitions.feed(line, line_number)
        if transition == Transition.OPENED:
            fences = FenceTracker()
            continue

        if not admonitions.inside:
            # The line that ended the admonition may open a top-level fence
            fences = FenceTracker()
            fences.feed(line, line_number)
            continue

        if is_blank(line):
            continue

        fence_transition = fences.feed(line, line_number)
        if fences.inside and fence_transition == Transition.NONE:
            continue

        if has_tab_indent(line):
            width = len(leading_whitespace(line).expandtabs(multiple))
            yield Diagnostic(
                rule="material-admonition-indentation",
                line_number=line_number,
                detail="Admonition content must use spaces, not tabs",
                context=line,
                fix_info=generate_indentation_fix(line_number, line, round_up_indent(width, multiple))
            )
            continue

        spaces = leading_spaces(line)
        if spaces % multiple != 0:
            correct = round_up_indent(spaces, multiple)
            yield Diagnostic(
                rule="material-admonition-indentation",
                line_number=line_number,
                detail=(
                    f"Admonition content must be indented in multiples of {multiple} spaces "
                    f"(expected {correct}, found {spaces})"
                ),
                context=line,
                fix_info=generate_indentation_fix(line_number, line, correct)
            )


def admonition_empty(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Flag admonitions with no indented content.

    The first non-blank line after the marker decides: it must be indented
    at least four spaces past the marker. A common mistake is forgetting to
    indent the body, so the detail names that line when there is one.
    """
    fences = FenceTracker()

    for index, line in enumerate(lines):
        line_number = index + 1
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        marker = match_admonition(line)
        if marker is None:
            continue

        content_indent = marker.indent + 4
        next_index = None
        has_content = False

        for candidate in range(index + 1, len(lines)):
            following = lines[candidate]
            if is_blank(following):
                continue
            next_index = candidate
            has_content = leading_spaces(following) >= content_indent or has_tab_indent(following)
            break

        if has_content:
            continue

        detail = "Admonition has no content. "
        if next_index is not None and not is_admonition_start(lines[next_index]):
            detail += (
                f"Content on line {next_index + 1} needs to be indented with at least "
                f"{content_indent} spaces to be part of the admonition."
            )
        else:
            detail += "Add content indented with 4 spaces after the admonition marker."

        yield Diagnostic(
            rule="material-admonition-empty",
            line_number=line_number,
            detail=detail,
            context=line
        )

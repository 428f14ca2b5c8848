"""Ordered list numbering rules."""
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..fixes import generate_list_number_fix
from ..models import Diagnostic
from ..syntax import is_blank, is_unordered_item, match_ordered_item


def list_auto_numbering(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Lists that start at 1 should number every item ``1.``.

    Markdown renumbers the items itself, so literal numbering only creates
    churn when items are inserted. Items at a new indent start a new list.
    Blank lines and unordered items leave the current list open; any other
    text ends it.
    """
    fences = FenceTracker()
    list_indent = None
    start_number = None

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        item = match_ordered_item(line)
        if item is None:
            if not is_blank(line) and not is_unordered_item(line):
                list_indent = None
                start_number = None
            continue

        indent = len(item.group(1))
        digits = item.group(2)

        if list_indent is None or indent != list_indent:
            list_indent = indent
            start_number = int(digits)

        if start_number == 1 and int(digits) != 1:
            yield Diagnostic(
                rule="material-list-auto-numbering",
                line_number=line_number,
                detail=f'Ordered list items should use "1." for auto-numbering (found "{int(digits)}.")',
                context=line,
                fix_info=generate_list_number_fix(line_number, indent, digits)
            )

"""
Fix generators.

Each generator receives parameters a rule has already detected and returns
a single-line ``FixEdit`` (or None when the line does not have the shape
the fix expects). Generators never scan the document themselves.
"""
import math
import re
from typing import Optional

from .models import FixEdit
from .syntax import ADMONITION_START, Fence

_HEADING_PREFIX = re.compile(r'^( {0,3}#{1,6}\s+)')
_HEADING_PUNCTUATION = re.compile(r'[!?.:;,]+')


def generate_admonition_type_fix(
    line_number: int,
    line: str,
    invalid_type: str,
    suggested_type: str
) -> Optional[FixEdit]:
    """Replace only the admonition type token."""
    match = ADMONITION_START.match(line)
    if not match or match.group(2) != invalid_type:
        return None

    return FixEdit(
        line_number=line_number,
        edit_column=len(match.group(1)) + 1,
        delete_count=len(invalid_type),
        insert_text=suggested_type
    )


def round_up_indent(spaces: int, multiple: int = 4) -> int:
    """Smallest positive multiple of ``multiple`` that is >= ``spaces``."""
    return max(multiple, math.ceil(spaces / multiple) * multiple)


def generate_indentation_fix(line_number: int, line: str, correct_spaces: int) -> FixEdit:
    """Rewrite the whole line with ``correct_spaces`` spaces of indentation."""
    return FixEdit(
        line_number=line_number,
        edit_column=1,
        delete_count=len(line),
        insert_text=' ' * correct_spaces + line.lstrip(' \t')
    )


def generate_tab_delimiter_fix(line_number: int, line: str, title: str) -> FixEdit:
    """Rewrite the line as a canonical ``=== "Title"`` delimiter."""
    indent = line[:len(line) - len(line.lstrip(' '))]
    return FixEdit(
        line_number=line_number,
        edit_column=1,
        delete_count=len(line),
        insert_text=f'{indent}=== "{title.strip()}"'
    )


def generate_annotation_comment_fix(
    line_number: int,
    line: str,
    annotation: str,
    wrong_style: str,
    correct_style: str
) -> Optional[FixEdit]:
    """
    Swap the comment token in front of a code annotation.

    HTML-style comments wrap the annotation (``<!-- (1) -->``) instead of
    prefixing it; a trailing ``-->`` is consumed when replacing one.
    """
    pattern = re.escape(wrong_style) + r'\s*' + re.escape(annotation)
    if wrong_style == '<!--':
        pattern += r'(?:\s*-->)?'

    match = re.search(pattern, line)
    if not match:
        return None

    if correct_style == '<!--':
        replacement = f'<!-- {annotation} -->'
    else:
        replacement = f'{correct_style} {annotation}'

    return FixEdit(
        line_number=line_number,
        edit_column=match.start() + 1,
        delete_count=match.end() - match.start(),
        insert_text=replacement
    )


def generate_heading_case_fix(line_number: int, line: str, heading_text: str) -> Optional[FixEdit]:
    """Convert an ALL CAPS heading to sentence case."""
    match = _HEADING_PREFIX.match(line)
    if not match or not heading_text:
        return None

    sentence_case = heading_text[0].upper() + heading_text[1:].lower()
    return FixEdit(
        line_number=line_number,
        edit_column=len(match.group(1)) + 1,
        delete_count=len(heading_text),
        insert_text=sentence_case
    )


def generate_punctuation_fix(line_number: int, line: str, heading_text: str) -> Optional[FixEdit]:
    """Strip punctuation marks from a heading."""
    match = _HEADING_PREFIX.match(line)
    if not match:
        return None

    cleaned = _HEADING_PUNCTUATION.sub('', heading_text)
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()
    return FixEdit(
        line_number=line_number,
        edit_column=len(match.group(1)) + 1,
        delete_count=len(heading_text),
        insert_text=cleaned
    )


def generate_fence_close_fix(line_number: int, line: str, fence: Fence) -> FixEdit:
    """Drop the info string from a closing fence."""
    return FixEdit(
        line_number=line_number,
        edit_column=1,
        delete_count=len(line),
        insert_text=' ' * fence.indent + fence.marker
    )


def generate_shell_language_fix(line_number: int, line: str, fence: Fence) -> Optional[FixEdit]:
    """Replace the fence language token with ``shell``, keeping attributes."""
    language = fence.language
    if not language:
        return None

    start = line.find(language, fence.indent + len(fence.marker))
    if start < 0:
        return None

    return FixEdit(
        line_number=line_number,
        edit_column=start + 1,
        delete_count=len(language),
        insert_text='shell'
    )


def generate_list_number_fix(line_number: int, indent: int, number: str) -> FixEdit:
    """Replace an ordered list item's number with ``1``."""
    return FixEdit(
        line_number=line_number,
        edit_column=indent + 1,
        delete_count=len(number),
        insert_text='1'
    )


def generate_blank_line_fix(line_number: int) -> FixEdit:
    """Insert a blank line above ``line_number``."""
    return FixEdit(
        line_number=line_number,
        edit_column=1,
        delete_count=0,
        insert_text='\n'
    )

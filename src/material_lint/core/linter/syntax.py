"""
Named grammar predicates for the block constructs the rules recognize.

Every pattern is anchored and every predicate is a pure function of one
line, so the rules can compose them (a fence inside an admonition inside a
tab group) without re-declaring the regexes.
"""
import re
from typing import NamedTuple, Optional

ADMONITION_START = re.compile(r'^(\s*(?:\?\?\?\+?|!!!)\s+)(\S+)(?=\s|$)')
FENCE = re.compile(r'^(\s*)(`{3,}|~{3,})(.*)$')
HEADING = re.compile(r'^ {0,3}(#{1,6})\s+(.*?)$')
TAB_DELIMITER = re.compile(r'^(=+)\s*"([^"]*)"\s*$')
UNQUOTED_TAB = re.compile(r'^(={3,})\s+([^"=\s][^"]*?)\s*$')
PARTIAL_TAB = re.compile(r'^(?:={1,2}|={4,})\s')
ORDERED_ITEM = re.compile(r'^(\s*)(\d+)\.\s+')
UNORDERED_ITEM = re.compile(r'^\s*[-*+]\s+')
LEADING_WHITESPACE = re.compile(r'^[ \t]*')


class AdmonitionMarker(NamedTuple):
    indent: int
    prefix: str      # marker plus trailing whitespace, including indentation
    kind: str        # the type token, e.g. "note"


class Fence(NamedTuple):
    indent: int
    marker: str      # the run of backticks or tildes
    info: str        # everything after the marker, stripped

    @property
    def language(self) -> Optional[str]:
        """First word of the info string, without attribute-list braces."""
        if not self.info:
            return None
        first = self.info.split()[0].strip('{}').lstrip('.')
        return first or None


class Heading(NamedTuple):
    level: int
    text: str


def leading_spaces(line: str) -> int:
    """Number of space characters before the first non-space."""
    return len(line) - len(line.lstrip(' '))


def leading_whitespace(line: str) -> str:
    return LEADING_WHITESPACE.match(line).group(0)


def has_tab_indent(line: str) -> bool:
    """True when the leading whitespace contains a tab."""
    return '\t' in leading_whitespace(line)


def is_blank(line: str) -> bool:
    return line.strip() == ''


def match_admonition(line: str) -> Optional[AdmonitionMarker]:
    match = ADMONITION_START.match(line)
    if not match:
        return None
    prefix = match.group(1)
    return AdmonitionMarker(
        indent=len(prefix) - len(prefix.lstrip()),
        prefix=prefix,
        kind=match.group(2),
    )


def is_admonition_start(line: str) -> bool:
    return ADMONITION_START.match(line) is not None


def match_fence(line: str) -> Optional[Fence]:
    match = FENCE.match(line)
    if not match:
        return None
    marker = match.group(2)
    info = match.group(3).strip()
    # A backtick fence's info string may not contain backticks
    if marker.startswith('`') and '`' in info:
        return None
    return Fence(indent=len(match.group(1)), marker=marker, info=info)


def is_fence(line: str) -> bool:
    return match_fence(line) is not None


def is_math_delimiter(line: str) -> bool:
    """A ``$$`` alone on its line opens or closes block math."""
    return line.strip() == '$$'


def match_heading(line: str) -> Optional[Heading]:
    match = HEADING.match(line)
    if not match:
        return None
    text = re.sub(r'\s+#+\s*$', '', match.group(2)).strip()
    return Heading(level=len(match.group(1)), text=text)


def is_heading(line: str) -> bool:
    return HEADING.match(line) is not None


def match_tab_delimiter(line: str) -> Optional[re.Match]:
    """Quoted tab delimiter on an already-stripped line."""
    return TAB_DELIMITER.match(line)


def match_ordered_item(line: str) -> Optional[re.Match]:
    return ORDERED_ITEM.match(line)


def is_unordered_item(line: str) -> bool:
    return UNORDERED_ITEM.match(line) is not None


def front_matter_end(lines: list[str]) -> Optional[int]:
    """
    Index of the closing ``---`` of a leading front matter block.

    Returns None when the document does not open with front matter or the
    block is never closed.
    """
    if not lines or lines[0].strip() != '---':
        return None

    for index in range(1, len(lines)):
        if lines[index].strip() == '---':
            return index
    return None

"""
LaTeX/MathJax math rules.

Block math is either a ``$$`` line pair or ``$$...$$`` on one line. Both are
validated as block math and masked out before inline ``$...$`` spans are
scanned, so a display formula is never mistaken for two inline ones.
"""
import re
from typing import Generator, Optional

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..constants import DISPLAY_ONLY_COMMANDS, LATEX_ENVIRONMENTS
from ..models import Diagnostic
from ..syntax import is_math_delimiter

RULE = "material-math-blocks"

INLINE_CODE = re.compile(r'`[^`]*`')
SINGLE_LINE_BLOCK = re.compile(r'\$\$(.*?)\$\$')
INLINE_MATH = re.compile(r'\$([^$\n]+)\$')
FRAC = re.compile(r'\\frac(?![A-Za-z])')
SQRT = re.compile(r'\\sqrt(?![A-Za-z])')

FRAC_HINT = r"\frac should have two arguments: \frac{numerator}{denominator}"
SQRT_HINT = r"\sqrt should have content: \sqrt{content} or \sqrt[n]{content}"


def _blank_out(match: re.Match) -> str:
    return ' ' * len(match.group(0))


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in ' \t\n':
        pos += 1
    return pos


def _read_group(text: str, pos: int, opening: str = '{', closing: str = '}') -> Optional[int]:
    """Position just past the balanced group starting at ``pos``, or None."""
    if pos >= len(text) or text[pos] != opening:
        return None

    depth = 0
    while pos < len(text):
        char = text[pos]
        if char == '\\':
            pos += 2
            continue
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return pos + 1
        pos += 1
    return None


def _command_errors(content: str) -> list[str]:
    """Argument structure of \\frac and \\sqrt, at most one message each."""
    errors = []

    for match in FRAC.finditer(content):
        first = _read_group(content, _skip_spaces(content, match.end()))
        second = _read_group(content, _skip_spaces(content, first)) if first else None
        if second is None:
            errors.append(FRAC_HINT)
            break

    for match in SQRT.finditer(content):
        pos = _skip_spaces(content, match.end())
        if pos < len(content) and content[pos] == '[':
            pos = _read_group(content, pos, '[', ']')
        if pos is None or _read_group(content, _skip_spaces(content, pos)) is None:
            errors.append(SQRT_HINT)
            break

    return errors


def _count_unescaped(content: str, char: str) -> int:
    return len(re.findall(r'(?<!\\)' + re.escape(char), content))


def validate_math(content: str, kind: str, config: Config) -> list[str]:
    """
    Validate the body of one math span.

    ``kind`` is "inline" or "block" and only changes the wording and the
    inline-only checks. Returns diagnostic details in a stable order.
    """
    if not content.strip():
        return [f"Empty {kind} math block. Add mathematical content or remove the delimiters."]

    details = _command_errors(content)

    unescaped = content.replace('\\{', '').replace('\\}', '')
    if not details and unescaped.count('{') != unescaped.count('}'):
        details.append(f"Unmatched braces in {kind} math. Check that all {{ have corresponding }}.")
    if content.count('(') != content.count(')'):
        details.append(f"Unmatched parentheses in {kind} math. Check that all ( have corresponding ).")
    if content.count('[') != content.count(']'):
        details.append(f"Unmatched square brackets in {kind} math. Check that all [ have corresponding ].")

    for env in LATEX_ENVIRONMENTS:
        begins = content.count(f'\\begin{{{env}}}')
        ends = content.count(f'\\end{{{env}}}')
        if begins != ends:
            details.append(f"Unmatched \\begin{{{env}}} and \\end{{{env}}} in math block.")

    if kind == "inline":
        if len(content) > config.inline_math_max_length:
            details.append(
                "Long mathematical expression should use block math ($$) instead of inline math ($)."
            )
        for command in DISPLAY_ONLY_COMMANDS:
            if command in content:
                details.append(f"{command} should be used in block math ($$) rather than inline math ($).")

    if _count_unescaped(content, '_') % 2:
        details.append(
            "Uneven number of underscores in math may conflict with markdown emphasis. "
            "Consider escaping with \\_."
        )
    if _count_unescaped(content, '*') % 2:
        details.append(
            "Uneven number of asterisks in math may conflict with markdown emphasis. "
            "Consider escaping with \\*."
        )

    return details


def _scan_line(line_number: int, line: str, config: Config) -> Generator[Diagnostic, None, None]:
    # Inline code and escaped dollars are literal text
    masked = INLINE_CODE.sub(_blank_out, line).replace('\\$', '  ')

    for match in SINGLE_LINE_BLOCK.finditer(masked):
        content = line[match.start(1):match.end(1)]
        for detail in validate_math(content, "block", config):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=detail,
                             context=line[match.start():match.end()])
    masked = SINGLE_LINE_BLOCK.sub(_blank_out, masked)

    for _ in re.finditer(r'\$\$', masked):
        for detail in validate_math('', "inline", config):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=detail, context='$$')
    masked = masked.replace('$$', '  ')

    for match in INLINE_MATH.finditer(masked):
        content = line[match.start(1):match.end(1)]
        for detail in validate_math(content, "inline", config):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=detail,
                             context=line[match.start():match.end()])
    masked = INLINE_MATH.sub(_blank_out, masked)

    if '$' in masked:
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail="Single $ may conflict with math syntax. Use $$ for block math or escape with \\$ if literal.",
            context=line
        )

    for env in LATEX_ENVIRONMENTS:
        if f'\\begin{{{env}}}' in masked:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=f"LaTeX environment \\begin{{{env}}} should be inside math delimiters ($$ or $).",
                context=line
            )


def math_blocks(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Validate block and inline math.

    Checks brace, parenthesis and bracket balance, \\frac and \\sqrt
    arguments, environment pairing, inline spans that belong in block math,
    and emphasis markers that markdown would consume. Fenced code is skipped.
    """
    config = config or Config()
    fences = FenceTracker()
    block_start = None
    block_lines: list[str] = []

    for line_number, line in enumerate(lines, 1):
        if block_start is not None:
            if not is_math_delimiter(line):
                block_lines.append(line)
                continue

            content = '\n'.join(block_lines)
            if not content.strip():
                yield Diagnostic(
                    rule=RULE,
                    line_number=block_start,
                    detail="Math block is empty. Add mathematical content between the $$ delimiters.",
                    context='$$'
                )
            else:
                for detail in validate_math(content, "block", config):
                    yield Diagnostic(rule=RULE, line_number=block_start, detail=detail,
                                     context=f'$$\n{content}\n$$')
            block_start = None
            block_lines = []
            continue

        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        if is_math_delimiter(line):
            block_start = line_number
            continue

        yield from _scan_line(line_number, line, config)

    if block_start is not None:
        yield Diagnostic(
            rule=RULE,
            line_number=block_start,
            detail="Math block is not properly closed with $$.",
            context='$$'
        )

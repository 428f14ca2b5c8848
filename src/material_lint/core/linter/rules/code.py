"""Fenced code rules: annotation comment style, fence syntax, shell language."""
import re
from typing import Generator, NamedTuple

from material_lint.config import Config

from ..blocks import AdmonitionTracker, FenceTracker, Transition
from ..constants import KNOWN_COMMENT_TOKENS, SHELL_ALIASES
from ..fixes import (
    generate_annotation_comment_fix,
    generate_fence_close_fix,
    generate_shell_language_fix,
)
from ..models import Diagnostic
from ..syntax import match_fence
from ..text import get_annotation_pattern, get_comment_style


class _OpenFence(NamedTuple):
    line_number: int
    indent: int
    marker: str
    line: str


def _expected_annotation(style: str, annotation: str) -> str:
    if style == '<!--':
        return f'<!-- {annotation} -->'
    return f'{style} {annotation}'


def _has_comment_style(line: str, style: str, annotation: str) -> bool:
    pattern = re.escape(style) + r'\s*' + re.escape(annotation)
    if style == '<!--':
        pattern += r'\s*-->'
    return re.search(pattern, line) is not None


def code_annotations(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Flag code annotations written with another language's comment token.

    Material only recognizes an annotation marker like ``(1)`` when it sits
    in a comment of the block's own language. Blocks in languages without a
    known comment style are skipped, as are markers with no comment at all.
    """
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.NONE or not fences.inside:
            continue

        language = fences.language
        expected = get_comment_style(language)
        if not expected:
            continue

        annotation = get_annotation_pattern(line)
        if not annotation or _has_comment_style(line, expected, annotation):
            continue

        found = next(
            (token for token in KNOWN_COMMENT_TOKENS
             if token != expected and f'{token} {annotation}' in line),
            None
        )
        if found is None:
            continue

        yield Diagnostic(
            rule="material-code-annotations",
            line_number=line_number,
            detail=(
                f"Code annotation should use {language} comment style. "
                f'Expected "{_expected_annotation(expected, annotation)}" format, '
                f'found "{found}" style'
            ),
            context=line,
            fix_info=generate_annotation_comment_fix(line_number, line, annotation, found, expected)
        )


def _enclosing_depth(stack: list[_OpenFence], fence) -> int | None:
    """Index of the innermost open fence this fence can close by exact indent."""
    for depth in range(len(stack) - 1, -1, -1):
        opened = stack[depth]
        if (opened.indent == fence.indent and opened.marker[0] == fence.marker[0]
                and len(fence.marker) >= len(opened.marker)):
            return depth
    return None


def code_block_syntax(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check that fences are closed and that closing fences carry no language.

    Open fences are kept on a stack keyed by indentation. A fence with a
    different character or a shorter run than the innermost open fence is
    block content. Outside an admonition a fence at the same indent closes
    the innermost block, even with a language (reported). A shallower fence
    closes the enclosing block with that exact indent, and the blocks nested
    inside it are reported as unclosed; failing an exact match, a shallower
    bare fence closes the innermost block. A deeper fence opens a nested
    block. Inside an admonition only an exact indent match closes.
    """
    stack: list[_OpenFence] = []
    abandoned: list[_OpenFence] = []
    admonitions = AdmonitionTracker()

    for line_number, line in enumerate(lines, 1):
        if admonitions.feed(line, line_number) == Transition.OPENED:
            continue

        fence = match_fence(line)
        if fence is None:
            continue

        closing = False
        if stack:
            last = stack[-1]
            if fence.marker[0] != last.marker[0] or len(fence.marker) < len(last.marker):
                continue  # block content

            if admonitions.inside:
                closing = fence.indent == last.indent
            elif fence.indent == last.indent:
                closing = True
            elif fence.indent < last.indent:
                depth = _enclosing_depth(stack, fence)
                if depth is not None:
                    abandoned.extend(stack[depth + 1:])
                    del stack[depth + 1:]
                    closing = True
                elif not fence.info:
                    closing = True

        if not closing:
            stack.append(_OpenFence(line_number, fence.indent, fence.marker, line.strip()))
            continue

        stack.pop()
        if fence.info:
            yield Diagnostic(
                rule="material-code-block-syntax",
                line_number=line_number,
                detail="Code block closing tags must not have a language type (use ``` only)",
                context=line,
                fix_info=generate_fence_close_fix(line_number, line, fence)
            )

    for unclosed in sorted(abandoned + stack, key=lambda f: f.line_number):
        yield Diagnostic(
            rule="material-code-block-syntax",
            line_number=unclosed.line_number,
            detail="Code block is not closed (missing closing ```)",
            context=unclosed.line
        )


def shell_language(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """Fences tagged bash, sh or zsh should use ``shell`` for consistent highlighting."""
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.OPENED:
            continue

        fence = fences.fence
        language = fence.language
        if not language or language.lower() not in SHELL_ALIASES:
            continue

        yield Diagnostic(
            rule="material-shell-language",
            line_number=line_number,
            detail=f'Use "shell" instead of "{language}" as the code block language',
            context=line,
            fix_info=generate_shell_language_fix(line_number, line, fence)
        )

"""Mermaid diagram rules."""
import re
from typing import Generator, NamedTuple, Optional

from material_lint.config import Config

from ..constants import FLOWCHART_DIRECTIONS, MERMAID_DIAGRAM_TYPES
from ..models import Diagnostic

RULE = "material-mermaid-syntax"

MERMAID_OPENERS = ('```mermaid', '``` mermaid')
DIRECTION = re.compile(r'\b(?:' + '|'.join(FLOWCHART_DIRECTIONS) + r')\b')
NODE_SHAPES = (
    re.compile(r'[A-Za-z0-9]+\[.*\]'),
    re.compile(r'[A-Za-z0-9]+\(.*\)'),
    re.compile(r'[A-Za-z0-9]+\{.*\}'),
)
MESSAGE_ARROW = re.compile(r'[A-Za-z0-9]+\s*->')
CLASS_DECLARATION = re.compile(r'class\s+[A-Za-z0-9]+|[A-Za-z0-9]+\s*:')
BALANCED_PAIRS = (
    ('[', ']', "Unmatched square brackets in Mermaid diagram."),
    ('(', ')', "Unmatched parentheses in Mermaid diagram."),
    ('{', '}', "Unmatched curly braces in Mermaid diagram."),
)


class DiagramLine(NamedTuple):
    line_number: int
    content: str


def detect_diagram_type(body: list[DiagramLine]) -> Optional[str]:
    """
    Diagram keyword from the first content line.

    Falls back to the first keyword found anywhere in the block. Matching is
    case-insensitive; the canonical keyword is returned.
    """
    first = next((line.content.strip() for line in body if line.content.strip()), '')
    first_word = first.split()[0].lower() if first else ''

    for diagram_type in MERMAID_DIAGRAM_TYPES:
        if first_word.startswith(diagram_type.lower()):
            return diagram_type

    text = '\n'.join(line.content for line in body).lower()
    for diagram_type in MERMAID_DIAGRAM_TYPES:
        if diagram_type.lower() in text:
            return diagram_type
    return None


def _validate_diagram(start_line: int, body: list[DiagramLine]) -> Generator[Diagnostic, None, None]:
    content_lines = [line for line in body if line.content.strip()]
    if not content_lines:
        yield Diagnostic(
            rule=RULE,
            line_number=start_line,
            detail="Mermaid code block is empty. Add diagram content or remove the block.",
            context='```mermaid'
        )
        return

    first = content_lines[0]
    second = content_lines[1] if len(content_lines) > 1 else first
    text = '\n'.join(line.content.strip() for line in content_lines)
    diagram_type = detect_diagram_type(content_lines)

    if diagram_type is None:
        yield Diagnostic(
            rule=RULE,
            line_number=first.line_number,
            detail=(
                "Mermaid diagram should start with a valid diagram type "
                "(e.g., graph, flowchart, sequenceDiagram, classDiagram, etc.)."
            ),
            context=first.content
        )

    if diagram_type in ('graph', 'flowchart'):
        if not DIRECTION.search(text):
            yield Diagnostic(
                rule=RULE,
                line_number=first.line_number,
                detail="Flowchart should specify direction (TD, TB, BT, RL, or LR).",
                context=first.content
            )
        if not any(shape.search(text) for shape in NODE_SHAPES):
            yield Diagnostic(
                rule=RULE,
                line_number=second.line_number,
                detail="Flowchart should define nodes using brackets [] or parentheses ().",
                context=second.content
            )

    elif diagram_type == 'sequenceDiagram':
        if not MESSAGE_ARROW.search(text):
            yield Diagnostic(
                rule=RULE,
                line_number=second.line_number,
                detail="Sequence diagram should have message arrows (->) or asynchronous arrows (->>).",
                context=second.content
            )

    elif diagram_type == 'classDiagram':
        if not CLASS_DECLARATION.search(text):
            yield Diagnostic(
                rule=RULE,
                line_number=second.line_number,
                detail='Class diagram should define classes with "class ClassName" or "ClassName : method".',
                context=second.content
            )

    elif diagram_type == 'gantt':
        if 'title' not in text:
            yield Diagnostic(
                rule=RULE,
                line_number=second.line_number,
                detail="Gantt chart should have a title line.",
                context=second.content
            )
        if 'section' not in text:
            yield Diagnostic(
                rule=RULE,
                line_number=second.line_number,
                detail="Gantt chart should have at least one section.",
                context=second.content
            )

    for line in content_lines:
        content = line.content.strip()
        for opening, closing, message in BALANCED_PAIRS:
            if content.count(opening) != content.count(closing):
                yield Diagnostic(rule=RULE, line_number=line.line_number, detail=message, context=content)


def mermaid_syntax(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Validate ```` ```mermaid ```` blocks.

    A block must be closed and non-empty and must name a diagram type. The
    detected type gets a light structural check, and every line must keep
    its brackets balanced.
    """
    start_line = None
    body: list[DiagramLine] = []

    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()

        if start_line is None:
            if stripped in MERMAID_OPENERS:
                start_line = line_number
                body = []
            continue

        if stripped == '```':
            yield from _validate_diagram(start_line, body)
            start_line = None
            continue

        body.append(DiagramLine(line_number, line))

    if start_line is not None:
        yield Diagnostic(
            rule=RULE,
            line_number=start_line,
            detail='Mermaid code block is not properly closed with "```".',
            context='```mermaid'
        )

"""Link tooltip and content annotation rules."""
import re
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..models import Diagnostic

RULE = "material-tooltip-syntax"

INDENTED_CODE = re.compile(r'^    ')
INLINE_CODE = re.compile(r'`[^`]*`')
LINK_TOOLTIP = re.compile(r'\[([^\]]+)\]\(([^)\s"]+)(\s*)"([^"]*)"\)')
ANNOTATION = re.compile(r'\((\d+)\)([!?]?)')

MALFORMED_TOOLTIPS = (
    (re.compile(r"\[[^\]]+\]\([^)\s]+\s+'[^']+'\)"),
     "Use double quotes for tooltip text, not single quotes."),
    (re.compile(r"""\[[^\]]+\]\([^)\s]+\s+[^"'\s][^)]*[^"'\s]\)"""),
     "Tooltip text must be enclosed in quotes."),
    (re.compile(r'\[[^\]]+\]\([^)\s]+\s+"[^"]*$'),
     "Unclosed tooltip quote. Make sure to close the tooltip with a quote and parenthesis."),
)

MALFORMED_ANNOTATIONS = (
    (re.compile(r'\([a-zA-Z]\)'),
     "Annotation markers should use numbers, not letters. Use (1), (2), etc."),
    (re.compile(r'\(\)'),
     "Empty annotation marker. Provide a number like (1) or (2)."),
    (re.compile(r'\(\d+[^)!?]*[a-zA-Z][^)]*\)'),
     "Annotation markers should only contain numbers and optional ! or ? modifiers."),
)


def _check_tooltips(line_number: int, line: str, config: Config) -> Generator[Diagnostic, None, None]:
    for match in LINK_TOOLTIP.finditer(line):
        text, _, spacing, tooltip = match.groups()
        tooltip = tooltip.strip()
        context = match.group(0)

        if not tooltip:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Tooltip text cannot be empty. Provide descriptive text within quotes.",
                context=context
            )
        elif len(tooltip) < config.tooltip_min_length:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=f"Tooltip text should be descriptive (at least {config.tooltip_min_length} characters).",
                context=context
            )

        if tooltip and tooltip.lower() == text.strip().lower():
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Tooltip text should provide additional information, not duplicate the link text.",
                context=context
            )

        if not spacing:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Add a space before the tooltip text in markdown links.",
                context=context
            )

    for pattern, message in MALFORMED_TOOLTIPS:
        if pattern.search(line):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=message, context=line.strip())


def _check_annotations(line_number: int, line: str, config: Config) -> Generator[Diagnostic, None, None]:
    # Markers inside inline code are literal text
    text = INLINE_CODE.sub(lambda m: ' ' * len(m.group(0)), line)

    for match in ANNOTATION.finditer(text):
        number = int(match.group(1))
        marker = match.group(0)

        if number == 0:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Annotation numbers should start from 1, not 0.",
                context=marker
            )
        elif number > config.annotation_max_number:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    "Annotation number seems unusually high. "
                    "Consider using smaller numbers for better readability."
                ),
                context=marker
            )

        if match.start() > 0 and text[match.start() - 1] not in ' \t':
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Add a space before the annotation marker for better readability.",
                context=marker
            )

    for pattern, message in MALFORMED_ANNOTATIONS:
        if pattern.search(text):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=message, context=line.strip())


def tooltip_syntax(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check link tooltips and content annotation markers.

    Tooltips (``[text](url "tooltip")``) must be double-quoted, separated
    from the URL by a space, descriptive and different from the link text.
    Annotation markers ``(n)`` need a space before them and a number
    between 1 and the configured maximum. Headings carry no annotations and
    code is skipped.
    """
    config = config or Config()
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue
        if INDENTED_CODE.match(line):
            continue

        yield from _check_tooltips(line_number, line, config)

        if not line.strip().startswith('#'):
            yield from _check_annotations(line_number, line, config)

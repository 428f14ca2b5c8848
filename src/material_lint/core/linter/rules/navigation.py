"""Heading structure rules for Material navigation and table of contents."""
import re
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..constants import VAGUE_HEADINGS
from ..fixes import generate_heading_case_fix, generate_punctuation_fix
from ..models import Diagnostic
from ..syntax import front_matter_end, match_heading
from ..text import are_titles_similar

RULE = "material-navigation-structure"

INDENTED_CODE = re.compile(r'^ {4}')
PUNCTUATION = re.compile(r'[!?.:;,]')


def _style_checks(line_number: int, line: str, text: str, config: Config) -> Generator[Diagnostic, None, None]:
    if text.lower() in VAGUE_HEADINGS:
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail=f'Consider using more specific heading instead of "{text}" for better navigation clarity',
            context=line
        )

    word_count = len(text.split())
    if word_count > config.heading_max_words:
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail=f"Heading has {word_count} words. Consider shortening for better navigation (aim for 2-6 words)",
            context=line
        )

    if len(text) > 3 and text == text.upper() and any(char.isalpha() for char in text):
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail="Avoid ALL CAPS headings. Use sentence case for better readability",
            context=line,
            fix_info=generate_heading_case_fix(line_number, line, text)
        )

    if len(PUNCTUATION.findall(text)) > 2:
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail="Avoid excessive punctuation in headings for cleaner navigation",
            context=line,
            fix_info=generate_punctuation_fix(line_number, line, text)
        )


def navigation_structure(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check heading hierarchy and titles.

    Headings feed the navigation sidebar and table of contents, so levels
    must not be skipped or nested too deep, and sibling headings (same level,
    same parent) must not repeat or nearly repeat each other. Fenced and
    indented code is skipped.
    """
    config = config or Config()
    fences = FenceTracker()
    previous_level = 0
    siblings: dict[int, list[str]] = {}
    body_start = (front_matter_end(lines) or -1) + 1

    for line_number, line in enumerate(lines, 1):
        if line_number <= body_start:
            continue
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue
        if INDENTED_CODE.match(line):
            continue

        heading = match_heading(line)
        if heading is None:
            continue

        level, text = heading.level, heading.text

        if not text:
            yield Diagnostic(rule=RULE, line_number=line_number, detail="Heading cannot be empty", context=line)
            continue

        if len(text) > config.heading_max_length:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    f"Navigation title too long ({len(text)} chars). "
                    f"Keep under {config.heading_max_length} characters for better UX"
                ),
                context=line
            )

        if level > config.heading_max_depth:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    f"Heading too deep (level {level}). Consider restructuring to stay within "
                    f"{config.heading_max_depth} levels for better navigation"
                ),
                context=line
            )

        if previous_level and level - previous_level > 1:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    f"Skipped heading level: h{previous_level} → h{level}. "
                    f"Use h{previous_level + 1} instead for proper hierarchy"
                ),
                context=line
            )

        # A heading starts a new section for everything below its level
        for deeper in [lvl for lvl in siblings if lvl > level]:
            del siblings[deeper]

        peers = siblings.setdefault(level, [])
        duplicate = next((peer for peer in peers if peer.lower() == text.lower()), None)
        similar = None
        if duplicate is None:
            similar = next(
                (peer for peer in peers if are_titles_similar(peer, text, config.heading_similarity_ratio)),
                None
            )

        if duplicate is not None:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    f'Duplicate heading "{text}" found at same level. '
                    "Consider using unique titles or restructuring"
                ),
                context=line
            )
        elif similar is not None:
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=f'Heading "{text}" is very similar to "{similar}". Consider more distinct titles',
                context=line
            )

        peers.append(text)
        yield from _style_checks(line_number, line, text, config)
        previous_level = level

"""Footnote rules."""
import re
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..models import Diagnostic

REFERENCE = re.compile(r'\[\^([A-Za-z0-9_-]+)\]')
DEFINITION = re.compile(r'^\[\^([A-Za-z0-9_-]+)\]:(.*)$')
DEFINITION_LABEL = re.compile(r'^\[\^([A-Za-z0-9_-]+)\]')

INVALID_REFERENCES = (
    (re.compile(r'\[\^[^\]]*\s[^\]]*\]'),
     "Footnote IDs cannot contain spaces. Use hyphens or underscores instead."),
    (re.compile(r'\[\^\]'),
     "Footnote reference cannot be empty. Provide an ID like [^1] or [^note]."),
    (re.compile(r'\[\^[^A-Za-z0-9_\-\]][^\]]*\]'),
     "Footnote IDs should only contain letters, numbers, hyphens, and underscores."),
)


def footnotes_syntax(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Cross-check footnote references against definitions.

    Builds a table of references and a table of definitions in one pass,
    then reports references without a definition (once per referencing
    line) and definitions never referenced. Definitions themselves must
    have content and a space after the colon. Numeric IDs should run 1, 2,
    3 and so on; only the first gap is reported.
    """
    references: dict[str, list[int]] = {}
    definitions: dict[str, int] = {}
    fences = FenceTracker()

    for line_number, line in enumerate(lines, 1):
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        scan_from = 0
        definition = DEFINITION.match(line)
        label = DEFINITION_LABEL.match(line)

        if definition:
            footnote_id, rest = definition.groups()
            scan_from = label.end()

            if footnote_id in definitions:
                yield Diagnostic(
                    rule="material-footnotes-syntax",
                    line_number=line_number,
                    detail=(
                        f'Duplicate footnote definition for "[^{footnote_id}]". '
                        "Each footnote can only be defined once."
                    ),
                    context=line
                )
            else:
                definitions[footnote_id] = line_number
                if not rest.strip():
                    yield Diagnostic(
                        rule="material-footnotes-syntax",
                        line_number=line_number,
                        detail=f'Footnote definition "[^{footnote_id}]" is empty. Add content after the colon.',
                        context=line
                    )
                elif not rest.startswith(' '):
                    yield Diagnostic(
                        rule="material-footnotes-syntax",
                        line_number=line_number,
                        detail="Add a space after the colon in footnote definition.",
                        context=line
                    )

        elif label and ':' not in line:
            # Malformed definition; its label still counts as a reference
            yield Diagnostic(
                rule="material-footnotes-syntax",
                line_number=line_number,
                detail='Footnote definition is missing colon (:). Use format "[^id]: content".',
                context=line
            )

        for match in REFERENCE.finditer(line, scan_from):
            seen = references.setdefault(match.group(1), [])
            if line_number not in seen:
                seen.append(line_number)

        for pattern, message in INVALID_REFERENCES:
            if pattern.search(line):
                yield Diagnostic(
                    rule="material-footnotes-syntax",
                    line_number=line_number,
                    detail=message,
                    context=line
                )
                break

    for footnote_id, reference_lines in references.items():
        if footnote_id in definitions:
            continue
        for line_number in reference_lines:
            yield Diagnostic(
                rule="material-footnotes-syntax",
                line_number=line_number,
                detail=(
                    f'Footnote reference "[^{footnote_id}]" has no matching definition. '
                    f'Add "[^{footnote_id}]: content" somewhere in the document.'
                ),
                context=lines[line_number - 1]
            )

    for footnote_id, line_number in definitions.items():
        if footnote_id in references:
            continue
        yield Diagnostic(
            rule="material-footnotes-syntax",
            line_number=line_number,
            detail=(
                f'Footnote definition "[^{footnote_id}]" is never referenced. Either add a reference '
                f'"[^{footnote_id}]" in the text or remove this definition.'
            ),
            context=lines[line_number - 1]
        )

    numeric = sorted((int(fid), fid) for fid in references if fid.isdigit())
    if len(numeric) > 1:
        for expected, (actual, footnote_id) in enumerate(numeric, 1):
            if actual != expected:
                line_number = references[footnote_id][0]
                yield Diagnostic(
                    rule="material-footnotes-syntax",
                    line_number=line_number,
                    detail=(
                        "Numeric footnotes should be sequential. "
                        f"Expected [^{expected}] but found [^{actual}]."
                    ),
                    context=lines[line_number - 1]
                )
                break

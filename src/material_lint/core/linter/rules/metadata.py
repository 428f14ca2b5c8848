"""Front matter metadata rules."""
import logging
import re
from typing import Generator

import yaml

from material_lint.config import Config

from ..constants import HIDE_OPTIONS
from ..models import Diagnostic
from ..syntax import front_matter_end

logger = logging.getLogger(__name__)

RULE = "material-meta-tags"

TOP_LEVEL_KEY = re.compile(r'^(\w+)\s*:')

RECOMMENDED_KEYS = (
    ("description", 'Add a "description" field for better SEO and search results.'),
    ("title", 'Consider adding a "title" field to override the default page title.'),
)


def _key_lines(lines: list[str], end: int) -> dict[str, int]:
    """Line number of each top-level key in the front matter."""
    found = {}
    for index in range(1, end):
        match = TOP_LEVEL_KEY.match(lines[index])
        if match:
            found.setdefault(match.group(1).lower(), index + 1)
    return found


def _hide_values(hide) -> list[str]:
    if isinstance(hide, str):
        return [value for value in re.split(r'[\s,]+', hide) if value]
    if isinstance(hide, list):
        return [str(value) for value in hide]
    return [str(hide)]


def meta_tags(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check the YAML front matter Material uses for SEO and page options.

    The page must open with a closed ``---`` block that parses as a YAML
    mapping. ``description`` and ``title`` are recommended; ``template``,
    ``tags`` and ``hide`` are checked for shape when present.
    """
    config = config or Config()

    if not lines or lines[0].strip() != '---':
        yield Diagnostic(
            rule=RULE,
            line_number=1,
            detail=(
                "Missing YAML front matter. Add metadata like description, tags, and template "
                "for better Material for MkDocs integration."
            ),
            context=lines[0] if lines else ""
        )
        return

    end = front_matter_end(lines)
    if end is None:
        yield Diagnostic(
            rule=RULE,
            line_number=1,
            detail='YAML front matter is not properly closed with "---".',
            context='---'
        )
        return

    try:
        data = yaml.safe_load('\n'.join(lines[1:end]))
    except yaml.YAMLError as e:
        logger.debug(f"Front matter is not valid YAML: {e}")
        yield Diagnostic(
            rule=RULE,
            line_number=1,
            detail=f"YAML front matter could not be parsed: {str(e).splitlines()[0]}",
            context='---'
        )
        return

    if data is None:
        data = {}
    if not isinstance(data, dict):
        yield Diagnostic(
            rule=RULE,
            line_number=2,
            detail="YAML front matter should be a mapping of keys to values.",
            context=lines[1]
        )
        return

    metadata = {str(key).lower(): value for key, value in data.items()}
    key_lines = _key_lines(lines, end)

    def context_for(key: str) -> str:
        line_number = key_lines.get(key)
        return lines[line_number - 1] if line_number else '---'

    for key, message in RECOMMENDED_KEYS:
        value = metadata.get(key)
        if value is None or str(value).strip() == '':
            yield Diagnostic(rule=RULE, line_number=1, detail=message, context='---')

    description = metadata.get("description")
    if description is not None and len(str(description)) > config.description_max_length:
        yield Diagnostic(
            rule=RULE,
            line_number=key_lines.get("description", 1),
            detail=(
                f"Description should be under {config.description_max_length} characters "
                f"for optimal SEO (found {len(str(description))})."
            ),
            context=context_for("description")
        )

    template = metadata.get("template")
    if template is not None and not str(template).endswith('.html'):
        yield Diagnostic(
            rule=RULE,
            line_number=key_lines.get("template", 1),
            detail="Template should be a valid HTML template file (e.g., main.html).",
            context=context_for("template")
        )

    tags = metadata.get("tags")
    if tags is not None and not isinstance(tags, list):
        yield Diagnostic(
            rule=RULE,
            line_number=key_lines.get("tags", 1),
            detail="Tags should be formatted as a YAML list (e.g., tags: [tag1, tag2] or use bullet points).",
            context=context_for("tags")
        )

    hide = metadata.get("hide")
    if hide is not None:
        for value in _hide_values(hide):
            if value not in HIDE_OPTIONS:
                yield Diagnostic(
                    rule=RULE,
                    line_number=key_lines.get("hide", 1),
                    detail=f'Invalid hide option "{value}". Valid options are: {", ".join(HIDE_OPTIONS)}.',
                    context=context_for("hide")
                )

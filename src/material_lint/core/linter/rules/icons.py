"""Icon shortcode rules."""
import re
from typing import Generator

from material_lint.config import Config

from ..constants import ICON_SETS
from ..models import Diagnostic

_ICON_PATTERNS = [(re.compile(pattern), label, names) for pattern, label, names in ICON_SETS]


def icons_valid(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Flag icon shortcodes naming an icon outside the known set.

    Simple Icons shortcodes are accepted without lookup.
    """
    for line_number, line in enumerate(lines, 1):
        for pattern, label, names in _ICON_PATTERNS:
            if names is None:
                continue

            for match in pattern.finditer(line):
                icon = match.group(1)
                if icon in names:
                    continue

                yield Diagnostic(
                    rule="material-icons-valid",
                    line_number=line_number,
                    detail=f'Unknown {label} icon "{icon}". Verify the icon name exists in the {label} icon set.',
                    context=match.group(0)
                )

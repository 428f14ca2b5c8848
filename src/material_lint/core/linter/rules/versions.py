"""Version banner, snippet include and deprecation notice rules."""
import re
from typing import Generator

from material_lint.config import Config

from ..blocks import FenceTracker, Transition
from ..constants import BANNER_EXTENSIONS, STANDARD_BANNER_FILES, VERSION_KEYWORDS, VERSION_NOTICE_TYPES
from ..models import Diagnostic

RULE = "material-version-banners"

SNIPPET_INCLUDE = re.compile(r'--8<--\s*"([^"]*)"')
SNIPPET_MARKER = re.compile(r'--8<--')

MALFORMED_SNIPPETS = (
    (re.compile(r'--8<--[ \t]+(?!["\'])\S'),
     "Snippet include filenames must be enclosed in double quotes."),
    (re.compile(r"--8<--\s*'[^']+'"),
     "Use double quotes for snippet include filenames, not single quotes."),
    (re.compile(r'--8<--\s*$'),
     "Incomplete snippet include. Add filename in quotes after --8<--."),
    (re.compile(r'--8<[^-]'),
     'Malformed snippet include syntax. Use --8<-- "filename".'),
    (re.compile(r'(?<!-)-8<--'),
     "Incomplete snippet include syntax. Use --8<-- (with double dash)."),
)

VERSION_TOKENS = (
    re.compile(r'\bv?\d+\.\d+\.\d+(?:-[a-zA-Z0-9.-]+)?(?:\+[a-zA-Z0-9.-]+)?\b'),  # semver
    re.compile(r'\b\d{4}-\d{2}-\d{2}\b'),                                      # date
    re.compile(r'\bv?\d+\.\d+\b'),                                             # simple
)
PREFIXED_VERSION = re.compile(r'\bv?\d+\.\d+(?:\.\d+)?\b')

DEPRECATION_NOTICES = (
    re.compile(r'!!! (?:warning|danger|note) "deprecated"', re.IGNORECASE),
    re.compile(r'::: (?:warning|danger) deprecated', re.IGNORECASE),
)
VERSION_ADMONITION = re.compile(r'^!!!\s+(warning|danger|info|note)\b', re.IGNORECASE)

NOTICE_LOOKAHEAD = 5


def _has_version(line: str) -> bool:
    return any(pattern.search(line) for pattern in VERSION_TOKENS)


def _check_snippets(line_number: int, line: str) -> Generator[Diagnostic, None, None]:
    for match in SNIPPET_INCLUDE.finditer(line):
        filename = match.group(1)
        context = match.group(0)

        if not filename.strip():
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail="Snippet include filename cannot be empty.",
                context=context
            )
            continue

        lowered = filename.lower()
        basename = lowered.rsplit('/', 1)[-1]

        if ('banner' in lowered or 'version' in lowered) and not lowered.endswith(BANNER_EXTENSIONS):
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=f'Version banner files should have .md, .txt, or .html extension. Found: "{filename}".',
                context=context
            )
        elif (any(word in basename for word in ('banner', 'version', 'deprecation'))
              and basename not in STANDARD_BANNER_FILES):
            yield Diagnostic(
                rule=RULE,
                line_number=line_number,
                detail=(
                    'Consider using standard banner filenames like "version-banner.md" '
                    'or "deprecation-notice.md" for consistency.'
                ),
                context=context
            )

    for pattern, message in MALFORMED_SNIPPETS:
        if pattern.search(line):
            yield Diagnostic(rule=RULE, line_number=line_number, detail=message, context=line.strip())


def _check_notice_type(line_number: int, stripped: str) -> Generator[Diagnostic, None, None]:
    match = VERSION_ADMONITION.match(stripped)
    if not match:
        return

    kind = match.group(1).lower()
    lowered = stripped.lower()
    keyword = next((word for word in VERSION_NOTICE_TYPES if word in lowered), None)
    if keyword is None:
        return

    suitable = VERSION_NOTICE_TYPES[keyword]
    if kind not in suitable:
        yield Diagnostic(
            rule=RULE,
            line_number=line_number,
            detail=f'Consider using admonition type "{suitable[0]}" for {keyword} notices instead of "{kind}".',
            context=stripped
        )


def version_banners(lines: list[str], config: Config | None = None) -> Generator[Diagnostic, None, None]:
    """
    Check version banners, snippet includes and deprecation notices.

    Snippet includes (``--8<-- "file"``) must name a double-quoted, non-empty
    file. Lines mentioning versions must not mix ``v1.2`` and ``1.2``
    prefixes. Deprecation admonitions should state a version within their
    first few lines and use an admonition type that suits the notice.
    """
    fences = FenceTracker()

    for index, line in enumerate(lines):
        line_number = index + 1
        if fences.feed(line, line_number) != Transition.NONE or fences.inside:
            continue

        stripped = line.strip()
        yield from _check_snippets(line_number, line)

        if SNIPPET_MARKER.search(line):
            continue

        lowered = line.lower()
        if any(keyword in lowered for keyword in VERSION_KEYWORDS):
            versions = PREFIXED_VERSION.findall(line)
            prefixed = [version.startswith('v') for version in versions]
            if len(versions) > 1 and any(prefixed) and not all(prefixed):
                yield Diagnostic(
                    rule=RULE,
                    line_number=line_number,
                    detail='Inconsistent version prefixes. Use either "v1.2.3" or "1.2.3" consistently.',
                    context=stripped
                )

        if any(pattern.search(line) for pattern in DEPRECATION_NOTICES):
            window = lines[index:index + NOTICE_LOOKAHEAD]
            if not any(_has_version(candidate) for candidate in window):
                yield Diagnostic(
                    rule=RULE,
                    line_number=line_number,
                    detail="Deprecation notices should include version information (when deprecated, when removed).",
                    context=stripped
                )

        yield from _check_notice_type(line_number, stripped)

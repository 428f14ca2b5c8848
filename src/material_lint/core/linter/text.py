"""Text helpers shared by the rules: edit distance, comment styles, tokens."""
import re
from typing import Iterable, Optional

from .constants import COMMENT_STYLES

ANNOTATION_PATTERN = re.compile(r'(\(\d+\)[!?]?)(?:\s|$)')

_ADMONITION_CONTENT = re.compile(r'^(?:\?\?\?\+?|!!!)\s+\S+')
_TAB_CONTENT = re.compile(r'^===\s*"[^"]+"\s*$')


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic dynamic-programming edit distance.

    Counts single-character insertions, deletions and substitutions.
    """
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current

    return previous[-1]


def closest_match(word: str, vocabulary: Iterable[str], max_distance: int = 3) -> Optional[str]:
    """
    Suggest the vocabulary entry nearest to ``word``.

    Comparison is case-insensitive. Ties go to the earlier entry. Returns
    None when the best candidate is further than ``max_distance`` edits away.
    """
    best = None
    best_distance = None
    lowered = word.lower()

    for candidate in vocabulary:
        distance = levenshtein_distance(lowered, candidate.lower())
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance

    if best_distance is None or best_distance > max_distance:
        return None
    return best


def normalize_title(text: str) -> str:
    """Lowercase and keep only ASCII letters and digits."""
    return re.sub(r'[^a-z0-9]', '', text.lower())


def are_titles_similar(first: str, second: str, max_ratio: float = 0.2) -> bool:
    """
    True when two titles are near-duplicates.

    Either normalized title containing the other counts as similar;
    otherwise the edit distance relative to the longer title must be
    below ``max_ratio``.
    """
    clean1 = normalize_title(first)
    clean2 = normalize_title(second)

    if not clean1 or not clean2:
        return False

    if clean1 in clean2 or clean2 in clean1:
        return True

    distance = levenshtein_distance(clean1, clean2)
    return distance / max(len(clean1), len(clean2)) < max_ratio


def get_comment_style(language: Optional[str]) -> Optional[str]:
    """Comment token for a fence language, or None when unknown."""
    if not language:
        return None
    return COMMENT_STYLES.get(language.lower())


def has_code_annotation(line: str) -> bool:
    return ANNOTATION_PATTERN.search(line) is not None


def get_annotation_pattern(line: str) -> Optional[str]:
    """First annotation marker on the line, e.g. ``(1)!``."""
    match = ANNOTATION_PATTERN.search(line)
    return match.group(1) if match else None


# Token predicates. Tokens come from the host's markdown tokenizer and are
# duck-typed: ``type``, ``content``, ``info`` and ``next`` attributes.

def _next_inline_content(token) -> Optional[str]:
    if getattr(token, 'type', None) != 'paragraph_open':
        return None
    next_token = getattr(token, 'next', None)
    if next_token is None or getattr(next_token, 'type', None) != 'inline':
        return None
    return getattr(next_token, 'content', '') or ''


def is_admonition_token(token) -> bool:
    """True for a paragraph whose inline content opens an admonition."""
    content = _next_inline_content(token)
    return content is not None and bool(_ADMONITION_CONTENT.match(content))


def is_content_tab_token(token) -> bool:
    """True for a paragraph whose inline content is a ``=== "Title"`` delimiter."""
    content = _next_inline_content(token)
    return content is not None and bool(_TAB_CONTENT.match(content))


def get_code_block_language(token) -> Optional[str]:
    """Language of a fence token; None for indented code blocks."""
    if getattr(token, 'type', None) not in ('code_block', 'fence'):
        return None

    info = (getattr(token, 'info', '') or '').strip()
    if not info:
        return None
    return info.split()[0]

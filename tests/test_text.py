"""Tests for shared text helpers: edit distance, suggestions, comment styles, tokens."""
from types import SimpleNamespace

from material_lint.core.linter.constants import ADMONITION_TYPES
from material_lint.core.linter.models import Document
from material_lint.core.linter.text import (
    are_titles_similar,
    closest_match,
    get_annotation_pattern,
    get_code_block_language,
    get_comment_style,
    has_code_annotation,
    is_admonition_token,
    is_content_tab_token,
    levenshtein_distance,
    normalize_title,
)


# ---------------------------------------------------------------------------
# Edit distance and suggestions
# ---------------------------------------------------------------------------


def test_levenshtein_classic_cases():
    """Insertions, deletions and substitutions each cost one edit."""
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3
    assert levenshtein_distance("same", "same") == 0


def test_levenshtein_is_symmetric():
    """Argument order does not change the distance."""
    assert levenshtein_distance("warning", "warnig") == levenshtein_distance("warnig", "warning") == 1


def test_closest_match_finds_typo():
    """A one-letter typo resolves to the intended admonition type."""
    assert closest_match("nte", ADMONITION_TYPES) == "note"
    assert closest_match("warnig", ADMONITION_TYPES) == "warning"


def test_closest_match_is_case_insensitive():
    """Capitalized types suggest their lowercase form."""
    assert closest_match("Note", ADMONITION_TYPES) == "note"


def test_closest_match_respects_max_distance():
    """Nothing is suggested when every candidate is too far away."""
    assert closest_match("xyzxyzxyz", ADMONITION_TYPES) is None
    assert closest_match("nte", ADMONITION_TYPES, max_distance=0) is None


def test_closest_match_ties_go_to_first_entry():
    """Equal distances keep the earlier vocabulary entry."""
    assert closest_match("ab", ["ax", "xb"]) == "ax"


# ---------------------------------------------------------------------------
# Title similarity
# ---------------------------------------------------------------------------


def test_normalize_title_strips_punctuation_and_case():
    assert normalize_title("Set-Up Guide!") == "setupguide"


def test_titles_containing_each_other_are_similar():
    assert are_titles_similar("Installation", "Installation guide")
    assert are_titles_similar("Setup", "Set-up")


def test_titles_within_ratio_are_similar():
    """One edit in thirteen letters is below the default 0.2 ratio."""
    assert are_titles_similar("Configuration", "Konfiguration")


def test_distinct_titles_are_not_similar():
    assert not are_titles_similar("Install", "Configure")
    assert not are_titles_similar("", "Anything")


# ---------------------------------------------------------------------------
# Comment styles and annotations
# ---------------------------------------------------------------------------


def test_comment_style_lookup():
    assert get_comment_style("Python") == "#"
    assert get_comment_style("ts") == "//"
    assert get_comment_style("html") == "<!--"
    assert get_comment_style("sql") == "--"
    assert get_comment_style("brainfuck") is None
    assert get_comment_style(None) is None


def test_annotation_pattern_extraction():
    assert get_annotation_pattern("x = 1  # (1)!") == "(1)!"
    assert get_annotation_pattern("x = 1  # (12)") == "(12)"
    assert get_annotation_pattern("no markers") is None


def test_annotation_requires_trailing_boundary():
    """A marker glued to following text is not an annotation."""
    assert has_code_annotation("value # (2) explained")
    assert not has_code_annotation("call(1)x")


# ---------------------------------------------------------------------------
# Token predicates
# ---------------------------------------------------------------------------


def _paragraph(content: str):
    inline = SimpleNamespace(type="inline", content=content)
    return SimpleNamespace(type="paragraph_open", next=inline)


def test_admonition_token_detection():
    assert is_admonition_token(_paragraph('!!! note "Title"'))
    assert is_admonition_token(_paragraph("???+ tip"))
    assert not is_admonition_token(_paragraph("Plain text"))
    assert not is_admonition_token(SimpleNamespace(type="heading_open"))


def test_content_tab_token_detection():
    assert is_content_tab_token(_paragraph('=== "Python"'))
    assert not is_content_tab_token(_paragraph("=== Python"))


def test_code_block_language_from_token():
    assert get_code_block_language(SimpleNamespace(type="fence", info="python linenums=1")) == "python"
    assert get_code_block_language(SimpleNamespace(type="fence", info="")) is None
    assert get_code_block_language(SimpleNamespace(type="code_block", info="")) is None
    assert get_code_block_language(SimpleNamespace(type="inline", info="python")) is None


def test_document_tokenizes_lazily():
    """The host tokenizer runs once, on first access to tokens."""
    calls = []

    def tokenizer(text):
        calls.append(text)
        return [SimpleNamespace(type="inline", content=text)]

    document = Document.from_text("# Title\nBody", tokenizer=tokenizer)

    assert document.lines == ["# Title", "Body"]
    assert calls == []
    assert document.tokens[0].content == "# Title\nBody"
    assert document.tokens is document.tokens
    assert len(calls) == 1
    assert Document.from_text("x").tokens == []

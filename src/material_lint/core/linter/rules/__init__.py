"""Lint rules for Material for MkDocs markdown."""
from typing import Optional

from ..models import Rule
from . import (
    admonitions,
    code,
    footnotes,
    icons,
    lists,
    math,
    mermaid,
    metadata,
    navigation,
    spacing,
    tabs,
    tooltips,
    versions,
)

_RULES = [
    # Admonitions
    Rule(
        names=("material-admonition-types", "material-valid-admonition-types"),
        description="Material for MkDocs admonitions must use valid types",
        tags=("material-mkdocs", "admonitions", "error"),
        function=admonitions.admonition_types,
    ),
    Rule(
        names=("material-admonition-indentation", "material-admonition-indent"),
        description="Material for MkDocs admonition content must be indented with 4 spaces",
        tags=("material-mkdocs", "admonitions", "indentation", "error"),
        function=admonitions.admonition_indentation,
    ),
    Rule(
        names=("material-admonition-empty", "material-empty-admonition"),
        description="Material for MkDocs admonitions must have indented content",
        tags=("material-mkdocs", "admonitions", "error"),
        function=admonitions.admonition_empty,
    ),

    # Code blocks
    Rule(
        names=("material-code-annotations", "material-annotation-comments"),
        description="Material for MkDocs code annotations must use correct comment style for language",
        tags=("material-mkdocs", "code", "annotations", "warning"),
        function=code.code_annotations,
    ),
    Rule(
        names=("material-code-block-syntax", "material-code-blocks"),
        description="Code blocks must have proper syntax - no type on closing tag and all blocks must be closed",
        tags=("material-mkdocs", "code", "syntax", "error"),
        function=code.code_block_syntax,
    ),
    Rule(
        names=("material-shell-language", "material-shell-language-standardization"),
        description='Shell code blocks should use the "shell" language',
        tags=("material-mkdocs", "code", "shell", "warning"),
        function=code.shell_language,
    ),

    # Page structure
    Rule(
        names=("material-content-tabs", "material-tabs"),
        description="Material for MkDocs content tabs must use correct === delimiter syntax",
        tags=("material-mkdocs", "tabs", "error"),
        function=tabs.content_tabs,
    ),
    Rule(
        names=("material-navigation-structure", "material-nav-structure"),
        description="Material for MkDocs navigation structure best practices",
        tags=("material-mkdocs", "navigation", "headings", "warning"),
        function=navigation.navigation_structure,
    ),
    Rule(
        names=("material-blank-lines-spacing", "material-blank-lines"),
        description="Ensures blank lines before and after headers and after code blocks",
        tags=("material-mkdocs", "spacing", "blank-lines", "warning"),
        function=spacing.blank_lines_spacing,
    ),
    Rule(
        names=("material-list-auto-numbering", "list-auto-numbering"),
        description='Ensures ordered lists starting with 1. use "1." for all items to enable auto-numbering',
        tags=("material-mkdocs", "lists", "auto-numbering", "warning"),
        function=lists.list_auto_numbering,
    ),
    Rule(
        names=("material-meta-tags", "material-metadata"),
        description="Material for MkDocs pages should include proper metadata for SEO and social features",
        tags=("material-mkdocs", "metadata", "seo", "warning"),
        function=metadata.meta_tags,
    ),

    # Extensions
    Rule(
        names=("material-icons-valid", "material-valid-icons"),
        description="Material for MkDocs icon references must use valid icon names from supported icon sets",
        tags=("material-mkdocs", "icons", "warning"),
        function=icons.icons_valid,
    ),
    Rule(
        names=("material-mermaid-syntax", "material-mermaid-validation"),
        description="Material for MkDocs Mermaid code blocks must contain valid diagram syntax",
        tags=("material-mkdocs", "mermaid", "diagrams", "error"),
        function=mermaid.mermaid_syntax,
    ),
    Rule(
        names=("material-footnotes-syntax", "material-footnote-validation"),
        description="Material for MkDocs footnotes must use proper syntax with matching references and definitions",
        tags=("material-mkdocs", "footnotes", "error"),
        function=footnotes.footnotes_syntax,
    ),
    Rule(
        names=("material-math-blocks", "material-math-validation"),
        description="Material for MkDocs math blocks must use proper LaTeX/MathJax syntax with correct delimiters",
        tags=("material-mkdocs", "math", "latex", "mathjax", "error"),
        function=math.math_blocks,
    ),
    Rule(
        names=("material-tooltip-syntax", "material-tooltip-validation"),
        description="Material for MkDocs tooltip and annotation syntax must be properly formatted",
        tags=("material-mkdocs", "tooltips", "annotations", "warning"),
        function=tooltips.tooltip_syntax,
    ),
    Rule(
        names=("material-version-banners", "material-version-validation"),
        description="Material for MkDocs version banners and deprecation notices must use proper syntax",
        tags=("material-mkdocs", "version", "banners", "info"),
        function=versions.version_banners,
    ),
]

# Registry of all available rules, keyed by primary id
RULES = {rule.name: rule for rule in _RULES}

# Every id and alias -> rule
ALIASES = {name: rule for rule in _RULES for name in rule.names}


def find_rule(name: str) -> Optional[Rule]:
    """Look up a rule by primary id or alias."""
    return ALIASES.get(name)

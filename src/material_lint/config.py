"""Configuration management with YAML file and environment variable overrides."""
from dataclasses import dataclass, field, fields
from pathlib import Path
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".material-lint.yml"
ENV_PREFIX = "MATERIAL_LINT_"

# Threshold fields that can be overridden from the file or environment
THRESHOLDS = (
    "tab_title_max_length",
    "heading_max_length",
    "heading_max_depth",
    "heading_max_words",
    "heading_similarity_ratio",
    "description_max_length",
    "suggestion_max_distance",
    "inline_math_max_length",
    "annotation_max_number",
    "tooltip_min_length",
    "admonition_indent_multiple",
)


@dataclass
class Config:
    """Configuration for the Material for MkDocs linter."""

    # Rule selection by id or alias (None = every registered rule)
    enabled_rules: list[str] | None = None
    disabled_rules: list[str] = field(default_factory=list)

    # Content tabs
    tab_title_max_length: int = 50

    # Navigation / headings
    heading_max_length: int = 100
    heading_max_depth: int = 5
    heading_max_words: int = 8
    heading_similarity_ratio: float = 0.2  # normalized edit distance below this = too similar

    # Front matter
    description_max_length: int = 160     # search engines truncate past this

    # "Did you mean" suggestions for admonition types
    suggestion_max_distance: int = 3

    # Math
    inline_math_max_length: int = 50

    # Tooltips and annotations
    annotation_max_number: int = 100
    tooltip_min_length: int = 3

    # Admonition content must be indented by a multiple of this
    admonition_indent_multiple: int = 4

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load config from a YAML file, then apply environment overrides."""
        config = cls()

        if path is None and (val := os.environ.get(f"{ENV_PREFIX}CONFIG")):
            path = Path(val).expanduser()
        if path is None and Path(DEFAULT_CONFIG_FILE).is_file():
            path = Path(DEFAULT_CONFIG_FILE)

        if path is not None:
            config.update(_read_config_file(path))

        # Override rule selection from env (comma-separated ids)
        if val := os.environ.get(f"{ENV_PREFIX}ENABLE"):
            config.enabled_rules = _split_ids(val)
        if val := os.environ.get(f"{ENV_PREFIX}DISABLE"):
            config.disabled_rules = _split_ids(val)

        # Override thresholds from env
        for name in THRESHOLDS:
            if val := os.environ.get(f"{ENV_PREFIX}{name.upper()}"):
                config.update({name: val})

        return config

    def update(self, values: dict) -> None:
        """Merge a mapping of settings, coercing thresholds to their field types."""
        known = {f.name for f in fields(self)}

        for key, value in values.items():
            key = key.replace("-", "_")
            if key not in known:
                logger.warning(f"Unknown config key: {key}")
                continue

            if key in ("enabled_rules", "disabled_rules"):
                if isinstance(value, str):
                    value = _split_ids(value)
                setattr(self, key, list(value) if value is not None else None)
                continue

            caster = float if key == "heading_similarity_ratio" else int
            try:
                setattr(self, key, caster(value))
            except (TypeError, ValueError):
                raise ValueError(f"Invalid value for {key}: {value!r}") from None

    def is_rule_enabled(self, names: tuple[str, ...]) -> bool:
        """True unless the rule is disabled or excluded by ``enabled_rules``."""
        if any(name in self.disabled_rules for name in names):
            return False
        if self.enabled_rules is None:
            return True
        return any(name in self.enabled_rules for name in names)


def _split_ids(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _read_config_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a YAML mapping")

    logger.debug(f"Loaded config from {path}")
    return data

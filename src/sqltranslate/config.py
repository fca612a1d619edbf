"""
Translator config loading for the sqltranslate CLI.

Loads YAML/JSON config files and returns typed config objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .rules import DEFAULT_BOOLEAN_FRAGMENTS
from .types import Dialect


@dataclass(frozen=True)
class TranslatorConfig:
    """Settings for the rewrite pipeline and the clause commands."""

    boolean_fragments: Tuple[str, ...] = DEFAULT_BOOLEAN_FRAGMENTS
    rewrite_booleans: bool = True
    default_dialect: Dialect = Dialect.POSTGRES

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TranslatorConfig:
        fragments = d.get("boolean_fragments")
        if fragments is None:
            fragments = DEFAULT_BOOLEAN_FRAGMENTS
        elif not isinstance(fragments, (list, tuple)):
            raise ValueError("boolean_fragments must be a list of strings")
        return cls(
            boolean_fragments=tuple(str(f) for f in fragments),
            rewrite_booleans=bool(d.get("rewrite_booleans", True)),
            default_dialect=Dialect.parse(d.get("default_dialect", Dialect.POSTGRES.value)),
        )


def load_translator_config(path: str) -> TranslatorConfig:
    """
    Load translator configuration from a YAML or JSON file.

    The file must contain a mapping. Missing keys keep their defaults.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    obj = yaml.safe_load(text)
    if obj is None:
        return TranslatorConfig()
    if not isinstance(obj, dict):
        raise ValueError(f"Config file must be a YAML/JSON object, got {type(obj).__name__}")
    return TranslatorConfig.from_dict(obj)

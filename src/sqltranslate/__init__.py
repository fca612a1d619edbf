"""SQL Server to PostgreSQL query translation and dialect-aware clause helpers."""

from .clauses import append_limit_if_absent, order_by_random, paging, top_clause
from .config import TranslatorConfig, load_translator_config
from .pipeline import TranslationPipeline, translate
from .types import Dialect

__all__ = [
    "Dialect",
    "TranslationPipeline",
    "TranslatorConfig",
    "append_limit_if_absent",
    "load_translator_config",
    "order_by_random",
    "paging",
    "top_clause",
    "translate",
]

"""
Ordered rule pipeline that rewrites a SQL Server query into PostgreSQL.

This is a syntactic transliteration over a fixed set of patterns, not a parser:
text a rule does not recognize is passed through unchanged, and malformed SQL
is neither detected nor reported.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, TYPE_CHECKING

from .rules import DEFAULT_RULES, BooleanComparisonRule, Rule

if TYPE_CHECKING:
    from .config import TranslatorConfig

logger = logging.getLogger(__name__)


class TranslationPipeline:
    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES) -> None:
        self.rules: Tuple[Rule, ...] = tuple(rules)

    @classmethod
    def from_config(cls, config: "TranslatorConfig") -> TranslationPipeline:
        rules: List[Rule] = []
        for rule in DEFAULT_RULES:
            if isinstance(rule, BooleanComparisonRule):
                if not config.rewrite_booleans:
                    continue
                rule = BooleanComparisonRule(config.boolean_fragments)
            rules.append(rule)
        return cls(rules)

    @property
    def rule_names(self) -> List[str]:
        return [r.name for r in self.rules]

    def _bind(self, original: str) -> List[Rule]:
        bound: List[Rule] = []
        for rule in self.rules:
            bind = getattr(rule, "bind", None)
            bound.append(bind(original) if callable(bind) else rule)
        return bound

    def translate(self, query: Optional[str]) -> Optional[str]:
        """
        Run every rule, in order, over ``query``.

        Empty or None input is returned as is. The pipeline must be applied
        once per query; the result is not meant to be translated again.
        """
        if not query:
            return query

        sql = query
        for rule in self._bind(query):
            rewritten = rule.apply(sql)
            if rewritten != sql:
                logger.debug("rule %s rewrote query", rule.name)
            sql = rewritten
        return sql


_DEFAULT_PIPELINE = TranslationPipeline()


def translate(query: Optional[str]) -> Optional[str]:
    """Translate a SQL Server query to PostgreSQL with the default rule set."""
    return _DEFAULT_PIPELINE.translate(query)

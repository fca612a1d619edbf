"""
Rewrite rules for translating SQL Server syntax to PostgreSQL.

Each rule is a small object with a ``name`` and a pure ``apply(sql) -> str``.
Rules only rewrite text their pattern recognizes; everything else passes
through unchanged. Applying a rule to its own output is a no-op.

Rules that need to see the untouched input query also provide
``bind(original) -> Rule``; the pipeline calls it before running.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Protocol, Tuple, Union

from .dialects.base import has_row_limit

Replacement = Union[str, Callable[[re.Match], str]]


class Rule(Protocol):
    name: str

    def apply(self, sql: str) -> str: ...


@dataclass(frozen=True)
class RegexRule:
    """
    A rule made of one or more regex substitutions applied in order.

    Each substitution is repeated until it no longer matches, so calls nested
    inside a rewritten call (``MONTH(MONTH(d))``) are rewritten in the same
    pass. Every replacement removes the text its pattern keys on, which
    bounds the loop.
    """

    name: str
    substitutions: Tuple[Tuple[re.Pattern, Replacement], ...]

    def apply(self, sql: str) -> str:
        for pattern, repl in self.substitutions:
            while True:
                sql, n = pattern.subn(repl, sql)
                if not n:
                    break
        return sql


def _ci(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


# =============================================================================
# Patterns
# =============================================================================

TABLE_HINT_RE = _ci(r"\s+WITH\s*\([^)]+\)")
BRACKET_IDENT_RE = re.compile(r"\[([^\]]+)\]")
NEWID_RE = _ci(r"\bNEWID\s*\(\s*\)")
OFFSET_FETCH_RE = _ci(r"\s+OFFSET\s+(\d+)\s+ROWS\s+FETCH\s+NEXT\s+(\d+)\s+ROWS\s+ONLY")
SELECT_TOP_RE = _ci(r"\bSELECT\s+TOP\s+(\d+)\s+")
# argument may hold one level of parentheses; 'Month' is inserted before the closing one
DATENAME_MONTH_RE = _ci(r"\bDATENAME\s*\(\s*MONTH\s*,\s*((?:[^()]|\([^()]*\))+)\)")
MONTH_RE = _ci(r"\bMONTH\s*\(([^)]+)\)")
CONVERT_DATE_RE = _ci(r"\bCONVERT\s*\(\s*VARCHAR\s*\(\s*10\s*\)\s*,\s*([^,)]+?)\s*\)")
LEN_RE = _ci(r"\bLEN\s*\(")
ISNULL_RE = _ci(r"\bISNULL\s*\(")

# single-quoted literal, '' is an escaped quote
_LITERAL = r"'(?:[^']|'')*'"
# right operand is a lookahead so chains like 'a' + 'b' + 'c' rewrite in one pass
LITERAL_CONCAT_RE = re.compile(rf"({_LITERAL})\s*\+\s*(?={_LITERAL})")


# =============================================================================
# Rules
# =============================================================================

strip_table_hints = RegexRule("strip_table_hints", ((TABLE_HINT_RE, ""),))

bracket_identifiers = RegexRule("bracket_identifiers", ((BRACKET_IDENT_RE, r'"\1"'),))

random_function = RegexRule("random_function", ((NEWID_RE, "RANDOM()"),))

offset_fetch = RegexRule("offset_fetch", ((OFFSET_FETCH_RE, r" OFFSET \1 LIMIT \2"),))

date_functions = RegexRule(
    "date_functions",
    (
        (DATENAME_MONTH_RE, r"TO_CHAR(\1, 'Month')"),
        (MONTH_RE, r"EXTRACT(MONTH FROM \1)"),
        (CONVERT_DATE_RE, r"TO_CHAR(\1, 'YYYY-MM-DD')"),
    ),
)

function_renames = RegexRule(
    "function_renames",
    (
        (LEN_RE, "LENGTH("),
        (ISNULL_RE, "COALESCE("),
    ),
)

# literal-to-literal only; col + 'x' is left for the caller
string_concat = RegexRule("string_concat", ((LITERAL_CONCAT_RE, r"\1 || "),))


def find_top_limit(sql: Optional[str]) -> Optional[str]:
    """Row count of the first SELECT TOP n in ``sql``, as written."""
    m = SELECT_TOP_RE.search(sql or "")
    return m.group(1) if m else None


@dataclass(frozen=True)
class TopToLimitRule:
    """
    Remove ``SELECT TOP n`` and re-express it as a trailing ``LIMIT n``.

    The limit is taken from the original query (see ``bind``) because by the
    time this rule runs, earlier rules may already have rewritten the text.
    No LIMIT is appended when the statement already has LIMIT or OFFSET.
    """

    name: str = "top_to_limit"
    limit: Optional[str] = None

    def bind(self, original: Optional[str]) -> TopToLimitRule:
        return replace(self, limit=find_top_limit(original))

    def apply(self, sql: str) -> str:
        sql = SELECT_TOP_RE.sub("SELECT ", sql)
        if self.limit is not None and not has_row_limit(sql):
            sql = f"{sql} LIMIT {self.limit}"
        return sql


DEFAULT_BOOLEAN_FRAGMENTS: Tuple[str, ...] = (
    "is_breached",
    "active",
    "enabled",
    "disabled",
    "deleted",
    "archived",
    "published",
    "verified",
    "approved",
)


class BooleanComparisonRule:
    """
    Rewrite ``"col" = 1`` / ``"col" = 0`` to ``= true`` / ``= false``.

    Only double-quoted columns (optionally table-qualified, ``"t"."col"``)
    whose name contains one of ``fragments`` are touched. Fragment matching
    is a case-insensitive substring test.
    """

    name = "boolean_comparisons"

    # any quoted column compared to 0/1; the fragment test happens in _replace
    _pattern = re.compile(r'((?:"[^"]+"\.)?"([^"]*)")\s*=\s*([01])(?![\w.])')

    def __init__(self, fragments: Iterable[str] = DEFAULT_BOOLEAN_FRAGMENTS) -> None:
        self.fragments: Tuple[str, ...] = tuple(f for f in fragments if f)
        self._lowered = tuple(f.lower() for f in self.fragments)

    def __repr__(self) -> str:
        return f"BooleanComparisonRule(fragments={self.fragments!r})"

    def _replace(self, m: re.Match) -> str:
        column = m.group(2).lower()
        if not any(f in column for f in self._lowered):
            return m.group(0)
        literal = "true" if m.group(3) == "1" else "false"
        return f"{m.group(1)} = {literal}"

    def apply(self, sql: str) -> str:
        if not self.fragments:
            return sql
        return self._pattern.sub(self._replace, sql)


boolean_comparisons = BooleanComparisonRule()

top_to_limit = TopToLimitRule()

DEFAULT_RULES: Tuple[Rule, ...] = (
    strip_table_hints,
    bracket_identifiers,
    random_function,
    offset_fetch,
    top_to_limit,
    date_functions,
    function_renames,
    string_concat,
    boolean_comparisons,
)

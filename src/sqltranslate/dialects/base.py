from __future__ import annotations

import re
from typing import Protocol

from ..types import Dialect

LIMIT_OR_OFFSET_RE = re.compile(r"\b(LIMIT|OFFSET)\b", re.IGNORECASE)


class SQLDialect(Protocol):
    dialect: Dialect
    random_function: str  # e.g. "RANDOM()"

    def order_by_random(self, has_distinct: bool = False) -> str: ...
    def paging(self, offset: int, page_size: int) -> str: ...
    def top_clause(self, count: int) -> str: ...
    def append_limit_if_absent(self, sql: str, count: int) -> str: ...


def has_row_limit(sql: str) -> bool:
    return LIMIT_OR_OFFSET_RE.search(sql or "") is not None


class LimitStyleDialect:
    """
    Shared behavior for dialects that limit rows with a trailing
    OFFSET/LIMIT instead of a leading TOP.
    """

    dialect: Dialect
    random_function = "RANDOM()"

    def order_by_random(self, has_distinct: bool = False) -> str:
        # random ordering cannot be combined with DISTINCT, sort by the first column instead
        return "1" if has_distinct else self.random_function

    def paging(self, offset: int, page_size: int) -> str:
        return f" OFFSET {offset} LIMIT {page_size}"

    def top_clause(self, count: int) -> str:
        return ""

    def append_limit_if_absent(self, sql: str, count: int) -> str:
        if has_row_limit(sql):
            return sql
        return f"{sql} LIMIT {count}"

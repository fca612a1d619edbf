"""
Dialect-aware clause generators.

Helpers for callers that assemble a query programmatically and need the
random-ordering, paging or row-limiting fragment for a given database type.
All functions are total: an unknown or missing dialect name selects the
SQL Server behavior.
"""

from __future__ import annotations

from typing import Optional, Union

from .dialects import get as get_dialect
from .types import Dialect

DialectName = Optional[Union[str, Dialect]]


def order_by_random(dialect: DialectName, has_distinct: bool = False) -> str:
    """
    ORDER BY key for random ordering.

    With DISTINCT a random sort key is not allowed in the select list, so the
    ordinal "1" is returned for every dialect.
    """
    return get_dialect(dialect).order_by_random(has_distinct)


def paging(dialect: DialectName, offset: int, page_size: int) -> str:
    """Paging clause with a leading space. Values are not validated."""
    return get_dialect(dialect).paging(offset, page_size)


def top_clause(dialect: DialectName, count: int) -> str:
    """'TOP n ' for SQL Server, '' for dialects that limit at the end."""
    return get_dialect(dialect).top_clause(count)


def append_limit_if_absent(sql: str, dialect: DialectName, count: int) -> str:
    """
    Append ' LIMIT n' for LIMIT-style dialects unless the statement already
    has a LIMIT or OFFSET keyword. SQL Server statements are returned as is.
    """
    return get_dialect(dialect).append_limit_if_absent(sql, count)

from __future__ import annotations

from ..types import Dialect
from .registry import register


class SqlServerDialect:
    """The source dialect. Rows are limited with TOP or OFFSET ... FETCH."""

    dialect = Dialect.SQLSERVER
    random_function = "NEWID()"

    def order_by_random(self, has_distinct: bool = False) -> str:
        return "1" if has_distinct else self.random_function

    def paging(self, offset: int, page_size: int) -> str:
        return f" OFFSET {offset} ROWS FETCH NEXT {page_size} ROWS ONLY"

    def top_clause(self, count: int) -> str:
        # spliced directly after "SELECT "
        return f"TOP {count} "

    def append_limit_if_absent(self, sql: str, count: int) -> str:
        return sql


register(SqlServerDialect())

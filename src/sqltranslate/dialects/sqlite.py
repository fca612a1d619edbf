from __future__ import annotations

from ..types import Dialect
from .base import LimitStyleDialect
from .registry import register


class SqliteDialect(LimitStyleDialect):
    dialect = Dialect.SQLITE
    random_function = "RANDOM()"


register(SqliteDialect())

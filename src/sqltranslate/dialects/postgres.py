from __future__ import annotations

from ..types import Dialect
from .base import LimitStyleDialect
from .registry import register


class PostgresDialect(LimitStyleDialect):
    dialect = Dialect.POSTGRES
    random_function = "RANDOM()"


register(PostgresDialect())

from __future__ import annotations

from ..types import Dialect
from .base import LimitStyleDialect
from .registry import register


class MySqlDialect(LimitStyleDialect):
    dialect = Dialect.MYSQL
    random_function = "RAND()"  # no RANDOM() in MySQL


register(MySqlDialect())

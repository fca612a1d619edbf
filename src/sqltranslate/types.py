from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")


class Dialect(str, Enum):
    SQLSERVER = "sqlserver"  # source dialect, also the fallback
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @property
    def is_limit_style(self) -> bool:
        return self is not Dialect.SQLSERVER

    @classmethod
    def parse(cls, name: Optional[str]) -> Dialect:
        """
        Resolve a caller-supplied dialect name.

        Case, whitespace and punctuation are ignored ("Postgre Sql" and
        "postgresql" are the same name). Anything unrecognized, including None,
        resolves to SQLSERVER.
        """
        if isinstance(name, Dialect):
            return name
        key = normalize_dialect_name(name)
        dialect = DIALECT_ALIASES.get(key)
        if dialect is None:
            logger.debug("unrecognized dialect %r, falling back to %s", name, cls.SQLSERVER.value)
            return cls.SQLSERVER
        return dialect


def normalize_dialect_name(name: Optional[str]) -> str:
    return _NON_ALNUM_RE.sub("", str(name or "").upper())


# normalized token -> dialect
DIALECT_ALIASES: Dict[str, Dialect] = {
    "POSTGRES": Dialect.POSTGRES,
    "POSTGRESQL": Dialect.POSTGRES,
    "PGSQL": Dialect.POSTGRES,
    "PG": Dialect.POSTGRES,
    "MYSQL": Dialect.MYSQL,
    "SQLITE": Dialect.SQLITE,
    "SQLITE3": Dialect.SQLITE,
    "SQLSERVER": Dialect.SQLSERVER,
    "MSSQL": Dialect.SQLSERVER,
    "TSQL": Dialect.SQLSERVER,
}


def aliases_for(dialect: Dialect) -> Tuple[str, ...]:
    return tuple(k.lower() for k, v in DIALECT_ALIASES.items() if v is dialect)

"""Dialect implementations; importing this package registers all of them."""

from . import mysql, postgres, sqlite, sqlserver  # noqa: F401
from .base import LimitStyleDialect, SQLDialect, has_row_limit
from .registry import available, get, register

__all__ = [
    "LimitStyleDialect",
    "SQLDialect",
    "has_row_limit",
    "available",
    "get",
    "register",
]

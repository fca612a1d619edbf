from __future__ import annotations

from typing import Dict, Optional, Union

from ..types import Dialect
from .base import LimitStyleDialect, SQLDialect

_REGISTRY: Dict[Dialect, SQLDialect] = {}


def register(dialect: SQLDialect) -> None:
    key = getattr(dialect, "dialect", None)
    if not isinstance(key, Dialect):
        raise ValueError("Dialect implementation must define a .dialect member")
    if isinstance(dialect, LimitStyleDialect) != key.is_limit_style:
        raise ValueError(
            f"Dialect '{key.value}' must {'' if key.is_limit_style else 'not '}derive from LimitStyleDialect"
        )
    _REGISTRY[key] = dialect


def get(name: Optional[Union[str, Dialect]]) -> SQLDialect:
    """Look up a dialect by name or alias; unknown names get the source dialect."""
    return _REGISTRY[Dialect.parse(name)]


def available() -> Dict[Dialect, SQLDialect]:
    return dict(_REGISTRY)

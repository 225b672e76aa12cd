"""Discriminator coercion shared by the pattern demos."""

from __future__ import annotations

from enum import Enum
from typing import Any, Type, TypeVar

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: Type[E], value: Any) -> E:
    """Coerce a member, its value or its name (any case) into ``enum_cls``.

    Anything else, including None and non-strings, raises ValueError.
    """
    if isinstance(value, enum_cls):
        return value
    wanted = str(value).lower()
    for member in enum_cls:
        if wanted in (str(member.value).lower(), member.name.lower()):
            return member
    raise ValueError(
        f"Unknown {enum_cls.__name__} '{value}'. "
        f"Available: {[m.value for m in enum_cls]}"
    )

"""Column types mapping identifier value objects to text columns.

Binding accepts either the value object or its raw string; loading
always yields the value object. ``None`` passes through untouched.
Each concrete type sets its own ``cache_ok``; SQLAlchemy does not
inherit it.
"""

from __future__ import annotations

from typing import Any, ClassVar

from sqlalchemy import String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from blogadmin.domain.ids import AbstractStringId, AbstractUuidId, PostId, UserId


class StringIdType(TypeDecorator[AbstractStringId]):
    """Base mapper for string-backed identifiers."""

    impl = Text
    cache_ok = True

    mapped_class: ClassVar[type[AbstractStringId]]

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, self.mapped_class):
            return value.value
        return self.mapped_class(str(value)).value

    def process_result_value(self, value: Any, dialect: Dialect) -> AbstractStringId | None:
        if value is None:
            return None
        return self.mapped_class(value)


class UuidIdType(TypeDecorator[AbstractUuidId]):
    """Base mapper for UUID-backed identifiers, stored as 36-char text."""

    impl = String(36)
    cache_ok = True

    mapped_class: ClassVar[type[AbstractUuidId]]

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, self.mapped_class):
            return value.value
        # Normalizes and validates raw input.
        return self.mapped_class(str(value)).value

    def process_result_value(self, value: Any, dialect: Dialect) -> AbstractUuidId | None:
        if value is None:
            return None
        return self.mapped_class(value)


class PostIdType(StringIdType):
    cache_ok = True
    mapped_class = PostId


class UserIdType(UuidIdType):
    cache_ok = True
    mapped_class = UserId

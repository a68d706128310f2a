"""Typed identifier value objects.

Two identifier strategies:
- String-backed (posts): any non-empty string, e.g. ``"42"``.
- UUID-backed (users): canonical lowercase UUID text.

INVARIANT: Identifiers are immutable. Equality and hashing are by value,
and an identifier of one entity never compares equal to another entity's.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, slots=True)
class AbstractStringId:
    """Base for identifiers wrapping an opaque string."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = f"{type(self).__name__} requires a non-empty string, got {self.value!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh identifier."""
        return cls(uuid.uuid4().hex)


@dataclass(frozen=True, slots=True)
class AbstractUuidId:
    """Base for identifiers wrapping a UUID, stored in canonical text form."""

    value: str

    def __post_init__(self) -> None:
        try:
            canonical = str(uuid.UUID(str(self.value)))
        except (ValueError, AttributeError, TypeError) as exc:
            msg = f"{type(self).__name__} requires a UUID, got {self.value!r}"
            raise ValueError(msg) from exc
        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random (v4) identifier."""
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True, slots=True)
class PostId(AbstractStringId):
    """Identifier of a blog post."""


@dataclass(frozen=True, slots=True)
class UserId(AbstractUuidId):
    """Identifier of a user account."""

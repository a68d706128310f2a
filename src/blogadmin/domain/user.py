"""User accounts (the actors of authorization decisions)."""

from __future__ import annotations

from dataclasses import dataclass, field

from blogadmin.domain.ids import UserId
from blogadmin.domain.types import Role


@dataclass(frozen=True)
class User:
    """An authenticated user.

    Every user implicitly holds ``ROLE_USER``; further roles are granted
    explicitly.
    """

    id: UserId
    username: str
    full_name: str = ""
    email: str = ""
    roles: frozenset[Role] = field(default_factory=frozenset)

    @property
    def effective_roles(self) -> frozenset[Role]:
        return self.roles | {Role.USER}

    def has_role(self, role: Role | str) -> bool:
        return role in self.effective_roles

    @property
    def is_admin(self) -> bool:
        return self.has_role(Role.ADMIN)

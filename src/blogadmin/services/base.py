"""BaseService: shared foundation for blogadmin services.

Every service receives a :class:`Database` at construction time and owns
its transaction boundaries via ``self._db.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blogadmin.infrastructure.store import Database


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PostService(BaseService):
            def delete(self, post: Post) -> ServiceResult:
                with self._db.transaction() as conn:
                    ...
    """

    def __init__(self, database: Database) -> None:
        self._db = database

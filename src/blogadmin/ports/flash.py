"""Flash message port: one-shot notifications shown after a redirect."""

from __future__ import annotations

from typing import Protocol


class FlashMessageService(Protocol):
    def success(self, message_key: str) -> None: ...


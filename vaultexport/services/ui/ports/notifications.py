from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotificationService(Protocol):
    """
    Transient user-visible messages (toast / status line). Decouples export logic
    from whatever the host uses to show them.
    """

    def notify(self, text: str, duration_ms: int | None = None) -> None: ...

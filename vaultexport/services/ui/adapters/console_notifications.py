from __future__ import annotations

import sys
from typing import TextIO

from vaultexport.services.ui.ports.notifications import INotificationService

DEFAULT_DURATION_MS = 5000


class ConsoleNotificationService(INotificationService):
    """Writes notices to a text stream, one per line. Long-lived notices are marked with '!'."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, text: str, duration_ms: int | None = None) -> None:
        stream = self._stream or sys.stdout
        marker = "!" if (duration_ms or DEFAULT_DURATION_MS) > DEFAULT_DURATION_MS else "*"
        stream.write(f"{marker} {text}\n")
        stream.flush()

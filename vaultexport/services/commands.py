from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# checking=True: only report availability. checking=False: start the action.
CheckCallback = Callable[[bool], bool]


@dataclass(frozen=True)
class Command:
    id: str
    name: str
    check_callback: CheckCallback

    def is_enabled(self) -> bool:
        return self.check_callback(True)

    def execute(self) -> bool:
        """Start the command. Returns False if it was not available."""
        return self.check_callback(False)


class CommandRegistry:
    """Invocable actions exposed to the host. Started actions run as fire-and-forget tasks."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._pending: set[asyncio.Task[Any]] = set()

    def add_command(self, command: Command) -> None:
        self._commands[command.id] = command

    def get(self, command_id: str) -> Command:
        return self._commands[command_id]

    def all(self) -> list[Command]:
        return list(self._commands.values())

    def clear(self) -> None:
        self._commands.clear()

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every started action. The first failure is re-raised."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

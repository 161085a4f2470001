from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from vaultexport.domain.interfaces import ISettingsService

logger = logging.getLogger(__name__)

CONVERTER = "document-converter"
TYPESETTING = "typesetting-engine"

ExecutableFinder = Callable[[str], Awaitable[str | None]]


@dataclass(frozen=True)
class ExternalTool:
    capability: str
    executable: str
    setting: Callable[[ISettingsService], str]


KNOWN_TOOLS: tuple[ExternalTool, ...] = (
    ExternalTool(CONVERTER, "pandoc", lambda s: s.get_pandoc_path()),
    ExternalTool(TYPESETTING, "pdflatex", lambda s: s.get_pdflatex_path()),
)


class CapabilityMap(Mapping[str, "str | None"]):
    """Read-only capability name -> executable path (None when absent)."""

    def __init__(self, entries: Mapping[str, str | None] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> str | None:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, capability: str) -> bool:
        return bool(self._entries.get(capability))

    def __repr__(self) -> str:
        return f"CapabilityMap({dict(self._entries)!r})"


async def find_executable(name: str) -> str | None:
    """PATH lookup, run off the event loop."""
    return await asyncio.to_thread(shutil.which, name)


def resolve_capabilities(
    configured: Mapping[str, str | None], probed: Mapping[str, str | None]
) -> CapabilityMap:
    """An explicit non-empty configured path wins over the PATH probe."""
    resolved: dict[str, str | None] = {}
    for tool in KNOWN_TOOLS:
        explicit = (configured.get(tool.capability) or "").strip()
        resolved[tool.capability] = explicit or probed.get(tool.capability) or None
    return CapabilityMap(resolved)


async def detect_capabilities(
    settings: ISettingsService, finder: ExecutableFinder = find_executable
) -> CapabilityMap:
    configured = {tool.capability: tool.setting(settings) for tool in KNOWN_TOOLS}
    probed: dict[str, str | None] = {}
    for tool in KNOWN_TOOLS:
        if (configured[tool.capability] or "").strip():
            continue
        probed[tool.capability] = await finder(tool.executable)
    caps = resolve_capabilities(configured, probed)
    for name, path in caps.items():
        if path:
            logger.info(f"Capability {name}: {path}")
        else:
            logger.info(f"Capability {name}: not found")
    return caps


class CapabilityRegistry:
    """Caches the capability map for the session; `refresh()` rebuilds it."""

    def __init__(self, settings: ISettingsService, finder: ExecutableFinder = find_executable) -> None:
        self._settings = settings
        self._finder = finder
        self._map = CapabilityMap()

    @property
    def capabilities(self) -> CapabilityMap:
        return self._map

    async def refresh(self) -> CapabilityMap:
        self._map = await detect_capabilities(self._settings, self._finder)
        return self._map

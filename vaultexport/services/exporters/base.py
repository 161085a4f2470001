from __future__ import annotations

from dataclasses import dataclass, field

from vaultexport.domain.interfaces import IExporter, IExporterRegistry


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Instance-based exporter registry keyed by output format name.
    Kept local to the DI container for testability.
    """

    _reg: dict[str, IExporter] = field(default_factory=dict)

    def register(self, e: IExporter) -> None:
        self._reg[e.name] = e

    def get(self, name: str) -> IExporter:
        return self._reg[name]

    def has(self, name: str) -> bool:
        return name in self._reg

    def all(self) -> list[IExporter]:
        return list(self._reg.values())

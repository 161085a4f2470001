from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from vaultexport.domain.formats import OUTPUT_FORMATS
from vaultexport.domain.interfaces import IFileService, IMarkdownRenderer, ISettingsService
from vaultexport.plugin import ExportPlugin
from vaultexport.services.capabilities import CapabilityRegistry, ExecutableFinder, find_executable
from vaultexport.services.commands import CommandRegistry
from vaultexport.services.config.ini_config_service import IniConfigService
from vaultexport.services.export import (
    BatchExportOrchestrator,
    MapAggregator,
    export_destinations,
    resolve_output_folder,
)
from vaultexport.services.exporters import ExporterRegistryInst, HtmlExporter, PandocExporter
from vaultexport.services.file_service import FileService
from vaultexport.services.markdown_renderer import MarkdownRenderer
from vaultexport.services.settings_service import SettingsService
from vaultexport.services.ui.adapters import ConsoleNotificationService
from vaultexport.services.ui.ports.notifications import INotificationService
from vaultexport.services.workspace import Vault, Workspace
from vaultexport.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers the built-in exporters (html + one pandoc exporter per converter format)
      - Builds the orchestrator, the map aggregator and the plugin that exposes them
    """

    def __init__(
        self,
        vault_root: Path,
        *,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        config: IniConfigService | None = None,
        notifications: INotificationService | None = None,
        finder: ExecutableFinder = find_executable,
    ) -> None:
        # Core services (defaults if not supplied)
        self.config = config or IniConfigService()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            math_engine=self.config.math_engine()
        )
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings(APP_ORG, APP_NAME)
        )
        self.notifications: INotificationService = notifications or ConsoleNotificationService()

        self.vault = Vault(vault_root, ignored=self._export_destinations)
        self.workspace = Workspace(self.vault, self.file_service)
        self.capabilities = CapabilityRegistry(self.settings_service, finder)

        self.exporters = ExporterRegistryInst()
        self._ensure_builtin_exporters()

        common = dict(
            vault=self.vault,
            workspace=self.workspace,
            renderer=self.renderer,
            exporters=self.exporters,
            notifications=self.notifications,
            settings=self.settings_service,
        )
        self.orchestrator = BatchExportOrchestrator(**common)
        self.map_aggregator = MapAggregator(
            files=self.file_service, map_filename=self.config.map_filename(), **common
        )

        self.commands = CommandRegistry()
        self.plugin = ExportPlugin(
            vault=self.vault,
            workspace=self.workspace,
            settings=self.settings_service,
            capabilities=self.capabilities,
            exporters=self.exporters,
            orchestrator=self.orchestrator,
            map_aggregator=self.map_aggregator,
            commands=self.commands,
        )

    # ---------- Internals ----------

    def _export_destinations(self) -> list[Path]:
        root = self.vault.root
        return export_destinations(
            root, resolve_output_folder(self.settings_service.get_output_folder(), root)
        )

    def _ensure_builtin_exporters(self) -> None:
        if not self.exporters.has("html"):
            self.exporters.register(HtmlExporter(self.file_service))

        for fmt in OUTPUT_FORMATS:
            if not fmt.needs_converter or self.exporters.has(fmt.name):
                continue
            self.exporters.register(
                PandocExporter(
                    fmt,
                    capabilities=lambda: self.capabilities.capabilities,
                    extra_arguments=self.settings_service.get_extra_arguments,
                )
            )

from __future__ import annotations

import logging

from vaultexport.domain.errors import VaultNotFoundError
from vaultexport.domain.formats import HTML, MAP, OUTPUT_FORMATS, OutputFormat, get_format
from vaultexport.domain.interfaces import IExporterRegistry, ISettingsService
from vaultexport.services.capabilities import CapabilityRegistry
from vaultexport.services.commands import Command, CommandRegistry
from vaultexport.services.eligibility import can_export
from vaultexport.services.export import BatchExportOrchestrator, BatchReport, MapAggregator
from vaultexport.services.workspace import Vault, Workspace

logger = logging.getLogger(__name__)


class ExportPlugin:
    """
    Lifecycle glue: detects external tools once, registers the export commands,
    and routes each command to the orchestrator or the map aggregator.
    """

    def __init__(
        self,
        *,
        vault: Vault,
        workspace: Workspace,
        settings: ISettingsService,
        capabilities: CapabilityRegistry,
        exporters: IExporterRegistry,
        orchestrator: BatchExportOrchestrator,
        map_aggregator: MapAggregator,
        commands: CommandRegistry,
    ) -> None:
        self.vault = vault
        self.workspace = workspace
        self.settings = settings
        self.capabilities = capabilities
        self.exporters = exporters
        self.orchestrator = orchestrator
        self.map_aggregator = map_aggregator
        self.commands = commands

    # ---------- lifecycle ----------

    async def load(self) -> None:
        logger.info("Loading export plugin")
        await self.capabilities.refresh()
        self.register_commands()

    def unload(self) -> None:
        logger.info("Unloading export plugin")
        self.commands.clear()

    async def save_settings(self) -> None:
        self.settings.sync()
        await self.capabilities.refresh()

    # ---------- gates ----------

    def _has_documents(self) -> bool:
        try:
            return bool(self.vault.list_documents())
        except VaultNotFoundError as e:
            logger.warning(str(e))
            return False

    def current_document_can_be_exported(self, fmt: str | OutputFormat) -> bool:
        return can_export(
            get_format(fmt), self.workspace.active_path(), self.capabilities.capabilities
        )

    # ---------- actions ----------

    async def export_all(self, fmt: str | OutputFormat) -> BatchReport:
        resolved = get_format(fmt)
        target = self.map_aggregator if resolved.name == MAP.name else self.orchestrator
        return await target.export_all(resolved)

    async def export_current(self, fmt: str | OutputFormat) -> BatchReport:
        doc = self.workspace.active_document
        if doc is None:
            raise RuntimeError("No active document to export")
        return await self.orchestrator.export_documents(fmt, [doc])

    # ---------- commands ----------

    def _export_all_callback(self, fmt: OutputFormat):
        def check(checking: bool) -> bool:
            if self.workspace.active_view is None or not self._has_documents():
                return False
            if not checking:
                self.commands.spawn(self.export_all(fmt))
            return True

        return check

    def _export_current_callback(self, fmt: OutputFormat):
        def check(checking: bool) -> bool:
            if not self.current_document_can_be_exported(fmt):
                return False
            if not checking:
                self.commands.spawn(self.export_current(fmt))
            return True

        return check

    def register_commands(self) -> None:
        self.commands.add_command(
            Command("html-exportall", "Export all as html", self._export_all_callback(HTML))
        )
        self.commands.add_command(
            Command("map-exportall", "Export all as mind map", self._export_all_callback(MAP))
        )
        for fmt in OUTPUT_FORMATS:
            if fmt.name == MAP.name or not self._has_exporter(fmt):
                continue
            self.commands.add_command(
                Command(
                    f"export-current-{fmt.name}",
                    f"Export current document as {fmt.label}",
                    self._export_current_callback(fmt),
                )
            )

    def _has_exporter(self, fmt: OutputFormat) -> bool:
        try:
            self.exporters.get(fmt.name)
        except KeyError:
            return False
        return True

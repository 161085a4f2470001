from __future__ import annotations

import asyncio
import html as html_lib
import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from vaultexport.domain.formats import MAP, OutputFormat
from vaultexport.domain.interfaces import IFileService
from vaultexport.domain.models import Document, DocumentView, RenderResult
from vaultexport.services.export.batch import (
    BatchExportOrchestrator,
    BatchReport,
    ExportJob,
    JobBatch,
)
from vaultexport.utils.constants import DEFAULT_MAP_FILENAME, MAP_FOOTER, MAP_HEADER

logger = logging.getLogger(__name__)


class MapAggregator(BatchExportOrchestrator):
    """
    Exports the whole vault into one HTML page.

    The preamble is written (truncating) before the first job, each job appends
    its rendered fragment, and the postamble is appended after the last job.
    If the process dies mid-run the destination is left without its postamble.
    """

    aggregates = True

    def __init__(self, *, files: IFileService, map_filename: str = DEFAULT_MAP_FILENAME, **kwargs) -> None:
        super().__init__(**kwargs)
        self.files = files
        self.map_filename = map_filename

    def destination(self) -> Path:
        return (self.output_folder() or self.vault.root) / self.map_filename

    def preamble(self) -> str:
        return MAP_HEADER.format(vault_name=html_lib.escape(self.vault.name))

    def make_job(self, document: Document, fmt: OutputFormat) -> ExportJob:
        job = super().make_job(document, fmt)
        return replace(job, output_path=self.destination())

    def plan(
        self, fmt: str | OutputFormat = MAP, documents: Iterable[Document] | None = None
    ) -> JobBatch:
        batch = super().plan(fmt, documents)
        dest = self.destination()

        async def append_footer() -> None:
            await asyncio.to_thread(self.files.append_text, dest, MAP_FOOTER)
            logger.info(f"Map written to {dest}")

        return replace(batch, on_complete=append_footer, destination=dest)

    async def export_all(self, fmt: str | OutputFormat = MAP) -> BatchReport:
        return await super().export_all(fmt)

    async def _before(self, batch: JobBatch) -> None:
        dest = batch.destination or self.destination()
        await asyncio.to_thread(self.files.write_text_atomic, dest, self.preamble())

    async def _render(self, view: DocumentView, job: ExportJob) -> RenderResult:
        return await self.renderer.render_fragment(view, job.input_path, job.format)

    def _write(self, job: ExportJob, html: str) -> None:
        self.files.append_text(job.output_path, html)

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from vaultexport.domain.errors import UnknownFormatError
from vaultexport.domain.formats import MAP, OUTPUT_FORMATS, OutputFormat, get_format
from vaultexport.domain.interfaces import IExporterRegistry, IMarkdownRenderer, ISettingsService
from vaultexport.domain.models import Document, DocumentView, RenderResult
from vaultexport.services.ui.ports.notifications import INotificationService
from vaultexport.services.workspace import Vault, Workspace
from vaultexport.utils.constants import NOTICE_ERROR_MS

logger = logging.getLogger(__name__)


async def _noop() -> None:
    return None


@dataclass(frozen=True)
class ExportJob:
    document: Document
    input_path: Path
    output_path: Path
    format: OutputFormat


@dataclass(frozen=True)
class JobBatch:
    format: OutputFormat
    jobs: tuple[ExportJob, ...]
    on_complete: Callable[[], Awaitable[None]] = _noop
    # set when every job writes into one shared file
    destination: Path | None = None

    def __len__(self) -> int:
        return len(self.jobs)


@dataclass(frozen=True)
class ExportOutcome:
    job: ExportJob
    ok: bool
    error: str | None = None

    @property
    def output_path(self) -> Path:
        return self.job.output_path


@dataclass
class BatchReport:
    format: OutputFormat
    outcomes: list[ExportOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[ExportOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[ExportOutcome]:
        return [o for o in self.outcomes if not o.ok]


def build_output_path(
    input_path: str | Path, fmt: OutputFormat, output_folder: str | Path | None = None
) -> Path:
    """`name.md` -> `<output_folder>/<subfolder>/name<ext>`, or `<subfolder>/name<ext>`."""
    name = Path(input_path).stem + fmt.extension
    if output_folder:
        return Path(output_folder) / fmt.subfolder / name
    return Path(fmt.subfolder) / name


def resolve_output_folder(raw: str, vault_root: Path) -> Path | None:
    """Configured output folder; a relative one is taken from the vault root."""
    if not raw:
        return None
    folder = Path(raw).expanduser()
    return folder if folder.is_absolute() else vault_root / folder


def export_destinations(vault_root: Path, output_folder: Path | None = None) -> list[Path]:
    """Per-format folders that exports write into. Enumeration must not treat them as notes."""
    base = (output_folder or vault_root).resolve()
    return [base / fmt.subfolder for fmt in OUTPUT_FORMATS if fmt.name != MAP.name]


def describe_error(e: BaseException) -> str:
    return str(e) or type(e).__name__


class BatchExportOrchestrator:
    """
    Exports every document in the vault to one format, one job at a time.

    Each job switches the workspace to its document, renders the live view, and
    hands the HTML to the format's exporter. A failing job is reported and the
    batch moves on; only setup errors (unknown format, unreadable vault) escape.
    """

    aggregates = False

    def __init__(
        self,
        *,
        vault: Vault,
        workspace: Workspace,
        renderer: IMarkdownRenderer,
        exporters: IExporterRegistry,
        notifications: INotificationService,
        settings: ISettingsService,
    ) -> None:
        self.vault = vault
        self.workspace = workspace
        self.renderer = renderer
        self.exporters = exporters
        self.notifications = notifications
        self.settings = settings

    # ---------- planning ----------

    def output_folder(self) -> Path | None:
        return resolve_output_folder(self.settings.get_output_folder(), self.vault.root)

    def _check_format(self, fmt: str | OutputFormat) -> OutputFormat:
        resolved = get_format(fmt)
        if (resolved.name == MAP.name) != self.aggregates:
            raise ValueError(f"{type(self).__name__} cannot export {resolved.name!r}")
        if not self.aggregates:
            try:
                self.exporters.get(resolved.name)
            except KeyError:
                raise UnknownFormatError(resolved.name) from None
        return resolved

    def make_job(self, document: Document, fmt: OutputFormat) -> ExportJob:
        input_path = self.vault.resolve_absolute_path(document)
        out = build_output_path(input_path, fmt, self.output_folder())
        if not out.is_absolute():
            out = self.vault.root / out
        return ExportJob(document=document, input_path=input_path, output_path=out, format=fmt)

    def plan(
        self, fmt: str | OutputFormat, documents: Iterable[Document] | None = None
    ) -> JobBatch:
        resolved = self._check_format(fmt)
        docs: Sequence[Document] = (
            self.vault.list_documents() if documents is None else list(documents)
        )
        jobs = []
        for doc in docs:
            job = self.make_job(doc, resolved)
            logger.debug(f"added job to export {job.input_path}")
            jobs.append(job)
        if not self.aggregates:
            self._warn_on_collisions(jobs)
        return JobBatch(format=resolved, jobs=tuple(jobs))

    def _warn_on_collisions(self, jobs: Sequence[ExportJob]) -> None:
        seen: dict[Path, ExportJob] = {}
        for job in jobs:
            first = seen.setdefault(job.output_path, job)
            if first is not job:
                logger.warning(
                    f"{first.document.path} and {job.document.path} both export to "
                    f"{job.output_path}; the later one wins"
                )

    # ---------- execution ----------

    async def export_all(self, fmt: str | OutputFormat) -> BatchReport:
        return await self.run(self.plan(fmt))

    async def export_documents(
        self, fmt: str | OutputFormat, documents: Iterable[Document]
    ) -> BatchReport:
        return await self.run(self.plan(fmt, documents))

    async def run(self, batch: JobBatch) -> BatchReport:
        logger.info(f"total number of jobs: {len(batch.jobs)}")
        await self._before(batch)
        report = BatchReport(format=batch.format)
        for job in batch.jobs:
            report.outcomes.append(await self._run_job(job))
        await batch.on_complete()
        logger.info(
            f"{batch.format.name} export finished: "
            f"{len(report.succeeded)} succeeded, {len(report.failed)} failed"
        )
        return report

    async def _run_job(self, job: ExportJob) -> ExportOutcome:
        self.notifications.notify(f"Exporting {job.input_path} to {job.format.name}")
        logger.info(f"exporting: {job.input_path}")
        try:
            async with self.workspace.activate(job.document) as view:
                result = await self._render(view, job)
                await asyncio.to_thread(self._write, job, result.html)
        except Exception as e:
            self.notifications.notify(f"Export failed: {describe_error(e)}", NOTICE_ERROR_MS)
            logger.exception(f"Failed to export {job.input_path}")
            return ExportOutcome(job=job, ok=False, error=describe_error(e))

        logger.info(f"Successfully exported: {job.input_path}")
        self.notifications.notify(f"Successfully exported {job.input_path} to {job.output_path}")
        return ExportOutcome(job=job, ok=True)

    # ---------- hooks ----------

    async def _before(self, batch: JobBatch) -> None:
        return None

    async def _render(self, view: DocumentView, job: ExportJob) -> RenderResult:
        return await self.renderer.render(view, job.input_path, job.format)

    def _write(self, job: ExportJob, html: str) -> None:
        self.exporters.get(job.format.name).export(html, job.output_path)

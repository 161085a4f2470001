from __future__ import annotations

from pathlib import Path

from vaultexport.domain.interfaces import IExporter, IFileService
from vaultexport.services.file_service import FileService


class HtmlExporter(IExporter):
    name = "html"
    label = "HTML"

    def __init__(self, files: IFileService | None = None) -> None:
        self._files = files or FileService()

    def export(self, html: str, out_path: Path) -> None:
        self._files.write_text_atomic(out_path, html)

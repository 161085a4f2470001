from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol

from vaultexport.domain.formats import OutputFormat
from vaultexport.domain.models import DocumentView, RenderResult


class IMarkdownRenderer(Protocol):
    """Render the active document view to HTML (full page or body fragment)."""

    async def render(
        self, view: DocumentView, input_path: Path, fmt: OutputFormat
    ) -> RenderResult: ...

    async def render_fragment(
        self, view: DocumentView, input_path: Path, fmt: OutputFormat
    ) -> RenderResult: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def append_text(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve user-overridable export settings."""

    def get_pandoc_path(self) -> str: ...
    def set_pandoc_path(self, value: str) -> None: ...
    def get_pdflatex_path(self) -> str: ...
    def set_pdflatex_path(self, value: str) -> None: ...
    def get_output_folder(self) -> str: ...
    def set_output_folder(self, value: str) -> None: ...
    def get_extra_arguments(self) -> list[str]: ...
    def set_extra_arguments(self, args: list[str]) -> None: ...
    def get_last_active(self) -> str: ...
    def set_last_active(self, path: str) -> None: ...
    def sync(self) -> None: ...


class IConfigService(Protocol):
    """Read-only application configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...


class IExporter(ABC):
    """Export strategy interface. Implementations turn rendered HTML into one output file."""

    name: str  # output format name, e.g. "html", "docx"
    label: str  # e.g. "HTML"

    @abstractmethod
    def export(self, html: str, out_path: Path) -> None:
        """Perform export. 'html' contains a full HTML document string."""
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import asynccontextmanager
from pathlib import Path

from vaultexport.domain.errors import VaultNotFoundError
from vaultexport.domain.formats import INPUT_EXTENSIONS
from vaultexport.domain.interfaces import IFileService
from vaultexport.domain.models import Document, DocumentView
from vaultexport.utils.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)


class Vault:
    """
    Directory-backed document store. Hidden folders (e.g. `.obsidian`, `.git`) are skipped,
    as are the folders named by `ignored` (export destinations inside the vault).
    """

    def __init__(self, root: Path, ignored: Callable[[], Iterable[Path]] | None = None) -> None:
        self.root = Path(root).expanduser().resolve()
        self._ignored = ignored or (lambda: ())

    @property
    def name(self) -> str:
        return self.root.name

    def list_documents(self) -> list[Document]:
        if not self.root.is_dir():
            raise VaultNotFoundError(f"Vault folder does not exist: {self.root}")
        ignored = [Path(d) for d in self._ignored()]
        docs: list[Document] = []
        for p in self.root.rglob("*"):
            rel = p.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if any(p.is_relative_to(d) for d in ignored):
                continue
            if p.is_file() and p.suffix.lower() in INPUT_EXTENSIONS:
                docs.append(Document(path=rel.as_posix(), absolute_path=p))
        docs.sort(key=lambda d: d.path)
        return docs

    def get_document(self, path: str) -> Document | None:
        p = self.root / path
        if not p.is_file() or p.suffix.lower() not in INPUT_EXTENSIONS:
            return None
        return Document(path=p.relative_to(self.root).as_posix(), absolute_path=p)

    def resolve_absolute_path(self, document: Document) -> Path:
        return self.root / document.path


class Workspace:
    """
    Holds the single active-document slot.

    Rendering reads the active view, so a job must switch documents and render
    while holding the slot. `activate()` is the only way the exporter does this.
    """

    def __init__(self, vault: Vault, files: IFileService) -> None:
        self.vault = vault
        self._files = files
        self._view: DocumentView | None = None
        self._lock = asyncio.Lock()

    @property
    def active_document(self) -> Document | None:
        return self._view.document if self._view else None

    @property
    def active_view(self) -> DocumentView | None:
        return self._view

    def active_path(self) -> str | None:
        doc = self.active_document
        return str(self.vault.resolve_absolute_path(doc)) if doc else None

    async def set_active_document(self, document: Document) -> DocumentView:
        path = self.vault.resolve_absolute_path(document)
        text = await asyncio.to_thread(self._files.read_text, path)
        frontmatter, _ = parse_frontmatter(text)
        self._view = DocumentView(document=document, text=text, frontmatter=frontmatter)
        logger.debug(f"Active document: {document.path}")
        return self._view

    @asynccontextmanager
    async def activate(self, document: Document) -> AsyncIterator[DocumentView]:
        """Switch to `document` and hold the view until the block exits."""
        async with self._lock:
            view = await self.set_active_document(document)
            yield view

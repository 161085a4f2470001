from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Document:
    """A note in the vault. `path` is vault-relative (POSIX) and is the stable id."""

    path: str
    absolute_path: Path

    @property
    def extension(self) -> str:
        return self.absolute_path.suffix.lower()

    @property
    def stem(self) -> str:
        return self.absolute_path.stem


@dataclass(frozen=True)
class DocumentView:
    """
    Live displayed state of the active document.

    Only the workspace hands these out; the renderer reads from it instead of
    going back to the file on disk.
    """

    document: Document
    text: str
    frontmatter: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderResult:
    html: str
    metadata: dict[str, Any] = field(default_factory=dict)

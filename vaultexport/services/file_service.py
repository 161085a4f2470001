from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QFile, QIODevice, QSaveFile

from vaultexport.domain.interfaces import IFileService


class FileService(IFileService):
    """Atomic writes and appends for exported text files. Parent folders are created."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text_atomic(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")

    def append_text(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        f = QFile(str(path))
        if not f.open(QIODevice.OpenModeFlag.WriteOnly | QIODevice.OpenModeFlag.Append):
            raise OSError(f"Cannot open for append: {path}")
        try:
            data = text.encode("utf-8")
            if f.write(data) != len(data):
                raise OSError(f"Short write while appending to: {path}")
        finally:
            f.close()

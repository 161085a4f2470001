from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings

from vaultexport.di.container import Container
from vaultexport.domain.formats import OutputFormat
from vaultexport.domain.models import DocumentView, RenderResult
from vaultexport.services.config.ini_config_service import IniConfigService
from vaultexport.services.file_service import FileService
from vaultexport.services.markdown_renderer import MarkdownRenderer
from vaultexport.services.settings_service import SettingsService


# --- Fakes ---


class RecordingNotifications:
    """Notification sink that keeps (text, duration_ms) pairs."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, int | None]] = []

    def notify(self, text: str, duration_ms: int | None = None) -> None:
        self.messages.append((text, duration_ms))

    @property
    def texts(self) -> list[str]:
        return [t for t, _ in self.messages]


class FakeRenderer:
    """
    Deterministic renderer. Records the active view it was handed and can be told
    to fail for specific vault-relative paths.
    """

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = set(fail_for or ())
        self.calls: list[tuple[str, str]] = []  # (mode, document path)

    def _check(self, view: DocumentView, mode: str) -> None:
        self.calls.append((mode, view.document.path))
        if view.document.path in self.fail_for:
            raise RuntimeError(f"cannot render {view.document.path}")

    async def render(self, view: DocumentView, input_path: Path, fmt: OutputFormat) -> RenderResult:
        self._check(view, "full")
        return RenderResult(html=f"<html><body>{view.text}</body></html>", metadata={})

    async def render_fragment(
        self, view: DocumentView, input_path: Path, fmt: OutputFormat
    ) -> RenderResult:
        self._check(view, "fragment")
        return RenderResult(html=f"<section>{view.document.path}</section>\n", metadata={})


async def no_tools(name: str) -> str | None:
    return None


# --- Common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def notifications() -> RecordingNotifications:
    return RecordingNotifications()


@pytest.fixture()
def app_config(monkeypatch, tmp_path: Path) -> IniConfigService:
    monkeypatch.setattr(
        "vaultexport.services.config.ini_config_service.user_config_dir",
        lambda app: str(tmp_path / "no-user-config"),
    )
    return IniConfigService()


@pytest.fixture()
def vault_dir(tmp_path: Path) -> Path:
    """
    Small vault:
      alpha.md, beta.md, notes/gamma.markdown, plus files that must be ignored.
    """
    root = tmp_path / "vault"
    (root / "notes").mkdir(parents=True)
    (root / ".obsidian").mkdir()
    (root / "alpha.md").write_text("# Alpha\n\nFirst note.\n", encoding="utf-8")
    (root / "beta.md").write_text("# Beta\n\nLinks to [[alpha]].\n", encoding="utf-8")
    (root / "notes" / "gamma.markdown").write_text(
        "---\ntitle: Gamma Ray\ntags: [x]\n---\n# Gamma\n", encoding="utf-8"
    )
    (root / "notes" / "image.png").write_bytes(b"\x89PNG")
    (root / ".obsidian" / "workspace.md").write_text("hidden", encoding="utf-8")
    return root


@pytest.fixture()
def make_container(qsettings, notifications, app_config):
    def _make(vault_root: Path, *, renderer=None, finder=no_tools) -> Container:
        return Container(
            vault_root,
            renderer=renderer,
            qsettings=qsettings,
            config=app_config,
            notifications=notifications,
            finder=finder,
        )

    return _make

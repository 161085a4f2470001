from __future__ import annotations

import shlex

from PyQt6.QtCore import QSettings

from vaultexport.domain.interfaces import ISettingsService
from vaultexport.utils.constants import (
    SETTINGS_EXTRA_ARGUMENTS,
    SETTINGS_LAST_ACTIVE,
    SETTINGS_OUTPUT_FOLDER,
    SETTINGS_PANDOC_PATH,
    SETTINGS_PDFLATEX_PATH,
)


class SettingsService(ISettingsService):
    """Persist user overrides: tool paths, output folder, extra converter arguments."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def _get_str(self, key: str) -> str:
        v = self._s.value(key, "")
        return str(v).strip() if v is not None else ""

    def get_pandoc_path(self) -> str:
        return self._get_str(SETTINGS_PANDOC_PATH)

    def set_pandoc_path(self, value: str) -> None:
        self._s.setValue(SETTINGS_PANDOC_PATH, value)

    def get_pdflatex_path(self) -> str:
        return self._get_str(SETTINGS_PDFLATEX_PATH)

    def set_pdflatex_path(self, value: str) -> None:
        self._s.setValue(SETTINGS_PDFLATEX_PATH, value)

    def get_output_folder(self) -> str:
        return self._get_str(SETTINGS_OUTPUT_FOLDER)

    def set_output_folder(self, value: str) -> None:
        self._s.setValue(SETTINGS_OUTPUT_FOLDER, value)

    def get_extra_arguments(self) -> list[str]:
        # stored as one shell-style string so the INI stays hand-editable
        return shlex.split(self._get_str(SETTINGS_EXTRA_ARGUMENTS))

    def set_extra_arguments(self, args: list[str]) -> None:
        self._s.setValue(SETTINGS_EXTRA_ARGUMENTS, shlex.join(args))

    def get_last_active(self) -> str:
        return self._get_str(SETTINGS_LAST_ACTIVE)

    def set_last_active(self, path: str) -> None:
        self._s.setValue(SETTINGS_LAST_ACTIVE, path)

    def sync(self) -> None:
        self._s.sync()

# vaultexport/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from vaultexport.domain.interfaces import IConfigService
from vaultexport.utils.constants import DEFAULT_MAP_FILENAME

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed application configuration.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/VaultExport/config.ini or %APPDATA%\VaultExport\config.ini)
      3. Project default at <project_root>/config/config.ini  (optional)

    Recognised keys:
      [logging] level, destination
      [export]  map_filename
      [render]  math_engine (mathjax | katex)
    """

    DEFAULT_APP_DIR = "VaultExport"
    DEFAULT_FILE = "config.ini"
    MATH_ENGINES = ("mathjax", "katex")

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, configparser.Error) as e:
                # fall through to the next candidate
                logger.warning(f"Ignoring unreadable config {path}: {e}")
                self._parser = configparser.ConfigParser()
                continue
            self._loaded_from = path
            break

        for section in ("logging", "export", "render"):
            if section not in self._parser:
                self._parser[section] = {}
        self._parser["logging"].setdefault("level", "INFO")
        self._parser["export"].setdefault("map_filename", DEFAULT_MAP_FILENAME)
        self._parser["render"].setdefault("math_engine", "mathjax")

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    # ----- Typed accessors -----

    def log_level(self) -> str:
        return self.get("logging", "level", "INFO") or "INFO"

    def log_destination(self) -> str:
        return self.get("logging", "destination", "") or ""

    def map_filename(self) -> str:
        name = (self.get("export", "map_filename", "") or "").strip()
        return name or DEFAULT_MAP_FILENAME

    def math_engine(self) -> str:
        engine = (self.get("render", "math_engine", "") or "").strip().lower()
        if engine not in self.MATH_ENGINES:
            logger.warning(f"Unknown math engine {engine!r}; using mathjax")
            return "mathjax"
        return engine

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from

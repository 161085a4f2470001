from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["setup_logging", "coerce_level"]

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

LOG_FILE = "vaultexport.log"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def coerce_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return _LEVELS.get(level.strip().upper(), logging.INFO)
    return logging.INFO


def setup_logging(
    level: str | int | None = None,
    *,
    destination: str | Path | None = None,
    fmt: str | None = None,
) -> None:
    """Configure root logging.

    If `destination` names a directory, logs go to `<destination>/vaultexport.log`.
    Empty or "none" logs to stderr so stdout stays free for command output.
    """
    handlers: list[logging.Handler] = []
    dest = str(destination or "").strip()
    if dest and dest.lower() not in {"none", "null", "false"}:
        logs_dir = Path(dest).expanduser()
        logs_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logs_dir / LOG_FILE, encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=coerce_level(level),
        format=fmt or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )

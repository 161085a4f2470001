from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import QSettings

from vaultexport import __version__
from vaultexport.di.container import Container
from vaultexport.domain.errors import VaultExportError
from vaultexport.services.config.ini_config_service import IniConfigService
from vaultexport.utils.constants import APP_NAME, APP_ORG
from vaultexport.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vaultexport",
        description="Export every note of a markdown vault to HTML, a single map page, or pandoc formats.",
    )
    p.add_argument("vault", type=Path, help="Vault folder")
    p.add_argument(
        "command",
        nargs="?",
        default="html-exportall",
        help="Command id to run (default: html-exportall; see --list-commands)",
    )
    p.add_argument("--open", dest="open_note", help="Vault-relative note to make active first")
    p.add_argument("--list-commands", action="store_true", help="List commands and whether they are enabled")
    p.add_argument("--output-folder", help="Store an output folder in the settings")
    p.add_argument("--pandoc", help="Store an explicit pandoc path in the settings")
    p.add_argument("--pdflatex", help="Store an explicit pdflatex path in the settings")
    p.add_argument("--settings", type=Path, help="INI settings file (default: platform settings store)")
    p.add_argument("--config", type=Path, help="Application config.ini")
    p.add_argument("--log-level", help="Logging level (overrides config)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _apply_overrides(container: Container, args: argparse.Namespace) -> bool:
    s = container.settings_service
    changed = False
    if args.output_folder is not None:
        s.set_output_folder(args.output_folder)
        changed = True
    if args.pandoc is not None:
        s.set_pandoc_path(args.pandoc)
        changed = True
    if args.pdflatex is not None:
        s.set_pdflatex_path(args.pdflatex)
        changed = True
    return changed


async def _open_initial(container: Container, requested: str | None) -> None:
    """Give the workspace an active view, like a host restoring its last open note."""
    vault = container.vault
    candidates = [requested, container.settings_service.get_last_active()]
    for path in candidates:
        if not path:
            continue
        doc = vault.get_document(path)
        if doc is not None:
            await container.workspace.set_active_document(doc)
            return
        if path == requested:
            logger.warning(f"Note not found in vault: {path}")
    docs = vault.list_documents()
    if docs:
        await container.workspace.set_active_document(docs[0])


async def _run(container: Container, args: argparse.Namespace, changed: bool) -> int:
    plugin = container.plugin
    await plugin.load()
    if changed:
        await plugin.save_settings()
    await _open_initial(container, args.open_note)

    try:
        if args.list_commands:
            for cmd in container.commands.all():
                state = "enabled" if cmd.is_enabled() else "disabled"
                print(f"{cmd.id:<28} {state:<9} {cmd.name}")
            return 0

        try:
            command = container.commands.get(args.command)
        except KeyError:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 2

        if not command.execute():
            print(f"Command is not available right now: {command.name}", file=sys.stderr)
            return 1
        await container.commands.drain()

        active = container.workspace.active_document
        if active is not None:
            container.settings_service.set_last_active(active.path)
            container.settings_service.sync()
        return 0
    finally:
        plugin.unload()


def run_app(argv: Sequence[str]) -> int:
    """Parse the command line, compose the services, and run one command to completion."""
    args = build_parser().parse_args(list(argv)[1:])

    config = IniConfigService(explicit_path=args.config)
    setup_logging(args.log_level or config.log_level(), destination=config.log_destination())
    if config.loaded_from:
        logger.debug(f"Config loaded from {config.loaded_from}")

    if args.settings:
        qsettings = QSettings(str(args.settings), QSettings.Format.IniFormat)
    else:
        qsettings = QSettings(APP_ORG, APP_NAME)

    container = Container(args.vault, qsettings=qsettings, config=config)
    changed = _apply_overrides(container, args)

    try:
        return asyncio.run(_run(container, args, changed))
    except VaultExportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
